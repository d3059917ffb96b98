"""
Core infrastructure for pylinalg.

This module provides shared abstractions and utilities used by the vector
and matrix submodules.

Key components:
    protocols: Numeric element capability protocol
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Tolerance tiers and thresholds
"""

from pylinalg.core.protocols import Numeric
from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    DimensionError,
    IndexOutOfBoundsError,
    NumericalError,
    IncomparableElementsError,
)

__all__ = [
    # Protocols
    "Numeric",
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfBoundsError",
    "NumericalError",
    "IncomparableElementsError",
]
