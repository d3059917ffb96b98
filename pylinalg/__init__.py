"""
pylinalg: generic dense linear-algebra primitives for Python.

Vector and Matrix work over any element type that supports the arithmetic
an operation needs: int, float, complex, Fraction, Decimal or NumPy
scalars. Exact element types give exact results (e.g. an integer
determinant stays an integer).

Submodules:
    vector: Vector type
    matrix: Matrix type
    core: exceptions, validation, protocols and tolerance configuration
"""

import logging as _logging

__version__ = "0.1.0"

from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    DimensionError,
    IndexOutOfBoundsError,
    NumericalError,
    IncomparableElementsError,
)
from pylinalg.vector import Vector
from pylinalg.matrix import Matrix

__all__ = [
    "__version__",
    "Vector",
    "Matrix",
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfBoundsError",
    "NumericalError",
    "IncomparableElementsError",
]

# Library code logs but never configures handlers; applications opt in.
_logging.getLogger(__name__).addHandler(_logging.NullHandler())
