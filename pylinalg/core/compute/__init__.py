"""
Shared compute configuration for pylinalg.

Submodules:
    tolerances: Tolerance tiers for approximate comparison and the
        cofactor-determinant size threshold
"""

from pylinalg.core.compute.tolerances import (
    DETERMINANT_WARN_SIZE,
    EXACT,
    FP32,
    FP64,
    ToleranceTier,
    select_tolerance,
)

__all__ = [
    "ToleranceTier",
    "EXACT",
    "FP64",
    "FP32",
    "DETERMINANT_WARN_SIZE",
    "select_tolerance",
]
