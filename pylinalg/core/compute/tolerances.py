"""
Tolerance tiers and compute thresholds.

Defines precision expectations for approximate comparison of vectors and
matrices:
- EXACT: integer, rational and decimal elements compare exactly
- FP64: double precision (Python float, numpy.float64, complex)
- FP32: relaxed for single-precision numpy elements

Used by Vector.allclose / Matrix.allclose and by the test suite.
"""

from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from numbers import Integral
from typing import Any

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Integer / rational / decimal elements: exact equality',
)

FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision: accumulated rounding of a few ulps',
)

FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision numpy elements',
)

# Cofactor expansion is O(n!): 10x10 already needs ~3.6 million products.
# Matrix.determinant emits a RuntimeWarning above this dimension.
DETERMINANT_WARN_SIZE = 8


def select_tolerance(element: Any) -> ToleranceTier:
    """Select the tolerance tier for a sample element (or its type)."""
    kind = element if isinstance(element, type) else type(element)
    if issubclass(kind, (Integral, Fraction, Decimal, np.integer)):
        return EXACT
    if issubclass(kind, (np.float16, np.float32, np.complex64)):
        return FP32
    return FP64
