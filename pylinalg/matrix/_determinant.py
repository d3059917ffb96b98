"""
Determinant by cofactor (Laplace) expansion along the first row.

The expansion is exact for any ring of elements (integers and Fractions
give exact results) but takes O(n!) operations. A RuntimeWarning is
emitted above DETERMINANT_WARN_SIZE; no decomposition-based fallback is
attempted.
"""

from __future__ import annotations

import logging
import math
import warnings
from typing import TYPE_CHECKING, Any

from pylinalg.core.compute.tolerances import DETERMINANT_WARN_SIZE
from pylinalg.core.validation import check_non_empty, check_square

if TYPE_CHECKING:
    from pylinalg.matrix.dense import Matrix

logger = logging.getLogger(__name__)


def minor_data(data: list[Any], rows: int, cols: int, row: int, col: int) -> list[Any]:
    """Row-major entries left after deleting `row` and `col`."""
    return [
        data[r * cols + c]
        for r in range(rows) if r != row
        for c in range(cols) if c != col
    ]


def _expand(data: list[Any], n: int) -> Any:
    if n == 1:
        return data[0]
    if n == 2:
        return data[0] * data[3] - data[1] * data[2]

    total: Any = 0
    for j in range(n):
        term = data[j] * _expand(minor_data(data, n, n, 0, j), n - 1)
        # Signs alternate +, -, +, ... across row 0
        total = total + term if j % 2 == 0 else total - term
    return total


def cofactor_determinant(matrix: Matrix[Any]) -> Any:
    """
    Determinant of a square, non-empty matrix.

    Args:
        matrix: Square matrix

    Returns:
        The determinant, in the element type's arithmetic

    Raises:
        DimensionError: If the matrix is not square or has no entries
    """
    check_square(matrix.shape, 'determinant')
    check_non_empty(matrix.data, 'determinant')

    n = matrix.rows
    if n > DETERMINANT_WARN_SIZE:
        warnings.warn(
            f"Cofactor determinant of a {n}x{n} matrix expands "
            f"{math.factorial(n)} terms; expect long run times",
            RuntimeWarning,
            stacklevel=3,
        )

    logger.debug("cofactor expansion of %dx%d matrix", n, n)
    return _expand(matrix.data, n)
