"""
Input validation utilities for pylinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent truncation or padding of operands
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Operation / parameter names included in all error messages
"""

import operator
from collections.abc import Sized
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import (
    DimensionError,
    IndexOutOfBoundsError,
    ValidationError,
)


def in_bounds(index: int, length: int) -> bool:
    """
    Return True iff 0 <= index < length. Negative indices never wrap and
    non-integral indices (e.g. 1.0) are never in bounds.
    """
    try:
        index = operator.index(index)
    except TypeError:
        return False
    return 0 <= index < length


def check_non_negative(value: int, name: str) -> int:
    """
    Verify a size argument is a non-negative integer.

    Args:
        value: Size to check (anything supporting __index__)
        name: Parameter name for error messages

    Returns:
        The value as a plain int

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    try:
        result = operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__}"
        ) from e

    if result < 0:
        raise ValidationError(f"{name}: must be non-negative, got {result}")
    return result


def check_index(index: int, length: int, name: str) -> None:
    """
    Verify an index lies in [0, length).

    Args:
        index: Index to check
        length: Extent of the indexed axis
        name: Axis name for error messages ('index', 'row', 'column')

    Raises:
        IndexOutOfBoundsError: If index is outside the valid range
    """
    if not in_bounds(index, length):
        raise IndexOutOfBoundsError(
            f"{name} {index} is out of bounds for length {length}",
            index=index,
            bounds=length,
        )


def check_flat_length(data: Sized, rows: int, cols: int) -> None:
    """
    Verify a flat row-major sequence holds exactly rows * cols elements.

    Raises:
        DimensionError: If the element count does not match
    """
    expected = rows * cols
    if len(data) != expected:
        raise DimensionError(
            f"Cannot build a {rows}x{cols} matrix from {len(data)} elements "
            f"(expected {expected})",
            operation="from_flat",
            expected=expected,
            actual=len(data),
        )


def check_same_length(left: int, right: int, operation: str) -> None:
    """
    Verify two vector operands have the same length.

    Raises:
        DimensionError: If the lengths differ
    """
    if left != right:
        raise DimensionError(
            f"{operation}: vector lengths differ ({left} vs {right})",
            operation=operation,
            expected=left,
            actual=right,
        )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two matrix operands share identical (rows, cols).

    Raises:
        DimensionError: If the shapes differ
    """
    if left != right:
        raise DimensionError(
            f"{operation}: incompatible dimensions "
            f"{left[0]}x{left[1]} and {right[0]}x{right[1]}",
            operation=operation,
            expected=left,
            actual=right,
        )


def check_square(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a matrix is square.

    Raises:
        DimensionError: If rows != cols
    """
    rows, cols = shape
    if rows != cols:
        raise DimensionError(
            f"{operation}: requires a square matrix, got {rows}x{cols}",
            operation=operation,
            expected=(rows, rows),
            actual=shape,
        )


def check_non_empty(items: Sized, name: str) -> None:
    """
    Verify a sequence has at least one element.

    Raises:
        DimensionError: If the sequence is empty
    """
    if len(items) == 0:
        raise DimensionError(
            f"{name}: expected at least one element, got none",
            operation=name,
            actual=0,
        )


def check_numeric_array(
    array: ArrayLike,
    ndim: int,
    name: str,
) -> NDArray[Any]:
    """
    Validate and convert input to a numeric numpy array.

    Unlike a blanket float conversion, integer and complex dtypes are kept
    so that the resulting Vector/Matrix preserves the element type.

    Args:
        array: Input to validate
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with a numeric dtype

    Raises:
        ValidationError: If input cannot be converted to a numeric array
        DimensionError: If the array has the wrong number of dimensions
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if result.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {result.ndim}D with shape {result.shape}",
            operation=name,
            expected=ndim,
            actual=result.ndim,
        )

    return result
