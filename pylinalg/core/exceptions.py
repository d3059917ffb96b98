"""
Exception hierarchy for pylinalg.

All exceptions inherit from PyLinalgError to allow catching any
library-specific error. The two errors users meet most often also inherit
from the matching builtin (ValueError, IndexError) so generic handlers
keep working.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Getters signal absence with None; setters and operators raise
"""

from typing import Any


class PyLinalgError(Exception):
    """Base exception for all pylinalg errors."""
    pass


class ValidationError(PyLinalgError, ValueError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks, e.g. a
    negative dimension or a non-numeric array.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand dimensions are incorrect or inconsistent.

    Raised by every operation that needs compatible shapes: matrix
    add/subtract/multiply, dot and Hadamard products, trace and determinant
    of a non-square matrix, reshape, and construction from a flat sequence
    or from ragged rows/columns. Vector binary operators raise it on a
    length mismatch.

    Attributes:
        operation: Name of the operation that rejected its operands
        expected: Expected length or shape, if known
        actual: Actual length or shape, if known
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        expected: Any = None,
        actual: Any = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.expected = expected
        self.actual = actual


class IndexOutOfBoundsError(PyLinalgError, IndexError):
    """
    Index lies outside the valid range.

    Raised by Vector.set / Matrix.set and by subscript access. The
    non-raising getters (Vector.get, Matrix.get, row, column) return None
    for the same condition instead.

    Attributes:
        index: The offending index (int, or (row, col) tuple)
        bounds: The valid extent (length, or (rows, cols) tuple)
    """

    def __init__(
        self,
        message: str,
        index: Any = None,
        bounds: Any = None,
    ):
        super().__init__(message)
        self.index = index
        self.bounds = bounds


class NumericalError(PyLinalgError):
    """
    Numerical computation failed.

    Base class for errors arising from the values themselves rather than
    from the shape of the operands.
    """
    pass


class IncomparableElementsError(NumericalError):
    """
    Two elements could not be ordered.

    Raised by Vector.min / Vector.max when a compared pair has no ordering
    (NaN being the usual culprit). This signals a programming error in the
    caller's data, not a recoverable condition.

    Attributes:
        left: First element of the failing comparison
        right: Second element of the failing comparison
    """

    def __init__(self, message: str, left: Any = None, right: Any = None):
        super().__init__(message)
        self.left = left
        self.right = right
