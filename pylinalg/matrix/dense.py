"""
Dense row-major matrix type.

Matrix[T] stores rows * cols elements in a flat list; entry (r, c) lives
at data[r * cols + c]. The invariant len(data) == rows * cols is checked
on every construction, so derived matrices (transpose, reshape, products)
are always valid, independent copies.

Operator mapping:
    a + b, a - b    add / subtract (shapes must match)
    a @ b           multiply (matrix product, a.cols == b.rows)
    a * k, k * a    scalar_multiply
    elementwise product is hadamard_product(); there is no operator for it

Text format: one line per row, entries separated by ", ", no trailing
newline.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.compute.tolerances import EXACT, ToleranceTier, select_tolerance
from pylinalg.core.exceptions import DimensionError
from pylinalg.core.protocols import Numeric, T
from pylinalg.core.validation import (
    check_flat_length,
    check_index,
    check_non_empty,
    check_non_negative,
    check_numeric_array,
    check_same_shape,
    check_square,
    in_bounds,
)
from pylinalg.matrix._determinant import cofactor_determinant, minor_data
from pylinalg.vector import Vector


@dataclass(eq=False)
class Matrix(Generic[T]):
    """
    Dense matrix of numeric elements, stored row-major.

    Construction:
        Matrix(rows, cols, flat_data)            (alias: Matrix.from_flat)
        Matrix.zeroes(r, c) / ones(r, c) / identity(n)
        Matrix.from_rows([...]) / from_columns([...])
        Matrix.from_numpy(array)

    Raises:
        ValidationError: Negative dimensions
        DimensionError: len(data) != rows * cols
    """
    rows: int
    cols: int
    data: list[T]

    def __post_init__(self) -> None:
        self.rows = check_non_negative(self.rows, 'rows')
        self.cols = check_non_negative(self.cols, 'cols')
        self.data = list(self.data)
        check_flat_length(self.data, self.rows, self.cols)

    # --- Construction ---

    @classmethod
    def new(cls, rows: int, cols: int, dtype: Callable[[int], T] = float) -> Matrix[T]:
        """
        rows x cols matrix ready to be filled with set().

        Contents are zero-initialised (same as zeroes) so that reading
        before filling is well defined.
        """
        return cls.zeroes(rows, cols, dtype)

    @classmethod
    def zeroes(cls, rows: int, cols: int, dtype: Callable[[int], T] = float) -> Matrix[T]:
        """Every entry dtype(0)."""
        rows = check_non_negative(rows, 'rows')
        cols = check_non_negative(cols, 'cols')
        return cls(rows, cols, [dtype(0)] * (rows * cols))

    @classmethod
    def ones(cls, rows: int, cols: int, dtype: Callable[[int], T] = float) -> Matrix[T]:
        """Every entry dtype(1)."""
        rows = check_non_negative(rows, 'rows')
        cols = check_non_negative(cols, 'cols')
        return cls(rows, cols, [dtype(1)] * (rows * cols))

    @classmethod
    def identity(cls, size: int, dtype: Callable[[int], T] = float) -> Matrix[T]:
        """size x size, dtype(1) on the diagonal and dtype(0) elsewhere."""
        matrix = cls.zeroes(size, size, dtype)
        for i in range(matrix.rows):
            matrix.data[i * matrix.cols + i] = dtype(1)
        return matrix

    @classmethod
    def from_flat(cls, rows: int, cols: int, data: Iterable[T]) -> Matrix[T]:
        """
        Matrix over a row-major flat sequence.

        Raises:
            DimensionError: If the sequence does not hold rows * cols elements
        """
        return cls(rows, cols, list(data))

    @classmethod
    def from_rows(cls, rows: Iterable[Vector[T] | Iterable[T]]) -> Matrix[T]:
        """
        Stack vectors (or plain sequences) as rows.

        Raises:
            DimensionError: If there are no rows or the rows are ragged
        """
        row_data = [list(r) for r in rows]
        check_non_empty(row_data, 'from_rows')

        width = len(row_data[0])
        for i, r in enumerate(row_data):
            if len(r) != width:
                raise DimensionError(
                    f"from_rows: row {i} has length {len(r)}, expected {width}",
                    operation='from_rows',
                    expected=width,
                    actual=len(r),
                )

        return cls(len(row_data), width, [x for r in row_data for x in r])

    @classmethod
    def from_columns(cls, columns: Iterable[Vector[T] | Iterable[T]]) -> Matrix[T]:
        """
        Stack vectors (or plain sequences) as columns.

        Raises:
            DimensionError: If there are no columns or the columns are ragged
        """
        col_data = [list(c) for c in columns]
        check_non_empty(col_data, 'from_columns')

        height = len(col_data[0])
        for j, c in enumerate(col_data):
            if len(c) != height:
                raise DimensionError(
                    f"from_columns: column {j} has length {len(c)}, expected {height}",
                    operation='from_columns',
                    expected=height,
                    actual=len(c),
                )

        width = len(col_data)
        data: list[Any] = [None] * (height * width)
        for j, c in enumerate(col_data):
            for i, x in enumerate(c):
                data[i * width + j] = x
        return cls(height, width, data)

    @classmethod
    def from_numpy(cls, array: ArrayLike) -> Matrix[Any]:
        """
        Build a Matrix from a 2D numeric array (C order).

        Raises:
            ValidationError: If the array is not numeric
            DimensionError: If the array is not 2D
        """
        arr = check_numeric_array(array, 2, 'array')
        rows, cols = arr.shape
        return cls(rows, cols, arr.ravel(order='C').tolist())

    # --- Shape ---

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    def is_square(self) -> bool:
        return self.rows == self.cols

    # --- Element access ---

    def _in_bounds(self, row: int, col: int) -> bool:
        return in_bounds(row, self.rows) and in_bounds(col, self.cols)

    def _check_bounds(self, row: int, col: int) -> None:
        check_index(row, self.rows, 'row')
        check_index(col, self.cols, 'column')

    def get(self, row: int, col: int) -> T | None:
        """Entry (row, col), or None outside [0, rows) x [0, cols)."""
        if not self._in_bounds(row, col):
            return None
        return self.data[row * self.cols + col]

    def set(self, row: int, col: int, value: T) -> None:
        """
        Replace entry (row, col).

        Raises:
            IndexOutOfBoundsError: Outside the matrix; nothing is modified
        """
        self._check_bounds(row, col)
        self.data[row * self.cols + col] = value

    def __getitem__(self, key: tuple[int, int]) -> T:
        row, col = key
        self._check_bounds(row, col)
        return self.data[row * self.cols + col]

    def __setitem__(self, key: tuple[int, int], value: T) -> None:
        row, col = key
        self.set(row, col, value)

    def row(self, index: int) -> Vector[T] | None:
        """Copy of row `index` as a Vector, or None if out of range."""
        if not in_bounds(index, self.rows):
            return None
        start = index * self.cols
        return Vector(self.data[start:start + self.cols])

    def column(self, index: int) -> Vector[T] | None:
        """Copy of column `index` as a Vector, or None if out of range."""
        if not in_bounds(index, self.cols):
            return None
        return Vector(self.data[index::self.cols])

    def to_rows(self) -> list[Vector[T]]:
        return [self.row(i) for i in range(self.rows)]

    def to_columns(self) -> list[Vector[T]]:
        return [self.column(j) for j in range(self.cols)]

    # --- Equality ---

    def equals(self, other: Matrix[T]) -> bool:
        """True iff same shape and elementwise equal."""
        return self.shape == other.shape and self.data == other.data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    def allclose(self, other: Matrix[Any], tolerance: ToleranceTier | None = None) -> bool:
        """
        Approximate elementwise equality; matrices of different shape are
        never close. The tolerance defaults to the tier of the element type.
        """
        if self.shape != other.shape:
            return False
        if tolerance is None:
            tolerance = select_tolerance(self.data[0]) if self.data else EXACT
        if tolerance.rtol == 0.0 and tolerance.atol == 0.0:
            return self.equals(other)
        return bool(np.allclose(
            self.to_numpy(), other.to_numpy(),
            rtol=tolerance.rtol, atol=tolerance.atol,
        ))

    # --- Structural transforms ---

    def transpose(self) -> Matrix[T]:
        """cols x rows matrix with entry (i, j) equal to self (j, i)."""
        data = [
            self.data[r * self.cols + c]
            for c in range(self.cols)
            for r in range(self.rows)
        ]
        return Matrix(self.cols, self.rows, data)

    def reshape(self, new_rows: int, new_cols: int) -> Matrix[T]:
        """
        Same row-major sequence under new dimensions.

        Raises:
            DimensionError: If new_rows * new_cols != rows * cols
        """
        new_rows = check_non_negative(new_rows, 'new_rows')
        new_cols = check_non_negative(new_cols, 'new_cols')
        if new_rows * new_cols != len(self.data):
            raise DimensionError(
                f"reshape: cannot view {self.rows}x{self.cols} "
                f"({len(self.data)} elements) as {new_rows}x{new_cols}",
                operation='reshape',
                expected=len(self.data),
                actual=new_rows * new_cols,
            )
        return Matrix(new_rows, new_cols, self.data)

    def minor(self, row: int, col: int) -> Matrix[T]:
        """
        Submatrix with `row` and `col` deleted.

        Raises:
            IndexOutOfBoundsError: If row or col is outside the matrix
        """
        self._check_bounds(row, col)
        data = minor_data(self.data, self.rows, self.cols, row, col)
        return Matrix(self.rows - 1, self.cols - 1, data)

    # --- Arithmetic ---

    def _combine(self, other: Matrix[T], op: Callable[[T, T], Any], operation: str) -> Matrix[Any]:
        check_same_shape(self.shape, other.shape, operation)
        return Matrix(
            self.rows, self.cols,
            [op(a, b) for a, b in zip(self.data, other.data)],
        )

    def add(self, other: Matrix[T]) -> Matrix[T]:
        """Elementwise sum; raises DimensionError unless shapes match."""
        return self._combine(other, lambda a, b: a + b, 'add')

    def subtract(self, other: Matrix[T]) -> Matrix[T]:
        """Elementwise difference; raises DimensionError unless shapes match."""
        return self._combine(other, lambda a, b: a - b, 'subtract')

    def hadamard_product(self, other: Matrix[T]) -> Matrix[T]:
        """Elementwise product; raises DimensionError unless shapes match."""
        return self._combine(other, lambda a, b: a * b, 'hadamard_product')

    def multiply(self, other: Matrix[T]) -> Matrix[T]:
        """
        Matrix product, self.rows x other.cols.

        Each output cell is the dot product of a row of self and a column
        of other, accumulated from zero.

        Raises:
            DimensionError: If self.cols != other.rows
        """
        if self.cols != other.rows:
            raise DimensionError(
                f"multiply: cannot multiply {self.rows}x{self.cols} "
                f"by {other.rows}x{other.cols}",
                operation='multiply',
                expected=self.cols,
                actual=other.rows,
            )

        columns = [other.data[j::other.cols] for j in range(other.cols)]
        data = []
        for i in range(self.rows):
            row = self.data[i * self.cols:(i + 1) * self.cols]
            for column in columns:
                data.append(sum(a * b for a, b in zip(row, column)))
        return Matrix(self.rows, other.cols, data)

    def scalar_multiply(self, scalar: Numeric) -> Matrix[Any]:
        """Every entry multiplied by `scalar`."""
        return Matrix(self.rows, self.cols, [x * scalar for x in self.data])

    def dot(self, other: Matrix[T]) -> Any:
        """
        Frobenius inner product: sum of elementwise products.

        Raises:
            DimensionError: Unless shapes match
        """
        check_same_shape(self.shape, other.shape, 'dot')
        return sum(a * b for a, b in zip(self.data, other.data))

    def trace(self) -> Any:
        """
        Sum of the diagonal.

        Raises:
            DimensionError: If the matrix is not square
        """
        check_square(self.shape, 'trace')
        return sum(self.data[i * self.cols + i] for i in range(self.rows))

    def determinant(self) -> Any:
        """
        Determinant by cofactor expansion along the first row.

        Exact in the element type's arithmetic and O(n!) in time; intended
        for small matrices. Warns (RuntimeWarning) above
        pylinalg.core.compute.DETERMINANT_WARN_SIZE.

        Raises:
            DimensionError: If the matrix is not square or is 0x0
        """
        return cofactor_determinant(self)

    def __add__(self, other: object) -> Matrix[T]:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Matrix[T]:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __matmul__(self, other: object) -> Matrix[T]:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __mul__(self, other: object) -> Matrix[Any]:
        if isinstance(other, (Matrix, Vector)):
            return NotImplemented
        return self.scalar_multiply(other)

    def __rmul__(self, other: object) -> Matrix[Any]:
        if isinstance(other, (Matrix, Vector)):
            return NotImplemented
        # k * x keeps the scalar on the left for non-commutative elements
        return Matrix(self.rows, self.cols, [other * x for x in self.data])

    # --- Conversion ---

    def to_numpy(self, dtype: Any = None) -> NDArray[Any]:
        return np.asarray(self.data, dtype=dtype).reshape(self.rows, self.cols)

    def copy(self) -> Matrix[T]:
        return Matrix(self.rows, self.cols, self.data)

    def __str__(self) -> str:
        return "\n".join(
            ", ".join(str(x) for x in self.data[i * self.cols:(i + 1) * self.cols])
            for i in range(self.rows)
        )

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols}, data={self.data!r})"
