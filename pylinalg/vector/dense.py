"""
Dense vector type.

Vector[T] owns a contiguous list of elements and provides elementwise
arithmetic, reductions and mapping. Every operation that combines two
vectors allocates a fresh result; the only in-place mutation is set().

Length policy:
    - add/subtract/multiply/divide and dot raise DimensionError on a
      length mismatch
    - zip_map pairs elements up to the shorter length and silently drops
      the rest (documented, intentional)
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Generic

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.compute.tolerances import EXACT, ToleranceTier, select_tolerance
from pylinalg.core.exceptions import IncomparableElementsError
from pylinalg.core.protocols import T, U
from pylinalg.core.validation import (
    check_index,
    check_non_negative,
    check_numeric_array,
    check_same_length,
    in_bounds,
)


def _compare(a: Any, b: Any) -> int:
    """Three-way comparison that refuses unordered pairs (e.g. NaN)."""
    if a < b:
        return -1
    if a > b:
        return 1
    if a == b:
        return 0
    raise IncomparableElementsError(
        f"Cannot order elements {a!r} and {b!r}",
        left=a,
        right=b,
    )


@dataclass(eq=False)
class Vector(Generic[T]):
    """
    Dense, growable vector of numeric elements.

    Construction:
        Vector([1.0, 2.0, 3.0])
        Vector.new() / Vector.with_capacity(n)
        Vector.from_elem(0.0, n)
        Vector.from_numpy(array)

    The constructor copies its input, so a Vector never aliases a list
    owned by the caller.
    """
    data: list[T] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.data = list(self.data)

    # --- Construction ---

    @classmethod
    def new(cls) -> Vector[T]:
        """Empty vector."""
        return cls()

    @classmethod
    def with_capacity(cls, capacity: int) -> Vector[T]:
        """
        Empty vector with a capacity hint.

        Python lists grow on demand, so the hint is validated and then
        ignored; the result is indistinguishable from new().
        """
        check_non_negative(capacity, 'capacity')
        return cls()

    @classmethod
    def from_elem(cls, value: T, length: int) -> Vector[T]:
        """Vector of `length` slots, each equal to `value`."""
        length = check_non_negative(length, 'length')
        return cls([value] * length)

    @classmethod
    def from_list(cls, data: Iterable[T]) -> Vector[T]:
        """Vector holding a copy of `data`."""
        return cls(list(data))

    @classmethod
    def from_numpy(cls, array: ArrayLike) -> Vector[Any]:
        """
        Build a Vector from a 1D numeric array.

        Elements are converted to Python scalars (int, float, complex),
        keeping the array's kind.

        Raises:
            ValidationError: If the array is not numeric
            DimensionError: If the array is not 1D
        """
        arr = check_numeric_array(array, 1, 'array')
        return cls(arr.tolist())

    # --- Size and element access ---

    def __len__(self) -> int:
        return len(self.data)

    def is_empty(self) -> bool:
        return not self.data

    def get(self, index: int) -> T | None:
        """Element at `index`, or None when out of range."""
        if not in_bounds(index, len(self.data)):
            return None
        return self.data[index]

    def set(self, index: int, value: T) -> None:
        """
        Replace the element at `index`.

        Raises:
            IndexOutOfBoundsError: If index is outside [0, len); the vector
                is left unchanged
        """
        check_index(index, len(self.data), 'index')
        self.data[index] = value

    def __getitem__(self, index: int) -> T:
        check_index(index, len(self.data), 'index')
        return self.data[index]

    def __setitem__(self, index: int, value: T) -> None:
        self.set(index, value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.data)

    # --- Equality ---

    def equals(self, other: Vector[T]) -> bool:
        """True iff same length and elementwise equal."""
        return self.data == other.data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.equals(other)

    def allclose(self, other: Vector[Any], tolerance: ToleranceTier | None = None) -> bool:
        """
        Approximate elementwise equality.

        Uses numpy's |a - b| <= atol + rtol * |b| test. When no tolerance is
        given, the tier is chosen from the element type (exact for integers,
        rationals and decimals). Vectors of different lengths are never
        close.
        """
        if len(self.data) != len(other.data):
            return False
        if tolerance is None:
            tolerance = select_tolerance(self.data[0]) if self.data else EXACT
        if tolerance.rtol == 0.0 and tolerance.atol == 0.0:
            return self.equals(other)
        return bool(np.allclose(
            self.to_numpy(), other.to_numpy(),
            rtol=tolerance.rtol, atol=tolerance.atol,
        ))

    # --- Mapping ---

    def element_wise_apply(self, f: Callable[[T], T]) -> Vector[T]:
        """New vector with the pure, type-preserving `f` applied to every element."""
        return Vector([f(x) for x in self.data])

    def map(self, f: Callable[[T], U]) -> Vector[U]:
        """New vector of f(x); the element type may change."""
        return Vector([f(x) for x in self.data])

    def zip_map(self, other: Vector[T], f: Callable[[T, T], U]) -> Vector[U]:
        """
        Combine elements at equal indices with `f`.

        The result has min(len(self), len(other)) elements: trailing
        elements of the longer vector are dropped without error. Use the
        arithmetic methods when a length mismatch should fail.
        """
        return Vector([f(a, b) for a, b in zip(self.data, other.data)])

    # --- Reductions ---

    def sum(self) -> Any:
        """Fold with + starting from zero; an empty vector sums to 0."""
        return sum(self.data)

    def mean(self) -> float | None:
        """Arithmetic mean as a float, or None when empty."""
        if not self.data:
            return None
        return float(self.sum()) / len(self.data)

    def min(self) -> T | None:
        """
        Smallest element, or None when empty.

        Raises:
            IncomparableElementsError: If a compared pair is unordered
                (e.g. contains NaN). This is a programming error in the
                caller's data and is not meant to be caught and retried.
        """
        if not self.data:
            return None
        best = self.data[0]
        for x in self.data[1:]:
            if _compare(x, best) < 0:
                best = x
        return best

    def max(self) -> T | None:
        """
        Largest element, or None when empty.

        Raises:
            IncomparableElementsError: If a compared pair is unordered.
        """
        if not self.data:
            return None
        best = self.data[0]
        for x in self.data[1:]:
            if _compare(x, best) >= 0:
                best = x
        return best

    def dot(self, other: Vector[T]) -> Any:
        """
        Sum of elementwise products.

        Raises:
            DimensionError: If the vectors differ in length
        """
        check_same_length(len(self.data), len(other.data), 'dot')
        return sum(a * b for a, b in zip(self.data, other.data))

    def norm(self) -> Any:
        """
        Euclidean norm, sqrt(sum(|x|**2)).

        Uses |x| so complex elements give a real norm. The root is taken
        with the element type's own sqrt() when it has one (Decimal stays
        Decimal), otherwise with math.sqrt.
        """
        squared = sum(abs(x) ** 2 for x in self.data)
        if hasattr(squared, 'sqrt'):
            return squared.sqrt()
        return math.sqrt(squared)

    def normalize(self) -> Vector[Any]:
        """
        Unit vector in the direction of self.

        A zero vector has no direction; dividing by its zero norm raises
        ZeroDivisionError for Python scalars. Callers are expected to
        check for it.
        """
        length = self.norm()
        return Vector([x / length for x in self.data])

    # --- Elementwise arithmetic ---

    def _elementwise(self, other: Vector[T], op: Callable[[T, T], T], operation: str) -> Vector[T]:
        check_same_length(len(self.data), len(other.data), operation)
        return Vector([op(a, b) for a, b in zip(self.data, other.data)])

    def add(self, other: Vector[T]) -> Vector[T]:
        """Elementwise sum; raises DimensionError on length mismatch."""
        return self._elementwise(other, lambda a, b: a + b, 'add')

    def subtract(self, other: Vector[T]) -> Vector[T]:
        """Elementwise difference; raises DimensionError on length mismatch."""
        return self._elementwise(other, lambda a, b: a - b, 'subtract')

    def multiply(self, other: Vector[T]) -> Vector[T]:
        """Elementwise product; raises DimensionError on length mismatch."""
        return self._elementwise(other, lambda a, b: a * b, 'multiply')

    def divide(self, other: Vector[T]) -> Vector[Any]:
        """Elementwise quotient; raises DimensionError on length mismatch."""
        return self._elementwise(other, lambda a, b: a / b, 'divide')

    def __add__(self, other: object) -> Vector[T]:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Vector[T]:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> Vector[T]:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: object) -> Vector[Any]:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.divide(other)

    # --- Conversion ---

    def to_tuple(self, length: int) -> tuple[T, ...] | None:
        """Elements as a fixed-size tuple iff len(self) == length, else None."""
        if len(self.data) != length:
            return None
        return tuple(self.data)

    def to_list(self) -> list[T]:
        return list(self.data)

    def to_numpy(self, dtype: Any = None) -> NDArray[Any]:
        return np.asarray(self.data, dtype=dtype)

    def copy(self) -> Vector[T]:
        return Vector(self.data)

    def __str__(self) -> str:
        return "[" + ", ".join(str(x) for x in self.data) + "]"

    def __repr__(self) -> str:
        return f"Vector({self.data!r})"
