"""
Core protocols for pylinalg.

Vector and Matrix are generic over their element type. Rather than
restricting elements to a fixed set of Python types, the arithmetic each
operation needs is described structurally: anything that supports the
relevant dunder methods works (int, float, complex, Fraction, Decimal,
NumPy scalars, user-defined field elements).

Design Principles:
    - Minimal contracts: prescribe only what arithmetic actually uses
    - Structural typing (Protocol), not nominal (ABC)
"""

from typing import Any, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class Numeric(Protocol):
    """
    Capability protocol for matrix/vector elements.

    Covers the ring operations used by every arithmetic method plus true
    division, which Vector.divide / Vector.normalize require.
    """

    def __add__(self, other: Any) -> Any:
        ...

    def __sub__(self, other: Any) -> Any:
        ...

    def __mul__(self, other: Any) -> Any:
        ...

    def __truediv__(self, other: Any) -> Any:
        ...


# Element type variables
T = TypeVar('T')
U = TypeVar('U')
