"""
pytest configuration and shared fixtures.
"""

from fractions import Fraction

import numpy as np
import pytest

from pylinalg import Matrix, Vector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def int_matrix_2x3():
    """[[1, 2, 3], [4, 5, 6]] with integer entries."""
    return Matrix.from_flat(2, 3, [1, 2, 3, 4, 5, 6])


@pytest.fixture
def float_matrix_3x3():
    """Non-singular 3x3 with a hand-computed determinant of -306."""
    return Matrix.from_rows([
        [6.0, 1.0, 1.0],
        [4.0, -2.0, 5.0],
        [2.0, 8.0, 7.0],
    ])


@pytest.fixture
def fraction_matrix_3x3():
    """Rational 3x3 whose determinant is exactly 1/8."""
    half = Fraction(1, 2)
    return Matrix.from_rows([
        [half, 0, 0],
        [0, half, 0],
        [0, 0, half],
    ])


@pytest.fixture
def random_matrix(rng):
    """Factory for random float matrices of a given shape."""
    def make(rows, cols):
        return Matrix.from_numpy(rng.standard_normal((rows, cols)))
    return make


@pytest.fixture
def unit_vectors():
    """Standard basis of R^3 as Vectors."""
    return [
        Vector([1.0, 0.0, 0.0]),
        Vector([0.0, 1.0, 0.0]),
        Vector([0.0, 0.0, 1.0]),
    ]
