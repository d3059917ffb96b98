"""
Tests for Matrix construction, indexing, row/column conversion and display.
"""

from fractions import Fraction

import numpy as np
import pytest

from pylinalg import (
    DimensionError,
    IndexOutOfBoundsError,
    Matrix,
    ValidationError,
    Vector,
)


# ═══════════════════════════════════════════════════════════════════════
# Factories
# ═══════════════════════════════════════════════════════════════════════


class TestFactories:

    def test_zeroes(self):
        m = Matrix.zeroes(2, 3)
        assert m.shape == (2, 3)
        assert m.data == [0.0] * 6

    def test_ones(self):
        m = Matrix.ones(3, 2)
        assert m.shape == (3, 2)
        assert all(x == 1.0 for x in m.data)

    def test_new_is_zero_initialised(self):
        assert Matrix.new(2, 2) == Matrix.zeroes(2, 2)

    def test_dtype_int(self):
        m = Matrix.ones(2, 2, dtype=int)
        assert all(type(x) is int for x in m.data)

    def test_dtype_fraction(self):
        m = Matrix.identity(2, dtype=Fraction)
        assert m[0, 0] == Fraction(1)
        assert isinstance(m[0, 1], Fraction)

    def test_identity(self):
        m = Matrix.identity(3)
        for i in range(3):
            for j in range(3):
                assert m[i, j] == (1.0 if i == j else 0.0)

    def test_identity_matches_numpy(self):
        np.testing.assert_array_equal(Matrix.identity(4).to_numpy(), np.eye(4))

    def test_zero_size_allowed(self):
        m = Matrix.zeroes(0, 3)
        assert m.shape == (0, 3)
        assert m.data == []

    def test_negative_dimension_rejected(self):
        with pytest.raises(ValidationError):
            Matrix.zeroes(-1, 2)


class TestFromFlat:

    def test_from_flat(self):
        m = Matrix.from_flat(2, 2, [1.0, 2.1, 3.5, 4.6])
        assert m[0, 1] == 2.1
        assert m[1, 0] == 3.5

    def test_size_mismatch(self):
        with pytest.raises(DimensionError) as exc_info:
            Matrix.from_flat(2, 2, [1, 2, 3])
        assert exc_info.value.expected == 4
        assert exc_info.value.actual == 3

    def test_direct_constructor_validates(self):
        with pytest.raises(DimensionError):
            Matrix(2, 3, [1, 2, 3, 4, 5])

    def test_copies_input(self):
        source = [1, 2, 3, 4]
        m = Matrix.from_flat(2, 2, source)
        source[0] = 99
        assert m[0, 0] == 1


class TestFromRowsColumns:

    def test_from_rows_vectors(self):
        m = Matrix.from_rows([Vector([1, 2, 3]), Vector([4, 5, 6])])
        assert m.shape == (2, 3)
        assert m.data == [1, 2, 3, 4, 5, 6]

    def test_from_rows_plain_lists(self):
        assert Matrix.from_rows([[1, 2], [3, 4]]).data == [1, 2, 3, 4]

    def test_from_rows_empty(self):
        with pytest.raises(DimensionError):
            Matrix.from_rows([])

    def test_from_rows_ragged(self):
        with pytest.raises(DimensionError, match="row 1 has length 1, expected 2"):
            Matrix.from_rows([Vector([1, 2]), Vector([3])])

    def test_from_columns(self):
        m = Matrix.from_columns([Vector([1, 4]), Vector([2, 5]), Vector([3, 6])])
        assert m.shape == (2, 3)
        assert m.data == [1, 2, 3, 4, 5, 6]

    def test_from_columns_empty(self):
        with pytest.raises(DimensionError):
            Matrix.from_columns([])

    def test_from_columns_ragged(self):
        with pytest.raises(DimensionError, match="column 2"):
            Matrix.from_columns([[1, 2], [3, 4], [5]])

    def test_round_trip_rows(self, int_matrix_2x3):
        rebuilt = Matrix.from_rows([int_matrix_2x3.row(i) for i in range(2)])
        assert rebuilt == int_matrix_2x3

    def test_round_trip_columns(self, random_matrix):
        m = random_matrix(4, 3)
        assert Matrix.from_columns(m.to_columns()) == m

    def test_round_trip_random_rows(self, random_matrix):
        m = random_matrix(5, 2)
        assert Matrix.from_rows(m.to_rows()) == m


class TestFromNumpy:

    def test_from_numpy(self):
        arr = np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        m = Matrix.from_numpy(arr)
        assert m.shape == (3, 2)
        np.testing.assert_array_equal(m.to_numpy(), arr)

    def test_fortran_order_input(self):
        arr = np.asfortranarray(np.arange(6).reshape(2, 3))
        m = Matrix.from_numpy(arr)
        assert m.row(1).data == [3, 4, 5]

    def test_rejects_1d(self):
        with pytest.raises(DimensionError):
            Matrix.from_numpy(np.arange(3))


# ═══════════════════════════════════════════════════════════════════════
# Indexing
# ═══════════════════════════════════════════════════════════════════════


class TestIndexing:

    def test_get(self, int_matrix_2x3):
        assert int_matrix_2x3.get(1, 2) == 6

    @pytest.mark.parametrize("row,col", [(2, 0), (0, 3), (-1, 0), (0, -1)])
    def test_get_out_of_range_is_none(self, int_matrix_2x3, row, col):
        assert int_matrix_2x3.get(row, col) is None

    def test_get_float_index_is_none(self, int_matrix_2x3):
        assert int_matrix_2x3.get(1.0, 0) is None
        assert int_matrix_2x3.get(0, 0.5) is None

    def test_set(self, int_matrix_2x3):
        int_matrix_2x3.set(0, 0, 10)
        assert int_matrix_2x3[0, 0] == 10

    def test_set_row_out_of_range(self, int_matrix_2x3):
        before = list(int_matrix_2x3.data)
        with pytest.raises(IndexOutOfBoundsError, match="row 2"):
            int_matrix_2x3.set(2, 0, 99)
        assert int_matrix_2x3.data == before

    def test_set_col_out_of_range(self, int_matrix_2x3):
        before = list(int_matrix_2x3.data)
        with pytest.raises(IndexOutOfBoundsError, match="column 3"):
            int_matrix_2x3.set(0, 3, 99)
        assert int_matrix_2x3.data == before

    def test_subscript_assignment(self):
        m = Matrix.zeroes(2, 2)
        m[1, 0] = 7.0
        assert m.data == [0.0, 0.0, 7.0, 0.0]

    def test_subscript_read_out_of_range(self, int_matrix_2x3):
        with pytest.raises(IndexOutOfBoundsError):
            _ = int_matrix_2x3[5, 5]

    def test_row_and_column(self, int_matrix_2x3):
        assert int_matrix_2x3.row(0) == Vector([1, 2, 3])
        assert int_matrix_2x3.column(1) == Vector([2, 5])

    def test_row_column_out_of_range(self, int_matrix_2x3):
        assert int_matrix_2x3.row(2) is None
        assert int_matrix_2x3.column(3) is None

    def test_row_is_copy(self, int_matrix_2x3):
        r = int_matrix_2x3.row(0)
        r.set(0, 100)
        assert int_matrix_2x3[0, 0] == 1


# ═══════════════════════════════════════════════════════════════════════
# Equality and display
# ═══════════════════════════════════════════════════════════════════════


class TestEqualityAndDisplay:

    def test_same_data_different_shape_not_equal(self):
        assert Matrix.zeroes(2, 3) != Matrix.zeroes(3, 2)

    def test_allclose(self):
        a = Matrix.from_flat(1, 2, [0.1 + 0.2, 1.0])
        b = Matrix.from_flat(1, 2, [0.3, 1.0])
        assert a != b
        assert a.allclose(b)

    def test_allclose_shape_mismatch(self):
        assert not Matrix.zeroes(1, 2).allclose(Matrix.zeroes(2, 1))

    def test_copy_independent(self, int_matrix_2x3):
        c = int_matrix_2x3.copy()
        c[0, 0] = 0
        assert int_matrix_2x3[0, 0] == 1

    def test_str(self, int_matrix_2x3):
        assert str(int_matrix_2x3) == "1, 2, 3\n4, 5, 6"

    def test_str_identity(self):
        assert str(Matrix.identity(2)) == "1.0, 0.0\n0.0, 1.0"

    def test_repr(self):
        m = Matrix.from_flat(1, 2, [1, 2])
        assert repr(m) == "Matrix(rows=1, cols=2, data=[1, 2])"
