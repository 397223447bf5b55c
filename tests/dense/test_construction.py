"""
Tests for Matrix construction.

Validates:
    - Matrix(rows, cols[, value]) sizes, fill, and negative-size rejection
    - from_column_packed / from_row_packed layout and length rules
    - from_matrix / copy / clone independence
    - from_array copying and shape checks
"""

import copy

import numpy as np
import pytest

from pyjama import Matrix
from pyjama.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    InvalidSizeError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Matrix(rows, cols[, value])
# ═══════════════════════════════════════════════════════════════════════


class TestSizedConstructor:

    @pytest.mark.parametrize("rows,cols", [(1, 2), (3, 3), (0, 2), (3, 0), (0, 0)])
    def test_dimensions_and_zero_fill(self, rows, cols):
        m = Matrix(rows, cols)
        assert m.get_row_dimension() == rows
        assert m.get_column_dimension() == cols
        assert m.rows == rows
        assert m.cols == cols
        assert m.shape == (rows, cols)
        for i in range(rows):
            for j in range(cols):
                assert m.get(i, j) == 0.0

    @pytest.mark.parametrize("rows,cols", [(1, 2), (0, 2), (3, 0)])
    def test_fill_value(self, rows, cols):
        m = Matrix(rows, cols, 13.0)
        assert m.shape == (rows, cols)
        for i in range(rows):
            for j in range(cols):
                assert m.get(i, j) == 13.0

    def test_integer_fill_value(self):
        m = Matrix(2, 2, 7)
        assert m.get(1, 1) == 7.0

    def test_negative_rows(self):
        with pytest.raises(InvalidSizeError):
            Matrix(-2, 2, 13.0)

    def test_negative_cols(self):
        with pytest.raises(InvalidSizeError):
            Matrix(2, -2)

    def test_non_integer_size(self):
        with pytest.raises(ValidationError):
            Matrix(2.5, 2)

    def test_non_numeric_value(self):
        with pytest.raises(ValidationError):
            Matrix(2, 2, "x")

    def test_storage_is_float64(self):
        assert Matrix(2, 2).get_array().dtype == np.float64


# ═══════════════════════════════════════════════════════════════════════
# from_column_packed / from_row_packed
# ═══════════════════════════════════════════════════════════════════════


class TestColumnPacked:

    def test_column_major_layout(self):
        m = Matrix.from_column_packed([0.0, 1.0, 2.0, 3.0], 2)
        assert m.get_row_dimension() == 2
        assert m.get_column_dimension() == 2
        assert m.get(0, 0) == 0.0
        assert m.get(1, 0) == 1.0
        assert m.get(0, 1) == 2.0
        assert m.get(1, 1) == 3.0

    def test_single_column(self):
        m = Matrix.from_column_packed([0.0, 1.0], 2)
        assert m.shape == (2, 1)

    def test_single_row(self):
        m = Matrix.from_column_packed([0.0, 1.0], 1)
        assert m.shape == (1, 2)
        assert m.get(0, 1) == 1.0

    def test_rectangular(self):
        m = Matrix.from_column_packed(np.arange(6.0), 3)
        assert m.shape == (3, 2)
        np.testing.assert_array_equal(
            m.to_numpy(), [[0.0, 3.0], [1.0, 4.0], [2.0, 5.0]]
        )

    def test_empty_values(self):
        m = Matrix.from_column_packed([], 3)
        assert m.shape == (3, 0)

    def test_zero_rows_empty_values(self):
        m = Matrix.from_column_packed([], 0)
        assert m.shape == (0, 0)

    def test_zero_rows_non_empty_values(self):
        with pytest.raises(DimensionMismatchError):
            Matrix.from_column_packed([1.0, 2.0], 0)

    def test_length_not_multiple(self):
        with pytest.raises(DimensionMismatchError, match="multiple of rows"):
            Matrix.from_column_packed([1.0, 2.0, 3.0], 2)

    def test_negative_rows(self):
        with pytest.raises(InvalidSizeError):
            Matrix.from_column_packed([1.0], -1)

    def test_rejects_2d_values(self):
        with pytest.raises(DimensionError):
            Matrix.from_column_packed([[1.0, 2.0]], 1)

    def test_does_not_alias_input(self):
        values = np.array([1.0, 2.0])
        m = Matrix.from_column_packed(values, 2)
        values[0] = 99.0
        assert m.get(0, 0) == 1.0


class TestRowPacked:

    def test_row_major_layout(self):
        m = Matrix.from_row_packed([0.0, 1.0, 2.0, 3.0, 4.0, 5.0], 3)
        assert m.shape == (2, 3)
        assert m.get(0, 2) == 2.0
        assert m.get(1, 0) == 3.0

    def test_length_not_multiple(self):
        with pytest.raises(DimensionMismatchError, match="multiple of cols"):
            Matrix.from_row_packed([1.0, 2.0, 3.0], 2)

    def test_does_not_alias_input(self):
        values = np.array([1.0, 2.0])
        m = Matrix.from_row_packed(values, 1)
        values[1] = 99.0
        assert m.get(1, 0) == 2.0


# ═══════════════════════════════════════════════════════════════════════
# Copies
# ═══════════════════════════════════════════════════════════════════════


class TestCopies:

    def test_from_matrix_copies_cells(self):
        a = Matrix(2, 2, 22.0)
        b = Matrix.from_matrix(a)
        assert b.shape == a.shape
        for i in range(2):
            for j in range(2):
                assert b.get(i, j) == a.get(i, j)

    def test_from_matrix_is_independent(self):
        a = Matrix(1, 2, 13.0)
        b = Matrix.from_matrix(a)
        b.set(0, 0, 99.0)
        assert a.get(0, 0) == 13.0

    def test_original_mutation_does_not_reach_copy(self):
        a = Matrix(1, 2, 13.0)
        b = Matrix.from_matrix(a)
        a.set(0, 1, -1.0)
        assert b.get(0, 1) == 13.0

    @pytest.mark.parametrize("method", ["copy", "clone", "get_array_copy"])
    def test_copy_methods(self, grid_3x4, method):
        dup = getattr(grid_3x4, method)()
        assert dup == grid_3x4
        assert dup is not grid_3x4
        dup.set(2, 3, -5.0)
        assert grid_3x4.get(2, 3) == 23.0

    @pytest.mark.parametrize("copier", [copy.copy, copy.deepcopy])
    def test_copy_module(self, grid_3x4, copier):
        dup = copier(grid_3x4)
        dup.get_array()[0, 0] = 42.0
        assert grid_3x4.get(0, 0) == 0.0

    def test_from_matrix_rejects_non_matrix(self):
        with pytest.raises(ValidationError, match="expected Matrix"):
            Matrix.from_matrix([[1.0]])


# ═══════════════════════════════════════════════════════════════════════
# from_array
# ═══════════════════════════════════════════════════════════════════════


class TestFromArray:

    def test_nested_lists(self):
        m = Matrix.from_array([[1, 2, 3], [4, 5, 6]])
        assert m.shape == (2, 3)
        assert m.get(1, 2) == 6.0

    def test_copies_ndarray(self):
        data = np.ones((2, 2))
        m = Matrix.from_array(data)
        data[0, 0] = 5.0
        assert m.get(0, 0) == 1.0

    def test_fortran_ordered_input(self):
        data = np.asfortranarray(np.arange(6.0).reshape(2, 3))
        m = Matrix.from_array(data)
        assert m.get_array().flags['C_CONTIGUOUS']
        assert m.get(1, 0) == 3.0

    def test_empty_rows(self):
        m = Matrix.from_array(np.zeros((0, 4)))
        assert m.shape == (0, 4)

    def test_rejects_1d(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            Matrix.from_array([1.0, 2.0])

    def test_rejects_ragged(self):
        with pytest.raises(ValidationError):
            Matrix.from_array([[1.0, 2.0], [3.0]])
