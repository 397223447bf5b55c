"""
Matrix: dense, real-valued, mutable 2-D container.

Shape is fixed at construction; contents are mutable through set,
set_row, set_matrix, plus_equals and minus_equals. Each Matrix owns a
C-ordered float64 ndarray that no other Matrix shares.

Construction:
    Matrix(rows, cols)                    # zero-filled
    Matrix(rows, cols, value)             # every cell = value
    Matrix.from_column_packed(vals, rows) # column-major flat values
    Matrix.from_row_packed(vals, cols)    # row-major flat values
    Matrix.from_matrix(other)             # deep copy
    Matrix.from_array([[...], [...]])     # copy of a 2-D array-like
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyjama.core.exceptions import DimensionMismatchError, ValidationError
from pyjama.core.precision import DTYPE, FP64, ToleranceTier
from pyjama.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_index,
    check_integer,
    check_packed_length,
    check_range,
    check_same_shape,
    check_scalar,
    check_size,
)
from pyjama.dense._packing import (
    pack_columns,
    pack_rows,
    unpack_columns,
    unpack_rows,
)


class Matrix:
    """
    Dense matrix of double-precision values.

    Parameters
    ----------
    rows : int
        Number of rows, >= 0.
    cols : int
        Number of columns, >= 0.
    value : float, default 0.0
        Initial value of every cell.

    Raises
    ------
    InvalidSizeError
        If rows or cols is negative.
    ValidationError
        If a size is not an integer or value is not a real number.
    """

    # Mutable contents: instances are not hashable.
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int, cols: int, value: float = 0.0):
        rows, cols = check_size(rows, cols)
        value = check_scalar(value, "value")
        self._A: NDArray[np.float64] = np.full((rows, cols), value, dtype=DTYPE)

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------

    @classmethod
    def _from_owned(cls, data: NDArray[np.float64]) -> Matrix:
        """Wrap an array the caller has just allocated. No copy, no checks."""
        matrix = cls.__new__(cls)
        matrix._A = data
        return matrix

    @classmethod
    def from_column_packed(cls, values: ArrayLike, rows: int) -> Matrix:
        """
        Build a matrix from column-major packed values.

        Value values[i + j*rows] lands in cell (i, j). The column count is
        len(values) // rows, or 0 when rows is 0.

        Parameters
        ----------
        values : array-like
            One-dimensional sequence of numbers.
        rows : int
            Number of rows.

        Raises
        ------
        InvalidSizeError
            If rows is negative.
        DimensionMismatchError
            If len(values) is not a multiple of rows. With rows == 0 only
            an empty sequence is accepted.
        """
        rows = check_integer(rows, "rows")
        check_size(rows, 0)
        flat = check_array(values, "values")
        check_1d(flat, "values")
        cols = check_packed_length(flat.shape[0], rows, "rows")
        return cls._from_owned(unpack_columns(flat, rows, cols))

    @classmethod
    def from_row_packed(cls, values: ArrayLike, cols: int) -> Matrix:
        """
        Build a matrix from row-major packed values.

        Value values[i*cols + j] lands in cell (i, j). The row count is
        len(values) // cols, or 0 when cols is 0.
        """
        cols = check_integer(cols, "cols")
        check_size(0, cols)
        flat = check_array(values, "values")
        check_1d(flat, "values")
        rows = check_packed_length(flat.shape[0], cols, "cols")
        return cls._from_owned(unpack_rows(flat, rows, cols))

    @classmethod
    def from_matrix(cls, other: Matrix) -> Matrix:
        """Deep copy of another matrix, with identical dimensions."""
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"other: expected Matrix, got {type(other).__name__}"
            )
        return cls._from_owned(other._A.copy())

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Build a matrix from a copy of a 2-D array-like.

        Raises
        ------
        ValidationError
            If the input is ragged or non-numeric.
        DimensionError
            If the input is not two-dimensional.
        """
        data = check_array(array, "array")
        check_2d(data, "array")
        return cls._from_owned(np.array(data, dtype=DTYPE, order='C', copy=True))

    # ------------------------------------------------------------------
    # Dimensions
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._A.shape[0]

    @property
    def cols(self) -> int:
        return self._A.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self._A.shape[0], self._A.shape[1]

    def get_row_dimension(self) -> int:
        return self.rows

    def get_column_dimension(self) -> int:
        return self.cols

    # ------------------------------------------------------------------
    # Copies and raw access
    # ------------------------------------------------------------------

    def copy(self) -> Matrix:
        """Deep copy of this matrix."""
        return Matrix.from_matrix(self)

    def clone(self) -> Matrix:
        """Same as copy(); there is no shallow clone."""
        return self.copy()

    def get_array_copy(self) -> Matrix:
        """Same as copy()."""
        return self.copy()

    def __copy__(self) -> Matrix:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Matrix:
        return self.copy()

    def get_array(self) -> NDArray[np.float64]:
        """
        Return the live backing array.

        This is NOT a copy: writes through the returned array change this
        matrix directly, e.g. ``m.get_array()[0] = row`` replaces row 0.
        Use set_row or set_matrix when encapsulation matters, and
        to_numpy for an independent snapshot.
        """
        return self._A

    def to_numpy(self) -> NDArray[np.float64]:
        """Independent (rows, cols) ndarray copy of the contents."""
        return self._A.copy()

    def get_column_packed_copy(self) -> NDArray[np.float64]:
        """Flat copy with cell (i, j) at index i + j*rows."""
        return pack_columns(self._A)

    def get_row_packed_copy(self) -> NDArray[np.float64]:
        """Flat copy with cell (i, j) at index i*cols + j."""
        return pack_rows(self._A)

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def get(self, row: int, col: int) -> float:
        """
        Value of cell (row, col).

        Raises
        ------
        IndexOutOfRangeError
            If row is outside [0, rows) or col is outside [0, cols).
        """
        row = check_index(row, self.rows, "row")
        col = check_index(col, self.cols, "column")
        return float(self._A[row, col])

    def set(self, row: int, col: int, value: float) -> None:
        """
        Store value in cell (row, col).

        Raises
        ------
        IndexOutOfRangeError
            If row is outside [0, rows) or col is outside [0, cols).
        """
        row = check_index(row, self.rows, "row")
        col = check_index(col, self.cols, "column")
        self._A[row, col] = check_scalar(value, "value")

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = _split_key(key)
        return self.get(row, col)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = _split_key(key)
        self.set(row, col, value)

    def set_row(self, row: int, values: ArrayLike) -> None:
        """
        Replace row `row` with a copy of `values`.

        Raises
        ------
        IndexOutOfRangeError
            If row is outside [0, rows).
        DimensionMismatchError
            If len(values) != cols.
        """
        row = check_index(row, self.rows, "row")
        data = check_array(values, "values")
        check_1d(data, "values")
        if data.shape[0] != self.cols:
            raise DimensionMismatchError(
                f"Row length must equal cols. Got {data.shape[0]}, expected {self.cols}",
                expected=self.cols,
                actual=data.shape[0],
            )
        self._A[row, :] = data

    # ------------------------------------------------------------------
    # Sub-matrices
    # ------------------------------------------------------------------

    def get_matrix(
        self,
        row_start: int,
        row_end: int,
        col_start: int,
        col_end: int,
    ) -> Matrix:
        """
        Copy of the block rows [row_start, row_end), cols [col_start, col_end).

        Both ranges are half-open, so the result is
        (row_end - row_start) x (col_end - col_start).

        Raises
        ------
        IndexOutOfRangeError
            If a range reaches outside the matrix.
        InvalidSizeError
            If an end precedes its start.
        """
        r0, r1 = check_range(row_start, row_end, self.rows, "row")
        c0, c1 = check_range(col_start, col_end, self.cols, "column")
        return Matrix._from_owned(self._A[r0:r1, c0:c1].copy())

    def set_matrix(
        self,
        row_start: int,
        row_end: int,
        col_start: int,
        col_end: int,
        source: Matrix,
    ) -> None:
        """
        Write source into rows [row_start, row_end), cols [col_start, col_end).

        Cell (i, j) receives source.get(i - row_start, j - col_start).
        Source cells outside the requested block are ignored, and an empty
        or reversed range writes nothing. Bounds are checked before any
        write, so a failing call leaves this matrix unchanged.

        Raises
        ------
        IndexOutOfRangeError
            If a written cell is outside this matrix, or a read cell is
            outside source.
        """
        if not isinstance(source, Matrix):
            raise ValidationError(
                f"source: expected Matrix, got {type(source).__name__}"
            )
        r0 = check_integer(row_start, "row start")
        r1 = check_integer(row_end, "row end")
        c0 = check_integer(col_start, "column start")
        c1 = check_integer(col_end, "column end")
        if r1 <= r0 or c1 <= c0:
            return

        # Last written cell and last read cell must both exist.
        check_index(r0, self.rows, "row")
        check_index(r1 - 1, self.rows, "row")
        check_index(c0, self.cols, "column")
        check_index(c1 - 1, self.cols, "column")
        check_index(r1 - r0 - 1, source.rows, "row")
        check_index(c1 - c0 - 1, source.cols, "column")

        self._A[r0:r1, c0:c1] = source._A[:r1 - r0, :c1 - c0]

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def transpose(self) -> Matrix:
        """New (cols, rows) matrix with cell (j, i) = self(i, j)."""
        return Matrix._from_owned(self._A.T.copy())

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def negate(self) -> Matrix:
        """New matrix with every cell negated."""
        return Matrix._from_owned(np.negative(self._A))

    def plus(self, other: Matrix) -> Matrix:
        """C = A + B, cell-wise."""
        self._check_operand(other)
        return Matrix._from_owned(self._A + other._A)

    def minus(self, other: Matrix) -> Matrix:
        """C = A - B, cell-wise."""
        self._check_operand(other)
        return Matrix._from_owned(self._A - other._A)

    def element_times(self, other: Matrix) -> Matrix:
        """C = A .* B, cell-wise (not the matrix product)."""
        self._check_operand(other)
        return Matrix._from_owned(self._A * other._A)

    def plus_equals(self, other: Matrix) -> Matrix:
        """A = A + B in place. Returns self."""
        self._check_operand(other)
        self._A += other._A
        return self

    def minus_equals(self, other: Matrix) -> Matrix:
        """A = A - B in place. Returns self."""
        self._check_operand(other)
        self._A -= other._A
        return self

    def _check_operand(self, other: Matrix) -> None:
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"other: expected Matrix, got {type(other).__name__}"
            )
        check_same_shape(self.shape, other.shape)

    # Operators accept only Matrix operands; scalars fall through to TypeError.

    def __neg__(self) -> Matrix:
        return self.negate()

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.minus(other)

    def __iadd__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.plus_equals(other)

    def __isub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.minus_equals(other)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._A, other._A))

    def allclose(self, other: Matrix, tolerance: ToleranceTier = FP64) -> bool:
        """True if shapes agree and every cell is within tolerance."""
        if not isinstance(other, Matrix):
            raise ValidationError(
                f"other: expected Matrix, got {type(other).__name__}"
            )
        if self.shape != other.shape:
            return False
        return bool(np.allclose(
            self._A, other._A, rtol=tolerance.rtol, atol=tolerance.atol
        ))

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols})"


def _split_key(key: Any) -> tuple[int, int]:
    """Unpack an m[i, j] subscript."""
    if not isinstance(key, tuple) or len(key) != 2:
        raise TypeError(
            f"Matrix subscript must be a (row, col) pair, got {key!r}"
        )
    return key[0], key[1]
