"""
Flat packing kernels for dense matrices.

Column-major packing puts cell (i, j) at flat index i + j*rows.
Row-major packing puts cell (i, j) at flat index i*cols + j.

Every function returns a freshly allocated array; none of them alias
their input.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from pyjama.core.precision import DTYPE


def pack_columns(data: NDArray) -> NDArray:
    """Flatten a 2-D array in column-major order."""
    return np.array(data.ravel(order='F'), dtype=DTYPE, copy=True)


def pack_rows(data: NDArray) -> NDArray:
    """Flatten a 2-D array in row-major order."""
    return np.array(data.ravel(order='C'), dtype=DTYPE, copy=True)


def unpack_columns(values: NDArray, rows: int, cols: int) -> NDArray:
    """
    Rebuild a (rows, cols) C-ordered array from column-major values.

    The caller has already checked that len(values) == rows * cols.
    """
    grid = np.reshape(values, (rows, cols), order='F')
    return np.array(grid, dtype=DTYPE, order='C', copy=True)


def unpack_rows(values: NDArray, rows: int, cols: int) -> NDArray:
    """Rebuild a (rows, cols) C-ordered array from row-major values."""
    grid = np.reshape(values, (rows, cols), order='C')
    return np.array(grid, dtype=DTYPE, order='C', copy=True)
