"""
Input validation utilities for PyJama.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about caller intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No wrap-around for negative indices
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
import operator

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pyjama.core.exceptions import (
    ValidationError,
    InvalidSizeError,
    DimensionError,
    DimensionMismatchError,
    IndexOutOfRangeError,
)
from pyjama.core.precision import DTYPE


def check_integer(value: Any, name: str) -> int:
    """
    Convert an integer-like value to int.
    
    Accepts Python ints and NumPy integer scalars; rejects floats, strings
    and anything else without an __index__.
    
    Args:
        value: Value to validate
        name: Parameter name for error messages
        
    Returns:
        value as a plain int
        
    Raises:
        ValidationError: If value is not integer-like
    """
    try:
        return operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected an integer, got {type(value).__name__} {value!r}"
        ) from e


def check_size(rows: Any, cols: Any) -> tuple[int, int]:
    """
    Verify a requested matrix size is a pair of non-negative integers.
    
    Args:
        rows: Requested row count
        cols: Requested column count
        
    Returns:
        (rows, cols) as plain ints
        
    Raises:
        ValidationError: If either size is not integer-like
        InvalidSizeError: If either size is negative
    """
    rows = check_integer(rows, "rows")
    cols = check_integer(cols, "cols")
    if rows < 0 or cols < 0:
        raise InvalidSizeError(
            f"Matrix size must be non-negative, got {rows} x {cols}",
            rows=rows,
            cols=cols,
        )
    return rows, cols


def check_index(index: Any, bound: int, axis: str) -> int:
    """
    Verify a cell index lies in [0, bound).
    
    Args:
        index: Index to check
        bound: Exclusive upper bound (the dimension along this axis)
        axis: 'row' or 'column', for error messages
        
    Returns:
        index as a plain int
        
    Raises:
        ValidationError: If index is not integer-like
        IndexOutOfRangeError: If index is outside [0, bound)
    """
    index = check_integer(index, axis)
    if not 0 <= index < bound:
        raise IndexOutOfRangeError(
            f"{axis} index {index} out of range [0, {bound})",
            index=index,
            bound=bound,
            axis=axis,
        )
    return index


def check_range(start: Any, end: Any, bound: int, axis: str) -> tuple[int, int]:
    """
    Verify a half-open range [start, end) lies within [0, bound].
    
    Args:
        start: First index of the range
        end: One past the last index of the range
        bound: Dimension along this axis
        axis: 'row' or 'column', for error messages
        
    Returns:
        (start, end) as plain ints
        
    Raises:
        IndexOutOfRangeError: If start < 0 or end > bound
        InvalidSizeError: If end < start
    """
    start = check_integer(start, f"{axis} start")
    end = check_integer(end, f"{axis} end")
    if start < 0 or start > bound:
        raise IndexOutOfRangeError(
            f"{axis} start {start} out of range [0, {bound}]",
            index=start,
            bound=bound,
            axis=axis,
        )
    if end > bound:
        raise IndexOutOfRangeError(
            f"{axis} end {end} out of range [0, {bound}]",
            index=end,
            bound=bound,
            axis=axis,
        )
    if end < start:
        raise InvalidSizeError(
            f"{axis} range [{start}, {end}) has negative extent {end - start}"
        )
    return start, end


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.
    
    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (mixed types or ragged nesting) and
    non-numeric dtypes.
    
    Args:
        array: Input to validate
        name: Parameter name for error messages
        
    Returns:
        numpy.ndarray of dtype float64. May share memory with the input;
        callers that need ownership must copy.
        
    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e
    
    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real-valued data"
        )

    return result.astype(DTYPE, copy=False)


def check_ndim(array: NDArray[np.float64], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.
    
    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.float64], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.float64], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_same_shape(
    shape: tuple[int, int],
    other_shape: tuple[int, int],
) -> None:
    """
    Verify two matrices have identical dimensions.
    
    Args:
        shape: Shape of the left operand
        other_shape: Shape of the right operand
        
    Raises:
        DimensionMismatchError: If the shapes differ
    """
    if tuple(shape) != tuple(other_shape):
        raise DimensionMismatchError(
            f"Matrix dimensions must agree. "
            f"Got {shape[0]} x {shape[1]} and {other_shape[0]} x {other_shape[1]}",
            expected=tuple(shape),
            actual=tuple(other_shape),
        )


def check_packed_length(length: int, dim: int, name: str) -> int:
    """
    Verify a packed array length is an exact multiple of a dimension.
    
    Args:
        length: Number of packed values
        dim: The known dimension (rows for column packing, cols for row packing)
        name: Name of the known dimension, for error messages
        
    Returns:
        The other dimension, length // dim (0 when dim is 0)
        
    Raises:
        DimensionMismatchError: If dim * (length // dim) != length
    """
    other = 0 if dim == 0 else length // dim
    if dim * other != length:
        raise DimensionMismatchError(
            f"Array length must be a multiple of {name}. "
            f"Got length {length} with {name}={dim}",
            expected=dim * other,
            actual=length,
        )
    return other


def check_scalar(value: Any, name: str) -> float:
    """
    Verify a cell value is a real number.
    
    Args:
        value: Value to check
        name: Parameter name for error messages
        
    Returns:
        value as a Python float
        
    Raises:
        ValidationError: If value is not a real number
    """
    if not isinstance(value, (numbers.Real, np.integer, np.floating, np.bool_)):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__} {value!r}"
        )
    return float(value)
