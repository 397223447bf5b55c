"""
Exception hierarchy for PyJama.

All exceptions inherit from PyJamaError to allow catching any
library-specific error. Every error here signals a contract violation
by the caller: nothing in the library retries, recovers from, or logs
these errors.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyJamaError(Exception):
    """Base exception for all PyJama errors."""
    pass


class ValidationError(PyJamaError):
    """
    Input validation failed.
    
    Raised when caller-provided inputs fail validation checks, e.g. a
    non-integer size or non-numeric cell data.
    """
    pass


class InvalidSizeError(ValidationError):
    """
    A negative matrix size was requested.
    
    Attributes:
        rows: Requested row count, if known
        cols: Requested column count, if known
    """
    
    def __init__(
        self,
        message: str,
        rows: int | None = None,
        cols: int | None = None
    ):
        super().__init__(message)
        self.rows = rows
        self.cols = cols


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect.
    
    Raised when input data has the wrong number of dimensions or is
    ragged (rows of unequal length).
    """
    pass


class DimensionMismatchError(DimensionError):
    """
    Operand sizes are incompatible.
    
    Raised by element-wise arithmetic when the two matrices differ in
    shape, and by packed construction when the value count is not a
    multiple of the requested dimension.
    
    Attributes:
        expected: Expected shape or length
        actual: Shape or length actually received
    """
    
    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    A cell index lies outside the matrix.
    
    Also an IndexError, so generic code catching IndexError keeps working.
    
    Attributes:
        index: The offending index
        bound: Exclusive upper bound for that axis
        axis: 'row' or 'column'
    """
    
    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None,
        axis: str | None = None
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
        self.axis = axis
