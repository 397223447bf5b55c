"""
PyJama: a small dense matrix type for Python.

A JAMA-style Matrix class backed by NumPy: construction from sizes,
packed arrays and other matrices; bounds-checked element and block
access; negation, addition, subtraction, element-wise multiplication
and transpose.

Submodules:
    core: Exceptions, validators, precision constants
    dense: The Matrix class
"""

__version__ = "0.1.0"

from pyjama.core.exceptions import (
    PyJamaError,
    ValidationError,
    InvalidSizeError,
    DimensionError,
    DimensionMismatchError,
    IndexOutOfRangeError,
)
from pyjama.dense import Matrix

__all__ = [
    "__version__",
    "Matrix",
    "PyJamaError",
    "ValidationError",
    "InvalidSizeError",
    "DimensionError",
    "DimensionMismatchError",
    "IndexOutOfRangeError",
]
