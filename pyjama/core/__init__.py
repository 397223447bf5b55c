"""
Core infrastructure for PyJama.

Shared abstractions used by the dense matrix module.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    precision: Storage dtype and tolerance tiers
"""

from pyjama.core.exceptions import (
    PyJamaError,
    ValidationError,
    InvalidSizeError,
    DimensionError,
    DimensionMismatchError,
    IndexOutOfRangeError,
)
from pyjama.core.precision import (
    DTYPE,
    ToleranceTier,
    EXACT,
    FP64,
    select_tolerance,
)

__all__ = [
    # Exceptions
    "PyJamaError",
    "ValidationError",
    "InvalidSizeError",
    "DimensionError",
    "DimensionMismatchError",
    "IndexOutOfRangeError",
    # Precision
    "DTYPE",
    "ToleranceTier",
    "EXACT",
    "FP64",
    "select_tolerance",
]
