"""
Dense matrix module.

Public API:
    Matrix  - dense float64 matrix with element, block and
              element-wise arithmetic operations
"""

from pyjama.dense.matrix import Matrix

__all__ = [
    "Matrix",
]
