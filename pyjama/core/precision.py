"""
Numerical precision constants and tolerance tiers.

Every Matrix stores float64. Tolerance tiers describe how closely two
matrices must agree in Matrix.allclose and in the test suite.
"""

from dataclasses import dataclass

import numpy as np


# Storage dtype for every matrix cell
DTYPE = np.float64

# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Bitwise-equal cells (integer-valued data, copies, transposes)
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Identical cell values',
)

# Results of a few float64 additions/subtractions
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, a few rounding steps apart',
)


def select_tolerance(exact: bool = False) -> ToleranceTier:
    """Select the tolerance tier for a comparison."""
    if exact:
        return EXACT
    return FP64
