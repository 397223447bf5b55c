"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pyjama import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def grid_3x4():
    """3x4 matrix whose cell (i, j) holds 10*i + j."""
    return Matrix.from_array([
        [0.0, 1.0, 2.0, 3.0],
        [10.0, 11.0, 12.0, 13.0],
        [20.0, 21.0, 22.0, 23.0],
    ])


@pytest.fixture
def integer_pair(rng):
    """Two 4x5 integer-valued matrices (exact under + and -)."""
    a = rng.integers(-100, 100, size=(4, 5)).astype(np.float64)
    b = rng.integers(-100, 100, size=(4, 5)).astype(np.float64)
    return Matrix.from_array(a), Matrix.from_array(b)


@pytest.fixture
def random_matrix(rng):
    """6x3 matrix of standard normal draws."""
    return Matrix.from_array(rng.standard_normal((6, 3)))
