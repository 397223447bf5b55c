"""
Tests for precision constants and tolerance tiers.
"""

from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from pyjama.core.precision import (
    DTYPE,
    EPSILON_64,
    EXACT,
    FP64,
    ToleranceTier,
    select_tolerance,
)


class TestConstants:

    def test_dtype_is_float64(self):
        assert DTYPE is np.float64

    def test_epsilon(self):
        assert EPSILON_64 == np.finfo(np.float64).eps


class TestToleranceTiers:

    def test_exact_is_zero(self):
        assert EXACT.rtol == 0.0
        assert EXACT.atol == 0.0

    def test_fp64_is_tight(self):
        assert 0.0 < FP64.rtol <= 1e-10
        assert 0.0 < FP64.atol <= 1e-12

    def test_frozen(self):
        with pytest.raises(FrozenInstanceError):
            FP64.rtol = 1.0

    def test_custom_tier(self):
        tier = ToleranceTier(rtol=1e-3, atol=0.0, name='loose', description='loose')
        assert tier.name == 'loose'

    def test_select(self):
        assert select_tolerance(exact=True) is EXACT
        assert select_tolerance() is FP64
