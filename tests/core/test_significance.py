"""
Tests for significance_stars().
"""

import math

import numpy as np
import pytest

from edastat.core.significance import significance_stars


class TestThresholds:

    @pytest.mark.parametrize("p, expected", [
        (0.0, '***'),
        (0.0009, '***'),
        (0.001, '**'),
        (0.009, '**'),
        (0.01, '*'),
        (0.049, '*'),
        (0.05, ''),
        (0.5, ''),
        (1.0, ''),
    ])
    def test_levels(self, p, expected):
        assert significance_stars(p) == expected

    def test_none(self):
        assert significance_stars(None) == ''

    def test_nan(self):
        assert significance_stars(math.nan) == ''


class TestMonotonicity:

    def test_larger_p_never_more_stars(self):
        grid = np.linspace(0.0, 1.0, 2001)
        stars = [len(significance_stars(float(p))) for p in grid]
        assert all(a >= b for a, b in zip(stars, stars[1:]))
