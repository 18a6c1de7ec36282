"""
Tests for pearson_r().
"""

import numpy as np
import pytest
from scipy import stats as sp_stats

from edastat.core.exceptions import DimensionError
from edastat.correlation import pearson_r
from edastat.correlation._pearson import pairwise_mask


class TestPearsonR:

    def test_perfect_positive(self):
        assert pearson_r([1, 2, 3], [2, 4, 6]) == 1.0

    def test_perfect_negative(self):
        x = np.array([1.0, 2.0, 3.0, 4.0, 5.0])
        assert pearson_r(x, -3.0 * x + 10.0) == pytest.approx(-1.0, abs=1e-12)

    def test_matches_scipy(self, rng):
        x = rng.standard_normal(50)
        y = 0.5 * x + rng.standard_normal(50)
        expected = sp_stats.pearsonr(x, y)[0]
        np.testing.assert_allclose(pearson_r(x, y), expected, rtol=1e-9)

    def test_constant_input_is_zero(self):
        assert pearson_r([3, 3, 3], [1, 2, 3]) == 0.0
        assert pearson_r([1, 2, 3], [5, 5, 5]) == 0.0

    def test_inexact_constant_input_is_zero(self):
        assert pearson_r([0.1] * 7, [0.1] * 7) == 0.0
        assert pearson_r(list(range(7)), [0.1] * 7) == 0.0

    def test_empty(self):
        assert pearson_r([], []) == 0.0

    def test_single_pair(self):
        assert pearson_r([1.0], [2.0]) == 0.0

    def test_within_bounds(self, rng):
        for _ in range(20):
            x = rng.standard_normal(5)
            r = pearson_r(x, x * 1e-3 + 7.0)
            assert -1.0 <= r <= 1.0

    def test_length_mismatch(self):
        with pytest.raises(DimensionError, match="Inconsistent lengths"):
            pearson_r([1, 2, 3], [1, 2])


class TestPairwiseMask:

    def test_with_nan_in_both(self):
        xi = np.array([np.nan, 2.0, 3.0])
        xj = np.array([4.0, np.nan, 6.0])
        np.testing.assert_array_equal(pairwise_mask(xi, xj), [False, False, True])
