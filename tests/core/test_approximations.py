"""
Tests for the closed-form p-value approximation.

Expected values are hand evaluations of the Abramowitz & Stegun formula
(with the df < 30 correction), not exact Student-t tail probabilities.
"""

import math

import pytest

from edastat.core.compute.approximations import (
    SMALL_SAMPLE_DF,
    correlation_p_value,
    normal_tail_probability,
    t_p_value,
)
from edastat.core.compute.tolerances import APPROXIMATION


def _reference_tail(t):
    a = (0.319381530, -0.356563782, 1.781477937, -1.821255978, 1.330274429)
    z = abs(t)
    k = 1.0 / (1.0 + 0.2316419 * z)
    poly = sum(coef * k ** (i + 1) for i, coef in enumerate(a))
    cdf = 1.0 - math.exp(-z * z / 2.0) / math.sqrt(2.0 * math.pi) * poly
    return 2.0 * (1.0 - cdf)


# ═══════════════════════════════════════════════════════════════════════
# Normal tail
# ═══════════════════════════════════════════════════════════════════════


class TestNormalTail:

    def test_matches_reference_formula(self):
        for t in (0.1, 0.5, 1.0, 1.96, 2.5, 4.0):
            assert normal_tail_probability(t) == pytest.approx(
                _reference_tail(t), rel=APPROXIMATION.rtol, abs=APPROXIMATION.atol,
            )

    def test_close_to_normal_quantiles(self):
        # A&S 26.2.17 is accurate to 7.5e-8 on the CDF
        assert normal_tail_probability(1.959963985) == pytest.approx(0.05, abs=1e-6)
        assert normal_tail_probability(2.575829304) == pytest.approx(0.01, abs=1e-6)

    def test_symmetric_in_sign(self):
        assert normal_tail_probability(-1.5) == normal_tail_probability(1.5)

    def test_zero_is_about_one(self):
        assert normal_tail_probability(0.0) == pytest.approx(1.0, abs=1e-7)

    def test_infinite_is_zero(self):
        assert normal_tail_probability(math.inf) == 0.0


# ═══════════════════════════════════════════════════════════════════════
# t_p_value
# ═══════════════════════════════════════════════════════════════════════


class TestTPValue:

    def test_large_df_no_correction(self):
        assert t_p_value(1.96, 100) == pytest.approx(_reference_tail(1.96), rel=1e-12)

    def test_small_df_correction(self):
        p0 = _reference_tail(1.96)
        expected = p0 * (1.0 + (p0 * p0 + 1.0) / (4.0 * 10))
        assert t_p_value(1.96, 10) == pytest.approx(expected, rel=1e-12)

    def test_correction_boundary(self):
        p0 = _reference_tail(2.0)
        assert t_p_value(2.0, SMALL_SAMPLE_DF) == pytest.approx(p0, rel=1e-12)
        assert t_p_value(2.0, SMALL_SAMPLE_DF - 1) > p0

    def test_clamped_to_unit_interval(self):
        # Correction pushes p above 1 for t near zero and tiny df
        assert t_p_value(0.0, 1) == 1.0
        for t in (0.0, 0.3, 1.0, 3.0, 10.0):
            for df in (1, 2, 5, 29, 30, 1000):
                assert 0.0 <= t_p_value(t, df) <= 1.0

    def test_nonpositive_df(self):
        assert t_p_value(5.0, 0) == 1.0
        assert t_p_value(5.0, -3) == 1.0

    def test_nan_statistic(self):
        assert t_p_value(math.nan, 10) == 1.0

    def test_infinite_statistic(self):
        assert t_p_value(math.inf, 3) == 0.0

    def test_decreasing_in_t(self):
        ps = [t_p_value(t, 12) for t in (0.5, 1.0, 2.0, 3.0, 5.0)]
        assert ps == sorted(ps, reverse=True)


# ═══════════════════════════════════════════════════════════════════════
# correlation_p_value
# ═══════════════════════════════════════════════════════════════════════


class TestCorrelationPValue:

    def test_too_few_pairs(self):
        assert correlation_p_value(0.99, 2) == 1.0
        assert correlation_p_value(0.5, 0) == 1.0

    def test_perfect_correlation(self):
        assert correlation_p_value(1.0, 3) == 0.0
        assert correlation_p_value(-1.0, 10) == 0.0

    def test_matches_t_transform(self):
        r, n = 0.6, 20
        t = abs(r) * math.sqrt((n - 2) / (1 - r * r))
        assert correlation_p_value(r, n) == pytest.approx(t_p_value(t, n - 2), rel=1e-12)

    def test_sign_of_r_irrelevant(self):
        assert correlation_p_value(-0.4, 15) == correlation_p_value(0.4, 15)
