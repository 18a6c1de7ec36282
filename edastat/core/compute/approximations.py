"""
Closed-form p-value approximation.

Two-sided tail probabilities are computed from the standard normal CDF
using the Abramowitz & Stegun polynomial approximation (26.2.17), then
inflated by a rough small-sample factor when df < 30 to stand in for the
heavier Student-t tails:

    k    = 1 / (1 + 0.2316419 |t|)
    Phi  = 1 - phi(|t|) * (a1 k + a2 k^2 + a3 k^3 + a4 k^4 + a5 k^5)
    p    = 2 (1 - Phi)
    p   *= 1 + (p^2 + 1) / (4 df)          if df < 30
    p    = clamp(p, 0, 1)

This is NOT an exact Student-t (or F) distribution. Results are defined by
this formula, so every p-value reported by the correlation and group
engines is reproducible by hand from the statistic and degrees of freedom.
"""

import math

# Abramowitz & Stegun 26.2.17 coefficients
AS_P = 0.2316419
AS_A1 = 0.319381530
AS_A2 = -0.356563782
AS_A3 = 1.781477937
AS_A4 = -1.821255978
AS_A5 = 1.330274429

# Below this many degrees of freedom the small-sample factor is applied
SMALL_SAMPLE_DF = 30

_INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)


def normal_tail_probability(z: float) -> float:
    """
    Two-sided standard normal tail probability 2 * (1 - Phi(|z|)).

    Args:
        z: Test statistic (sign ignored); may be infinite

    Returns:
        Unclamped tail probability from the A&S polynomial
    """
    z_abs = abs(z)
    k = 1.0 / (1.0 + AS_P * z_abs)
    poly = ((((AS_A5 * k + AS_A4) * k + AS_A3) * k + AS_A2) * k + AS_A1) * k
    normal_cdf = 1.0 - _INV_SQRT_2PI * math.exp(-0.5 * z_abs * z_abs) * poly
    return 2.0 * (1.0 - normal_cdf)


def t_p_value(t: float, df: float) -> float:
    """
    Approximate two-sided p-value for a t statistic.

    Args:
        t: t statistic (sign ignored); infinite t yields p = 0
        df: Degrees of freedom

    Returns:
        p-value in [0, 1]. Returns 1.0 when df <= 0 or t is NaN, since
        nothing can be concluded from an undefined statistic.
    """
    if df <= 0 or math.isnan(t):
        return 1.0

    p = normal_tail_probability(t)

    if df < SMALL_SAMPLE_DF:
        p = p * (1.0 + (p * p + 1.0) / (4.0 * df))

    return min(max(p, 0.0), 1.0)


def correlation_p_value(r: float, n: int) -> float:
    """
    Approximate two-sided p-value for a Pearson correlation.

    Uses t = |r| sqrt((n - 2) / (1 - r^2)) with n - 2 degrees of freedom.

    Args:
        r: Correlation coefficient in [-1, 1]
        n: Number of complete pairs

    Returns:
        p-value in [0, 1]; 1.0 when n <= 2. A perfect correlation
        (r^2 == 1) gives an infinite t and p = 0.
    """
    if n <= 2:
        return 1.0

    denom = 1.0 - r * r
    if denom <= 0.0:
        t = math.inf
    else:
        t = abs(r) * math.sqrt((n - 2) / denom)

    return t_p_value(t, n - 2)
