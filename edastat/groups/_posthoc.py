"""
Post-hoc pairwise comparisons.

Pooled-variance two-sample t-test for every unordered pair of groups:

    s_p^2 = ((n1 - 1) v1 + (n2 - 1) v2) / (n1 + n2 - 2)
    t     = |m1 - m2| / sqrt(s_p^2 (1/n1 + 1/n2))

with p-values from the closed-form approximation (df = n1 + n2 - 2).
No multiplicity correction is applied.

Degenerate cases:
    df == 0 (both groups n = 1): t undefined, p = 1.0, no stars
    s_p^2 == 0: t = inf when the means differ (p = 0), else t = 0
"""

import math

from edastat.core.significance import significance_stars
from edastat.core.compute.approximations import t_p_value
from edastat.groups._common import GroupSummary, PairwiseComparison


def pooled_t_statistic(g1: GroupSummary, g2: GroupSummary) -> tuple[float, int]:
    """
    Pooled-variance t statistic and its degrees of freedom.

    Returns:
        (t, df); t is NaN when df <= 0
    """
    df = g1.n + g2.n - 2
    if df <= 0:
        return math.nan, df

    pooled_var = ((g1.n - 1) * g1.variance + (g2.n - 1) * g2.variance) / df
    se_sq = pooled_var * (1.0 / g1.n + 1.0 / g2.n)
    diff = abs(g1.mean - g2.mean)

    if se_sq <= 0.0:
        return (math.inf if diff > 0.0 else 0.0), df

    return diff / math.sqrt(se_sq), df


def pairwise_pooled_t(
    groups: tuple[GroupSummary, ...],
) -> tuple[tuple[PairwiseComparison, ...], tuple[str, ...]]:
    """
    Run the pooled t-test on every unordered pair, in input order.

    Args:
        groups: Group summaries (k >= 2)

    Returns:
        (comparisons, warnings). One warning per pair whose test is
        undefined because both groups hold a single observation.
    """
    comparisons: list[PairwiseComparison] = []
    warnings_list: list[str] = []
    k = len(groups)

    for i in range(k):
        for j in range(i + 1, k):
            g1, g2 = groups[i], groups[j]
            t, df = pooled_t_statistic(g1, g2)

            if df <= 0:
                warnings_list.append(
                    f"{g1.name} vs {g2.name}: zero degrees of freedom "
                    f"(n={g1.n}, n={g2.n}), reported p=1"
                )

            p = t_p_value(t, df)
            comparisons.append(PairwiseComparison(
                group1=g1.name,
                group2=g2.name,
                p_value=p,
                sig=significance_stars(p),
                t_value=t,
                df=df,
            ))

    return tuple(comparisons), tuple(warnings_list)
