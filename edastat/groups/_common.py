"""
Common data types for group comparison.

Contains the frozen parameter payloads that go inside Result[P] envelopes.
Each payload is a pure data container; no computation.
"""

from dataclasses import dataclass


TEST_TWO_GROUPS = 'Independent T-test'
TEST_MANY_GROUPS = 'One-way ANOVA'


@dataclass(frozen=True)
class GroupSummary:
    """Descriptive statistics of one level of the grouping variable."""
    name: str
    n: int
    mean: float
    ssq: float          # sum of squared deviations from the group mean
    variance: float     # ssq / (n - 1), or ssq when n == 1


@dataclass(frozen=True)
class PairwiseComparison:
    """One pooled-variance two-sample t-test between two groups."""
    group1: str
    group2: str
    p_value: float
    sig: str
    t_value: float      # NaN when df == 0
    df: int


@dataclass(frozen=True)
class GroupParams:
    """
    Parameter payload for a group comparison.

    Produced by group_report() for two or more non-empty groups with
    positive within-group degrees of freedom.
    """
    test: str                                   # TEST_TWO_GROUPS or TEST_MANY_GROUPS
    f_value: float
    p_value: float
    eta_squared: float
    df_between: int
    df_within: int
    ss_between: float
    ss_within: float
    grand_mean: float
    n_obs: int
    groups: tuple[GroupSummary, ...]
    pairwise: tuple[PairwiseComparison, ...]
