"""
Group comparison: independent t-test / one-way ANOVA.

Public API:
    group_report(grouped) -> GroupReport | None
    compare_groups(rows, outcome, grouping) -> GroupReport | None
    group_observations(rows, outcome, grouping) -> dict[str, list[float]]
"""

from edastat.groups._common import (
    GroupParams,
    GroupSummary,
    PairwiseComparison,
    TEST_TWO_GROUPS,
    TEST_MANY_GROUPS,
)
from edastat.groups.design import GroupDesign, group_observations
from edastat.groups.solution import GroupReport
from edastat.groups.solvers import group_report, compare_groups

__all__ = [
    "group_report",
    "compare_groups",
    "group_observations",
    "GroupDesign",
    "GroupParams",
    "GroupReport",
    "GroupSummary",
    "PairwiseComparison",
    "TEST_TWO_GROUPS",
    "TEST_MANY_GROUPS",
]
