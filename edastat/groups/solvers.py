"""
Group comparison solver dispatch.

Public API:
    group_report(grouped) -> GroupReport | None
    compare_groups(rows, outcome, grouping) -> GroupReport | None
"""

from __future__ import annotations

import math
import warnings
from typing import Any

import numpy as np

from edastat.core.result import Result
from edastat.core.compute.timing import Timer
from edastat.core.compute.approximations import t_p_value
from edastat.groups._common import (
    GroupParams,
    GroupSummary,
    TEST_TWO_GROUPS,
    TEST_MANY_GROUPS,
)
from edastat.groups._posthoc import pairwise_pooled_t
from edastat.groups.design import GroupDesign
from edastat.groups.solution import GroupReport


def _summarize_group(name: str, values: np.ndarray) -> GroupSummary:
    n = values.shape[0]
    mean = float(np.mean(values))
    ssq = float(np.sum((values - mean) ** 2))
    variance = ssq / (n - 1 if n > 1 else 1)
    return GroupSummary(name=name, n=n, mean=mean, ssq=ssq, variance=variance)


def _f_statistic(ms_between: float, ms_within: float) -> float:
    if ms_within == 0.0:
        return math.inf if ms_between > 0.0 else 0.0
    return ms_between / ms_within


def group_report(grouped: Any | GroupDesign) -> GroupReport | None:
    """
    One-way ANOVA (independent t-test for two groups) with post-hoc tests.

    Decomposes the variance of the pooled observations into between- and
    within-group sums of squares, reports F, an approximate p-value, eta
    squared, and a pooled-variance t-test for every pair of groups.

    The global p-value feeds t = sqrt(F) with df_within degrees of
    freedom into the closed-form approximation; it is not an exact F
    distribution tail.

    Args:
        grouped: {label: sequence of finite numbers}, or a GroupDesign.
            Empty groups are ignored.

    Returns:
        GroupReport, or None when fewer than two non-empty groups remain
        or there are no within-group degrees of freedom (N - k <= 0).

    Examples:
        >>> report = group_report({'A': [1, 2, 3], 'B': [10, 11, 12]})
        >>> report.test
        'Independent T-test'
        >>> print(report.summary())
    """
    timer = Timer()
    timer.start()

    if isinstance(grouped, GroupDesign):
        design = grouped
    else:
        design = GroupDesign.from_mapping(grouped)

    k = design.k
    if k < 2:
        return None

    n_total = design.n
    df_between = k - 1
    df_within = n_total - k
    if df_within <= 0:
        return None

    with timer.section('group_stats'):
        groups = tuple(
            _summarize_group(name, values)
            for name, values in zip(design.labels, design.samples)
        )
        grand_mean = float(np.mean(np.concatenate(design.samples)))

    with timer.section('anova'):
        ss_between = sum(g.n * (g.mean - grand_mean) ** 2 for g in groups)
        ss_within = sum(g.ssq for g in groups)

        f_value = _f_statistic(ss_between / df_between, ss_within / df_within)
        p_value = t_p_value(math.sqrt(f_value), df_within)

        ss_total = ss_between + ss_within
        eta_squared = min(max(ss_between / ss_total, 0.0), 1.0) if ss_total > 0 else 0.0

    with timer.section('posthoc'):
        pairwise, pair_warnings = pairwise_pooled_t(groups)

    for message in pair_warnings:
        warnings.warn(
            f"Pairwise t-test undefined: {message}",
            RuntimeWarning,
            stacklevel=2,
        )

    timer.stop()

    params = GroupParams(
        test=TEST_TWO_GROUPS if k == 2 else TEST_MANY_GROUPS,
        f_value=f_value,
        p_value=p_value,
        eta_squared=eta_squared,
        df_between=df_between,
        df_within=df_within,
        ss_between=ss_between,
        ss_within=ss_within,
        grand_mean=grand_mean,
        n_obs=n_total,
        groups=groups,
        pairwise=pairwise,
    )

    result = Result(
        params=params,
        info={
            'design_type': 'oneway',
            'posthoc': 'pooled t-test',
            'p_value': 'normal approximation',
            'dropped_groups': design.dropped,
        },
        timing=timer.result(),
        backend_name='cpu_groups',
        warnings=pair_warnings,
    )

    return GroupReport(_result=result)


def compare_groups(
    rows: Any,
    outcome: str,
    grouping: str,
) -> GroupReport | None:
    """
    Compare a numeric outcome across the levels of a grouping column.

    Args:
        rows: Sequence of row mappings, or a data frame
        outcome: Numeric column to compare
        grouping: Column whose levels define the groups

    Returns:
        GroupReport, or None when the data are insufficient
    """
    return group_report(GroupDesign.from_rows(rows, outcome, grouping))
