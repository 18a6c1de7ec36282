"""
Correlation matrix solver.

Public API:
    correlation_matrix(rows, names) -> CorrelationSolution
"""

from __future__ import annotations

from typing import Any

from edastat.core.result import Result
from edastat.core.significance import significance_stars
from edastat.core.compute.timing import Timer
from edastat.core.compute.approximations import correlation_p_value
from edastat.correlation._common import CorrelationParams, CorrelationResult
from edastat.correlation._pearson import pairwise_mask, pearson_r
from edastat.correlation.design import CorrelationDesign
from edastat.correlation.solution import CorrelationSolution


def correlation_matrix(
    rows: Any | CorrelationDesign,
    names: Any = None,
) -> CorrelationSolution:
    """
    Pearson correlation and p-value for every ordered pair of variables.

    Each pair uses only the rows where both cells coerce to a finite
    number (pairwise-complete cases), so a missing cell excludes a row
    from the pairs involving that column only. Both (x, y) and (y, x) are
    computed, as is every self-pair.

    p-values use the closed-form approximation in
    edastat.core.compute.approximations, not an exact t distribution.

    Args:
        rows: Sequence of row mappings, a data frame, or a CorrelationDesign
        names: Numerical column names to correlate (ignored for a design)

    Returns:
        CorrelationSolution; iterating it yields CorrelationResult records

    Examples:
        >>> rows = [{'a': 1, 'b': 2}, {'a': 2, 'b': 4}, {'a': 3, 'b': 6}]
        >>> res = correlation_matrix(rows, ['a', 'b'])
        >>> res.get('a', 'b').r
        1.0
    """
    timer = Timer()
    timer.start()

    with timer.section('coerce'):
        if isinstance(rows, CorrelationDesign):
            design = rows
        else:
            design = CorrelationDesign.from_rows(rows, names)

    columns = design.columns
    results: list[CorrelationResult] = []
    warnings_list: list[str] = []

    with timer.section('pearson'):
        for i, x_name in enumerate(columns):
            for j, y_name in enumerate(columns):
                xi = design.column(i)
                yj = design.column(j)
                mask = pairwise_mask(xi, yj)
                n = int(mask.sum())

                r = pearson_r(xi[mask], yj[mask])
                p = correlation_p_value(r, n)

                if n > 0 and (
                    xi[mask].min() == xi[mask].max() or yj[mask].min() == yj[mask].max()
                ):
                    warnings_list.append(
                        f"{x_name}~{y_name}: constant input, r set to 0"
                    )

                results.append(CorrelationResult(
                    x=x_name,
                    y=y_name,
                    r=r,
                    p_value=p,
                    n=n,
                    significance=significance_stars(p),
                ))

    timer.stop()

    params = CorrelationParams(
        variables=columns,
        results=tuple(results),
        n_rows=design.n,
    )

    result = Result(
        params=params,
        info={
            'method': 'pearson',
            'use': 'pairwise.complete.obs',
            'p_value': 'normal approximation',
            'n_variables': len(columns),
        },
        timing=timer.result(),
        backend_name='cpu_correlation',
        warnings=tuple(warnings_list),
    )

    return CorrelationSolution(_result=result, _design=design)
