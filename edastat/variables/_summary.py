"""
Per-column descriptive statistics.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import numpy as np

from edastat.core.exceptions import ValidationError
from edastat.variables._common import VariableKind, VariableStats
from edastat.variables._coerce import is_missing, label, to_number


def _count_distinct(values: list[Any]) -> int:
    # True and 1 hash alike; keep booleans apart from numbers
    try:
        return len({(isinstance(v, (bool, np.bool_)), v) for v in values})
    except TypeError as e:
        raise ValidationError(f"values: cells must be hashable scalars: {e}") from e


def summarize(
    values: Iterable[Any],
    kind: VariableKind | str,
) -> VariableStats:
    """
    Compute descriptive statistics for one column.

    Categorical: count, missing, unique and a frequency table keyed by the
    text form of each value.

    Numerical: count, missing, unique plus mean, median, population
    standard deviation, min and max over the values that coerce to finite
    numbers. Non-missing values that fail coercion drop out of the numeric
    pool but still count as present. If nothing coerces, the result is
    count=0, missing=len(values), unique=0 with no numeric fields.

    Args:
        values: Raw or coerced cells of the column (not modified)
        kind: VariableKind or 'numerical' / 'categorical'

    Returns:
        VariableStats
    """
    kind = VariableKind.parse(kind)
    values = list(values)

    present = [v for v in values if not is_missing(v)]
    n = len(present)
    missing = len(values) - n
    unique = _count_distinct(present)

    if kind is VariableKind.CATEGORICAL:
        frequencies: dict[str, int] = {}
        for v in present:
            key = label(v)
            frequencies[key] = frequencies.get(key, 0) + 1
        return VariableStats(
            count=n, missing=missing, unique=unique, frequencies=frequencies,
        )

    pool = [x for x in (to_number(v) for v in present) if x is not None]
    if not pool:
        return VariableStats(count=0, missing=len(values), unique=0)

    arr = np.asarray(pool, dtype=np.float64)

    return VariableStats(
        count=n,
        missing=missing,
        unique=unique,
        mean=float(np.mean(arr)),
        median=float(np.median(arr)),
        std=float(np.std(arr)),
        min=float(np.min(arr)),
        max=float(np.max(arr)),
    )
