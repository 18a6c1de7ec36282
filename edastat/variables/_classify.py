"""
Type classification: numerical vs categorical.

A column is numerical when the share of its non-missing values that are
numeric-like passes the chosen ClassificationPolicy (MAJORITY by default).
A column with no non-missing values, or with no numeric-like value at all,
is categorical.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from edastat.core.config import ClassificationPolicy, MAJORITY, LENIENT
from edastat.variables._common import VariableKind
from edastat.variables._coerce import is_missing, is_numeric_like, to_number


def classify(
    values: Iterable[Any],
    *,
    policy: ClassificationPolicy | float = MAJORITY,
) -> VariableKind:
    """
    Decide whether a column is numerical or categorical.

    Args:
        values: Raw cells of the column. Missing cells are ignored, so
            callers may pass either the whole column or only its
            non-missing values.
        policy: Threshold on the numeric-like share (or a bare float,
            interpreted as a strict threshold).

    Returns:
        VariableKind.NUMERICAL or VariableKind.CATEGORICAL
    """
    policy = ClassificationPolicy.coerce(policy)

    present = [v for v in values if not is_missing(v)]
    numeric_count = sum(1 for v in present if is_numeric_like(v))

    if numeric_count > 0 and policy.accepts(numeric_count, len(present)):
        return VariableKind.NUMERICAL
    return VariableKind.CATEGORICAL


def coerce_numeric(values: Iterable[Any]) -> tuple[float | None, ...]:
    """Coerce every cell to a float, with None for anything non-numeric."""
    return tuple(None if is_missing(v) else to_number(v) for v in values)


def force_numeric(
    values: Iterable[Any],
    policy: ClassificationPolicy | float = LENIENT,
) -> tuple[VariableKind, tuple[Any, ...]]:
    """
    Re-derive a column as numerical under a (usually looser) policy.

    When the column passes the policy every cell is coerced: numbers
    become floats and anything that fails to parse becomes None. Applying
    this to its own output returns the same values.

    Args:
        values: Raw cells of the column (not modified)
        policy: Threshold on the numeric-like share. Defaults to LENIENT.

    Returns:
        (kind, values). If the policy rejects the column, kind is
        CATEGORICAL and the values are returned unchanged.
    """
    values = tuple(values)
    kind = classify(values, policy=policy)

    if kind is VariableKind.NUMERICAL:
        return kind, coerce_numeric(values)
    return kind, values
