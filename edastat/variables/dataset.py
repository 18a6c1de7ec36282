"""
Dataset: the classified, summarized view of an imported table.

A Dataset is an immutable snapshot. Changing the classification of a
column goes through reclassify(), which returns a new snapshot.

Construction:
    build_dataset(rows)
    build_dataset(frame)                  # anything with to_dict('records')
    reclassify(dataset, 'age', 'numerical')
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any, Mapping

from edastat.core.config import ClassificationPolicy, MAJORITY, LENIENT
from edastat.core.exceptions import ValidationError
from edastat.core.validation import check_rows, check_columns
from edastat.variables._common import Variable, VariableKind
from edastat.variables._classify import classify, coerce_numeric, force_numeric
from edastat.variables._summary import summarize


@dataclass(frozen=True)
class Dataset:
    """
    Rows plus one Variable per column.

    Rows hold the same (possibly coerced) cell values as the variables
    and are read-only mappings.
    """
    rows: tuple[Mapping[str, Any], ...]
    variables: tuple[Variable, ...]

    @property
    def columns(self) -> tuple[str, ...]:
        """Column names, in import order."""
        return tuple(v.name for v in self.variables)

    @property
    def n(self) -> int:
        """Number of rows."""
        return len(self.rows)

    @property
    def numerical_variables(self) -> tuple[str, ...]:
        return tuple(v.name for v in self.variables if v.kind is VariableKind.NUMERICAL)

    @property
    def categorical_variables(self) -> tuple[str, ...]:
        return tuple(v.name for v in self.variables if v.kind is VariableKind.CATEGORICAL)

    def variable(self, name: str) -> Variable:
        """Look up a variable by column name."""
        for v in self.variables:
            if v.name == name:
                return v
        raise ValidationError(
            f"name: unknown column {name!r}, available: {list(self.columns)}"
        )

    def __repr__(self) -> str:
        return (
            f"Dataset(n={self.n}, numerical={len(self.numerical_variables)}, "
            f"categorical={len(self.categorical_variables)})"
        )


def _derive_variable(
    name: str,
    raw: tuple[Any, ...],
    policy: ClassificationPolicy,
) -> Variable:
    kind = classify(raw, policy=policy)
    values = coerce_numeric(raw) if kind is VariableKind.NUMERICAL else raw
    return Variable(name=name, kind=kind, values=values, stats=summarize(values, kind))


def _rebuild_rows(
    rows: tuple[Mapping[str, Any], ...],
    variables: tuple[Variable, ...],
) -> tuple[Mapping[str, Any], ...]:
    rebuilt = []
    for i, row in enumerate(rows):
        new_row = dict(row)
        for v in variables:
            new_row[v.name] = v.values[i]
        rebuilt.append(MappingProxyType(new_row))
    return tuple(rebuilt)


def build_dataset(
    rows: Any,
    *,
    policy: ClassificationPolicy | float = MAJORITY,
) -> Dataset:
    """
    Classify and summarize every column of a table.

    Columns are taken from the first row; every other row must carry the
    same columns (spell missing cells as None, NaN or empty text).
    Numerical columns are coerced so that unparseable cells become None.

    Args:
        rows: Sequence of row mappings, or a data frame
        policy: Classification policy for the numeric-like share

    Returns:
        Dataset snapshot. The caller's rows are not modified.

    Raises:
        ValidationError: If rows is not a non-empty sequence of mappings
        DimensionError: If a row lacks one of the first row's columns
    """
    policy = ClassificationPolicy.coerce(policy)
    rows = check_rows(rows)
    if not rows:
        raise ValidationError("rows: need at least 1 row, got 0")

    columns = tuple(rows[0].keys())
    check_columns(rows, columns)

    variables = tuple(
        _derive_variable(name, tuple(row[name] for row in rows), policy)
        for name in columns
    )

    return Dataset(rows=_rebuild_rows(rows, variables), variables=variables)


def reclassify(
    dataset: Dataset,
    name: str,
    kind: VariableKind | str,
    *,
    policy: ClassificationPolicy | float = LENIENT,
) -> Dataset:
    """
    Return a new Dataset with one column re-derived as the given kind.

    Numerical: the column's current values go through force_numeric()
    with the given policy. If the policy rejects the column a
    RuntimeWarning is emitted and the dataset is returned unchanged.

    Categorical: the column keeps its current values and gets a
    frequency table.

    The input dataset is not modified. Repeating the same call on the
    result yields an equal dataset.
    """
    kind = VariableKind.parse(kind)
    current = dataset.variable(name)

    if kind is VariableKind.NUMERICAL:
        new_kind, values = force_numeric(current.values, policy)
        if new_kind is not VariableKind.NUMERICAL:
            policy = ClassificationPolicy.coerce(policy)
            warnings.warn(
                f"Column {name!r} has too few numeric values for policy "
                f"{policy.name!r} (threshold {policy.threshold}); left as "
                f"{current.kind.value}",
                RuntimeWarning,
                stacklevel=2,
            )
            return dataset
    else:
        values = current.values

    updated = replace(current, kind=kind, values=values, stats=summarize(values, kind))
    variables = tuple(updated if v.name == name else v for v in dataset.variables)

    return Dataset(rows=_rebuild_rows(dataset.rows, variables), variables=variables)
