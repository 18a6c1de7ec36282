"""
Group design: validated observations split by group label.

Factory methods accept either a ready mapping of label -> observations or
row data plus the names of the outcome and grouping columns.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from edastat.core.exceptions import ValidationError
from edastat.core.validation import (
    check_array,
    check_finite,
    check_1d,
    check_rows,
    check_columns,
)
from edastat.variables._coerce import is_missing, label, to_number


def group_observations(
    rows: Any,
    outcome: str,
    grouping: str,
) -> dict[str, list[float]]:
    """
    Split a numeric outcome column by the levels of a grouping column.

    Rows with a missing grouping cell, or an outcome cell that does not
    coerce to a finite number, are skipped. Labels are the text form of
    the grouping cell, in order of first appearance.

    Args:
        rows: Sequence of row mappings, or a data frame
        outcome: Numeric column to compare
        grouping: Column whose levels define the groups

    Returns:
        dict label -> list of observations
    """
    rows = check_rows(rows)
    check_columns(rows, (outcome, grouping))

    groups: dict[str, list[float]] = {}
    for row in rows:
        level = row[grouping]
        value = to_number(row[outcome])
        if is_missing(level) or value is None:
            continue
        groups.setdefault(label(level), []).append(value)

    return groups


@dataclass(frozen=True)
class GroupDesign:
    """
    Validated data container for group comparison.

    Created via factory methods, not directly. Empty groups are dropped
    and listed in `dropped`.
    """
    labels: tuple[str, ...]
    samples: tuple[NDArray[np.floating[Any]], ...]
    dropped: tuple[str, ...]

    @staticmethod
    def from_mapping(grouped: Any) -> 'GroupDesign':
        """
        Create design from a mapping of group label -> observations.

        Args:
            grouped: {label: 1D sequence of finite numbers}

        Raises:
            ValidationError: If grouped is not a mapping or a group holds
                non-numeric or non-finite observations
        """
        if not isinstance(grouped, Mapping):
            raise ValidationError(
                f"groups: expected a mapping of label to observations, "
                f"got {type(grouped).__name__}"
            )

        labels: list[str] = []
        samples: list[NDArray] = []
        dropped: list[str] = []

        for key, observations in grouped.items():
            name = f"groups[{key!r}]"
            if isinstance(observations, (str, bytes)):
                raise ValidationError(f"{name}: expected a sequence of numbers, got text")
            arr = check_array(observations, name)
            check_1d(arr, name)
            check_finite(arr, name)

            if arr.shape[0] == 0:
                dropped.append(str(key))
                continue
            labels.append(str(key))
            samples.append(arr)

        if len(set(labels)) != len(labels):
            raise ValidationError(f"groups: labels collide after text conversion: {labels}")

        return GroupDesign(
            labels=tuple(labels),
            samples=tuple(samples),
            dropped=tuple(dropped),
        )

    @staticmethod
    def from_rows(rows: Any, outcome: str, grouping: str) -> 'GroupDesign':
        """Create design by splitting a row table (see group_observations)."""
        return GroupDesign.from_mapping(group_observations(rows, outcome, grouping))

    @property
    def k(self) -> int:
        """Number of non-empty groups."""
        return len(self.labels)

    @property
    def n(self) -> int:
        """Total number of observations."""
        return sum(s.shape[0] for s in self.samples)

    def __repr__(self) -> str:
        return f"GroupDesign(k={self.k}, n={self.n})"
