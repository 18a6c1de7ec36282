"""
Common data types for variables.

Frozen payloads describing a classified column and its statistics.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

from edastat.core.exceptions import ValidationError


class VariableKind(enum.Enum):
    """Measurement type of a column."""
    NUMERICAL = 'numerical'
    CATEGORICAL = 'categorical'

    @classmethod
    def parse(cls, kind: 'VariableKind | str') -> 'VariableKind':
        """Accept an enum member or its string value."""
        if isinstance(kind, cls):
            return kind
        try:
            return cls(str(kind).lower())
        except ValueError as e:
            raise ValidationError(
                f"kind: expected 'numerical' or 'categorical', got {kind!r}"
            ) from e


@dataclass(frozen=True)
class VariableStats:
    """
    Descriptive statistics for one column.

    count + missing always equals the number of values. Numeric fields are
    None for categorical columns and for numerical columns whose values all
    failed coercion; frequencies is None for numerical columns.

    Attributes:
        count: Number of non-missing values
        missing: Number of missing values
        unique: Number of distinct non-missing values, as stored
        mean: Arithmetic mean of the numeric pool
        median: Middle order statistic (mean of the two middle for even n)
        std: Population standard deviation (divides by n)
        min: Smallest value in the numeric pool
        max: Largest value in the numeric pool
        frequencies: label -> count, in first-appearance order
    """
    count: int
    missing: int
    unique: int
    mean: float | None = None
    median: float | None = None
    std: float | None = None
    min: float | None = None
    max: float | None = None
    frequencies: dict[str, int] | None = None

    @property
    def total(self) -> int:
        return self.count + self.missing


@dataclass(frozen=True)
class Variable:
    """A classified column. Derived wholesale, never patched in place."""
    name: str
    kind: VariableKind
    values: tuple[Any, ...]
    stats: VariableStats

    @property
    def is_numerical(self) -> bool:
        return self.kind is VariableKind.NUMERICAL

    def __repr__(self) -> str:
        return (
            f"Variable(name={self.name!r}, kind={self.kind.value}, "
            f"n={len(self.values)}, missing={self.stats.missing})"
        )
