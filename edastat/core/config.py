"""
Classification policies for edastat.

This module is the SINGLE SOURCE OF TRUTH for the numeric-majority
thresholds used when deciding whether a column is numerical. Callers pick
a policy explicitly instead of relying on constants buried in call sites.

Usage:
    from edastat.core.config import MAJORITY, LENIENT

    kind = classify(values, policy=MAJORITY)
    kind, coerced = force_numeric(values, policy=LENIENT)
"""

from dataclasses import dataclass

from edastat.core.exceptions import ValidationError


@dataclass(frozen=True)
class ClassificationPolicy:
    """
    Threshold on the fraction of numeric-like values in a column.

    Attributes:
        threshold: Fraction in [0, 1] the numeric share is compared against
        inclusive: If True the share must reach the threshold (>=),
            otherwise it must strictly exceed it (>)
        name: Identifier used in result metadata
    """
    threshold: float
    inclusive: bool = False
    name: str = 'custom'

    def __post_init__(self) -> None:
        if not 0.0 <= self.threshold <= 1.0:
            raise ValidationError(
                f"threshold: must be in [0, 1], got {self.threshold}"
            )

    def accepts(self, numeric_count: int, total: int) -> bool:
        """Whether numeric_count out of total non-missing values passes."""
        if total <= 0:
            return False
        share = numeric_count / total
        if self.inclusive:
            return share >= self.threshold
        return share > self.threshold

    @classmethod
    def coerce(cls, policy: 'ClassificationPolicy | float') -> 'ClassificationPolicy':
        """Accept a bare float threshold wherever a policy is expected."""
        if isinstance(policy, ClassificationPolicy):
            return policy
        if isinstance(policy, bool) or not isinstance(policy, (int, float)):
            raise ValidationError(
                f"policy: expected ClassificationPolicy or float, got {type(policy).__name__}"
            )
        return cls(threshold=float(policy))


# Numeric if more than half of the non-missing values parse as numbers
MAJORITY = ClassificationPolicy(threshold=0.5, name='majority')

# Numeric only if every non-missing value parses as a number
UNANIMOUS = ClassificationPolicy(threshold=1.0, inclusive=True, name='unanimous')

# Forced re-classification: numeric if more than 10% parse as numbers
LENIENT = ClassificationPolicy(threshold=0.1, name='lenient')


__all__ = [
    'ClassificationPolicy',
    'MAJORITY',
    'UNANIMOUS',
    'LENIENT',
]
