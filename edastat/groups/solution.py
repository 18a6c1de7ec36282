"""
User-facing group comparison result.

GroupReport wraps a Result[GroupParams] and provides convenient
accessors and an R-style ANOVA table with post-hoc comparisons.
"""

from dataclasses import dataclass
from typing import Any

from edastat.core.exceptions import ValidationError
from edastat.core.result import Result
from edastat.core.significance import significance_stars
from edastat.groups._common import GroupParams, GroupSummary, PairwiseComparison


@dataclass
class GroupReport:
    """
    Result of a t-test / one-way ANOVA with post-hoc comparisons.

    Produced by group_report() and compare_groups().
    """
    _result: Result[GroupParams]

    @property
    def test(self) -> str:
        """'Independent T-test' for two groups, else 'One-way ANOVA'."""
        return self._result.params.test

    @property
    def f_value(self) -> float:
        return self._result.params.f_value

    @property
    def p_value(self) -> float:
        return self._result.params.p_value

    @property
    def significance(self) -> str:
        return significance_stars(self.p_value)

    @property
    def eta_squared(self) -> float:
        return self._result.params.eta_squared

    @property
    def df_between(self) -> int:
        return self._result.params.df_between

    @property
    def df_within(self) -> int:
        return self._result.params.df_within

    @property
    def ss_between(self) -> float:
        return self._result.params.ss_between

    @property
    def ss_within(self) -> float:
        return self._result.params.ss_within

    @property
    def grand_mean(self) -> float:
        return self._result.params.grand_mean

    @property
    def n_obs(self) -> int:
        return self._result.params.n_obs

    @property
    def groups(self) -> tuple[GroupSummary, ...]:
        return self._result.params.groups

    @property
    def pairwise(self) -> tuple[PairwiseComparison, ...]:
        return self._result.params.pairwise

    def group(self, name: str) -> GroupSummary:
        for g in self.groups:
            if g.name == name:
                return g
        raise ValidationError(
            f"unknown group {name!r}, available: {[g.name for g in self.groups]}"
        )

    def comparison(self, group1: str, group2: str) -> PairwiseComparison:
        """Post-hoc comparison for an unordered pair of groups."""
        for c in self.pairwise:
            if {c.group1, c.group2} == {group1, group2}:
                return c
        raise ValidationError(f"no comparison between {group1!r} and {group2!r}")

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Generate R-style ANOVA table followed by group means and post-hoc tests."""
        ms_between = self.ss_between / self.df_between
        ms_within = self.ss_within / self.df_within
        lines = [
            self.test,
            "=" * 72,
            f"Observations: {self.n_obs}    eta^2: {self.eta_squared:.4f}",
            "",
            f"{'Source':<20} {'Df':>6} {'Sum Sq':>14} {'Mean Sq':>14} {'F value':>10} {'Pr(>F)':>12}",
            "-" * 72,
            f"{'Between groups':<20} {self.df_between:>6} {self.ss_between:>14.4f} "
            f"{ms_between:>14.4f} {self.f_value:>10.4f} {self.p_value:>12.4e} "
            f"{self.significance}",
            f"{'Residuals':<20} {self.df_within:>6} {self.ss_within:>14.4f} "
            f"{ms_within:>14.4f}",
            "",
            f"{'Group':<20} {'n':>6} {'Mean':>14} {'Variance':>14}",
            "-" * 72,
        ]
        for g in self.groups:
            lines.append(f"{g.name:<20} {g.n:>6} {g.mean:>14.4f} {g.variance:>14.4f}")

        lines.append("")
        lines.append("Pairwise pooled t-tests (unadjusted)")
        lines.append("-" * 72)
        for c in self.pairwise:
            pair = f"{c.group1}-{c.group2}"
            lines.append(f"{pair:<30} {c.t_value:>10.4f} {c.df:>6} {c.p_value:>12.4e} {c.sig}")

        lines.append("---")
        lines.append("Signif. codes:  0 '***' 0.001 '**' 0.01 '*' 0.05 ' ' 1")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"GroupReport(test={self.test!r}, F={self.f_value:.4f}, "
            f"p={self.p_value:.4g}, k={len(self.groups)})"
        )
