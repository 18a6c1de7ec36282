"""
Correlation solution types.

CorrelationSolution wraps Result[CorrelationParams]. It behaves as a
sequence of CorrelationResult records and also exposes matrix views.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from edastat.core.exceptions import ValidationError
from edastat.core.result import Result
from edastat.correlation._common import CorrelationParams, CorrelationResult

if TYPE_CHECKING:
    from edastat.correlation.design import CorrelationDesign


@dataclass
class CorrelationSolution:
    """
    User-facing correlation matrix.

    Iterating yields one CorrelationResult per ordered pair, row-major
    over variables.
    """
    _result: Result[CorrelationParams]
    _design: 'CorrelationDesign'

    @property
    def results(self) -> tuple[CorrelationResult, ...]:
        return self._result.params.results

    @property
    def variables(self) -> tuple[str, ...]:
        return self._result.params.variables

    @property
    def n_rows(self) -> int:
        return self._result.params.n_rows

    def get(self, x: str, y: str) -> CorrelationResult:
        """Result for the ordered pair (x, y)."""
        p = len(self.variables)
        try:
            i = self.variables.index(x)
            j = self.variables.index(y)
        except ValueError as e:
            raise ValidationError(
                f"unknown variable pair ({x!r}, {y!r}), available: {list(self.variables)}"
            ) from e
        return self.results[i * p + j]

    def _matrix(self, field: str, dtype) -> NDArray:
        p = len(self.variables)
        values = [getattr(res, field) for res in self.results]
        return np.asarray(values, dtype=dtype).reshape(p, p)

    @property
    def r_matrix(self) -> NDArray[np.floating[Any]]:
        """Pearson r, shape (p, p)."""
        return self._matrix('r', np.float64)

    @property
    def p_matrix(self) -> NDArray[np.floating[Any]]:
        """p-values, shape (p, p)."""
        return self._matrix('p_value', np.float64)

    @property
    def pairwise_n(self) -> NDArray[np.integer[Any]]:
        """Pairwise-complete observation counts, shape (p, p)."""
        return self._matrix('n', np.int64)

    # --- Metadata ---

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

    # --- Sequence protocol ---

    def __iter__(self) -> Iterator[CorrelationResult]:
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    def __getitem__(self, index: int) -> CorrelationResult:
        return self.results[index]

    def summary(self) -> str:
        """Pairwise table of the upper triangle: r, p, n and stars."""
        lines = [
            "Pearson correlations (pairwise complete observations)",
            "=" * 64,
            f"{'x':<16} {'y':<16} {'r':>8} {'p':>12} {'n':>6}",
            "-" * 64,
        ]
        p = len(self.variables)
        for i in range(p):
            for j in range(i + 1, p):
                res = self.results[i * p + j]
                lines.append(
                    f"{res.x:<16} {res.y:<16} {res.r:>8.3f} "
                    f"{res.p_value:>12.4e} {res.n:>6} {res.significance}"
                )
        lines.append("---")
        lines.append("Signif. codes:  0 '***' 0.001 '**' 0.01 '*' 0.05 ' ' 1")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"CorrelationSolution(p={len(self.variables)}, "
            f"n_rows={self.n_rows}, pairs={len(self.results)})"
        )
