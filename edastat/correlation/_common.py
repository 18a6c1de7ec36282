"""
Common data types for correlation.

Frozen parameter payloads that go inside Result[P] envelopes.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CorrelationResult:
    """Pearson correlation of one ordered pair of variables."""
    x: str
    y: str
    r: float                # in [-1, 1]; 0.0 for constant input
    p_value: float          # in [0, 1]; 1.0 when n <= 2
    n: int                  # pairwise-complete observations
    significance: str       # '', '*', '**' or '***'


@dataclass(frozen=True)
class CorrelationParams:
    """
    Parameter payload for a correlation matrix.

    results holds every ordered pair (x, y), including x == y, in
    row-major order over variables.
    """
    variables: tuple[str, ...]
    results: tuple[CorrelationResult, ...]
    n_rows: int
