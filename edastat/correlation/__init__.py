"""
Pearson correlation matrix with significance testing.

Public API:
    correlation_matrix(rows, names) -> CorrelationSolution
    pearson_r(x, y)                 -> float
"""

from edastat.correlation._common import CorrelationParams, CorrelationResult
from edastat.correlation._pearson import pearson_r
from edastat.correlation.design import CorrelationDesign
from edastat.correlation.solution import CorrelationSolution
from edastat.correlation.solvers import correlation_matrix

__all__ = [
    "correlation_matrix",
    "pearson_r",
    "CorrelationDesign",
    "CorrelationParams",
    "CorrelationResult",
    "CorrelationSolution",
]
