"""
edastat: the statistics engine behind an exploratory data analysis tool.

Pure, synchronous routines that turn raw tabular columns into typed
variables with descriptive statistics, and compute correlation matrices
and group comparisons with significance annotations.

Submodules:
    variables: Type classification, summary statistics, dataset assembly
    correlation: Pairwise Pearson correlation matrix with p-values
    groups: Independent t-test / one-way ANOVA with post-hoc comparisons
    core: Exceptions, result envelope, configuration, shared numerics
"""

__version__ = "0.1.0"

from edastat import core
from edastat import variables
from edastat import correlation
from edastat import groups

__all__ = [
    "__version__",
    "core",
    "variables",
    "correlation",
    "groups",
]
