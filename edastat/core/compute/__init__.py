"""
Shared compute infrastructure for edastat.

Submodules:
    timing: Execution timing utilities
    tolerances: Numerical tolerance tiers used by tests
    approximations: Closed-form p-value approximation shared by the
        correlation and group engines
"""

from edastat.core.compute.timing import Timer, timed
from edastat.core.compute.approximations import (
    normal_tail_probability,
    t_p_value,
    correlation_p_value,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # p-values
    "normal_tail_probability",
    "t_p_value",
    "correlation_p_value",
]
