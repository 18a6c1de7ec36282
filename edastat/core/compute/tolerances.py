"""
Tolerance tiers for numerical validation.

- CPU_FP64: exact arithmetic paths (means, sums of squares, Pearson r)
  compared against an independent float64 computation
- APPROXIMATION: p-values, which follow a closed-form approximation and
  are only compared against hand-evaluated values of the same formula

Used by the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='Double precision, independent reference computation',
)

# Symmetry of the correlation matrix (each direction computed separately)
SYMMETRY = ToleranceTier(
    rtol=0.0,
    atol=1e-9,
    name='symmetry',
    description='Ordered-pair results computed independently per direction',
)

APPROXIMATION = ToleranceTier(
    rtol=1e-9,
    atol=1e-12,
    name='approximation',
    description='Closed-form p-value approximation evaluated by hand',
)
