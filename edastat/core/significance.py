"""
Significance annotation shared by correlation and group reports.
"""

import math

# (upper bound, label), checked in order
SIGNIFICANCE_LEVELS: tuple[tuple[float, str], ...] = (
    (0.001, '***'),
    (0.01, '**'),
    (0.05, '*'),
)


def significance_stars(p: float | None) -> str:
    """Return significance stars for a p-value ('' when not significant)."""
    if p is None or math.isnan(p):
        return ""
    for bound, label in SIGNIFICANCE_LEVELS:
        if p < bound:
            return label
    return ""
