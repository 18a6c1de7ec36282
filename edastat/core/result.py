"""
Generic result container for all edastat computations.

The Result class provides a standardized envelope that domain-specific
results use. This enables shared tooling for timing, diagnostics and
reproducibility while allowing domains to define their own parameter
structures.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, counts, policies)
    - timing is optional (don't burden unit tests)
    - provenance records package versions for reproducibility
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


def _default_provenance() -> dict[str, str]:
    """Version metadata attached to every result."""
    import numpy as np
    from edastat import __version__

    return {
        'edastat_version': __version__,
        'numpy_version': np.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (correlations, group statistics)
        info: Structured metadata (method, number of variables, ...)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the code path that produced this result
        warnings: Non-fatal issues encountered during computation
        provenance: Package versions used to produce the result

    Examples:
        >>> Result(
        ...     params=CorrelationParams(results=(...), variables=('a', 'b')),
        ...     info={'method': 'pearson', 'use': 'pairwise.complete.obs'},
        ...     timing={'total_seconds': 0.01},
        ...     backend_name='cpu_correlation'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
