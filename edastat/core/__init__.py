"""
Core infrastructure for edastat.

This module provides shared abstractions and utilities used by all
domain-specific submodules (variables, correlation, groups).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators for row-shaped and numeric data
    config: Classification policies
    significance: p-value to star-label mapping
    compute: Timing, tolerances, p-value approximation
"""

from edastat.core.result import Result
from edastat.core.exceptions import (
    EdaStatError,
    ValidationError,
    DimensionError,
)
from edastat.core.config import (
    ClassificationPolicy,
    MAJORITY,
    UNANIMOUS,
    LENIENT,
)
from edastat.core.significance import significance_stars

__all__ = [
    # Result
    "Result",
    # Exceptions
    "EdaStatError",
    "ValidationError",
    "DimensionError",
    # Configuration
    "ClassificationPolicy",
    "MAJORITY",
    "UNANIMOUS",
    "LENIENT",
    # Annotation
    "significance_stars",
]
