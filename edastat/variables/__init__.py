"""
Variable classification and descriptive statistics.

Public API:
    classify(values)             - Numerical vs categorical
    force_numeric(values)        - Re-derive a column as numerical
    summarize(values, kind)      - Per-column descriptive statistics
    build_dataset(rows)          - Classify and summarize a whole table
    reclassify(dataset, name, kind) - Functional update of one column
"""

from edastat.variables._common import Variable, VariableKind, VariableStats
from edastat.variables._coerce import is_missing, is_numeric_like, to_number
from edastat.variables._classify import classify, coerce_numeric, force_numeric
from edastat.variables._summary import summarize
from edastat.variables.dataset import Dataset, build_dataset, reclassify

__all__ = [
    "classify",
    "force_numeric",
    "coerce_numeric",
    "summarize",
    "build_dataset",
    "reclassify",
    "is_missing",
    "is_numeric_like",
    "to_number",
    "Dataset",
    "Variable",
    "VariableKind",
    "VariableStats",
]
