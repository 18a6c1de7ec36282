"""
Cell-level helpers: missing detection, numeric coercion, display labels.

A raw cell is one of: None, a number, or text. Float NaN is treated as an
absent value because tabular readers use it for empty cells.
"""

from __future__ import annotations

import math
import numbers
from typing import Any

import numpy as np


def is_missing(value: Any) -> bool:
    """True for None, NaN, or anything whose text form strips to ''."""
    if value is None:
        return True
    if isinstance(value, (float, np.floating)):
        return bool(np.isnan(value))
    if isinstance(value, (bool, np.bool_, numbers.Number)):
        return False
    return str(value).strip() == ''


def to_number(value: Any) -> float | None:
    """
    Coerce a raw cell to a finite float.

    Booleans never count as numbers. Text is stripped and parsed with
    float(); underscore digit separators and non-finite spellings
    ('nan', 'inf') are rejected, as are integers beyond the float range.

    Returns:
        The float value, or None if the cell is not numeric-like.
    """
    if value is None or isinstance(value, (bool, np.bool_)):
        return None

    if isinstance(value, numbers.Real):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not text or '_' in text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None

    return number if math.isfinite(number) else None


def is_numeric_like(value: Any) -> bool:
    return to_number(value) is not None


def label(value: Any) -> str:
    """Text form of a cell for frequency tables and group labels."""
    if isinstance(value, (bool, np.bool_)):
        return str(bool(value))
    if isinstance(value, numbers.Real):
        try:
            number = float(value)
        except OverflowError:
            return str(value)
        if math.isfinite(number) and number.is_integer():
            return str(int(number))
        return str(number)
    return str(value)
