"""
Input validation utilities for edastat.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about caller intent.

Design principles:
    - Only structural problems are rejected here; missing or non-numeric
      cell values are data, not errors
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Mapping
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from edastat.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Rejects inputs that result in object dtype (indicating mixed types or
    non-numeric data) and booleans.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype (always a fresh copy)

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_rows(rows: Any, name: str = "rows") -> tuple[Mapping[str, Any], ...]:
    """
    Verify input is a sequence of row mappings.

    Accepts any iterable of mappings, or an object exposing
    ``to_dict('records')`` (a data frame).

    Args:
        rows: Input to validate
        name: Parameter name for error messages

    Returns:
        Tuple of the row mappings (the mappings themselves are not copied)

    Raises:
        ValidationError: If rows is not iterable or an element is not a mapping
    """
    if hasattr(rows, 'to_dict') and not isinstance(rows, Mapping):
        rows = rows.to_dict('records')

    if isinstance(rows, (str, bytes, Mapping)):
        raise ValidationError(
            f"{name}: expected a sequence of row mappings, got {type(rows).__name__}"
        )

    try:
        result = tuple(rows)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected a sequence of row mappings, got {type(rows).__name__}"
        ) from e

    for i, row in enumerate(result):
        if not isinstance(row, Mapping):
            raise ValidationError(
                f"{name}[{i}]: expected a mapping of column name to value, "
                f"got {type(row).__name__}"
            )

    return result


def check_columns(
    rows: tuple[Mapping[str, Any], ...],
    columns: tuple[str, ...],
    name: str = "rows",
) -> None:
    """
    Verify every row carries every requested column.

    A row without one of the columns is ragged; a missing value must be
    spelled explicitly (None, NaN or empty text).

    Args:
        rows: Row mappings (already validated by check_rows)
        columns: Column names that each row must contain
        name: Parameter name for error messages

    Raises:
        DimensionError: On the first row lacking a column
    """
    for i, row in enumerate(rows):
        for column in columns:
            if column not in row:
                raise DimensionError(
                    f"{name}[{i}]: missing column {column!r} "
                    f"(row has {sorted(map(str, row.keys()))})",
                    row_index=i,
                    column=column,
                )


def check_names(names: Any, name: str) -> tuple[str, ...]:
    """
    Verify input is a sequence of distinct column names.

    Args:
        names: Input to validate
        name: Parameter name for error messages

    Returns:
        Tuple of column names

    Raises:
        ValidationError: If names is not a sequence, is a bare string, or
            contains duplicates
    """
    if isinstance(names, (str, bytes)):
        raise ValidationError(
            f"{name}: expected a sequence of column names, got a single string {names!r}"
        )

    try:
        result = tuple(names)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected a sequence of column names, got {type(names).__name__}"
        ) from e

    duplicates = sorted({str(n) for n in result if result.count(n) > 1})
    if duplicates:
        raise ValidationError(f"{name}: duplicate column names {duplicates}")

    return result
