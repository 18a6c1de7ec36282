"""
CorrelationDesign: numeric view of row data for correlation.

Coerces the requested columns of row-shaped input into an (n, p) float
matrix with NaN marking cells that are missing or not numeric-like.
Immutable after construction; the caller's rows are never modified.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from edastat.core.validation import check_rows, check_columns, check_names
from edastat.variables._coerce import to_number


@dataclass(frozen=True)
class CorrelationDesign:
    """
    Design for a correlation matrix.

    Construction:
        CorrelationDesign.from_rows(rows, ['age', 'income'])
    """
    _data: NDArray[np.floating[Any]]
    _columns: tuple[str, ...]

    @classmethod
    def from_rows(cls, rows: Any, names: Any) -> CorrelationDesign:
        """
        Build CorrelationDesign from row mappings.

        Args:
            rows: Sequence of mappings (one per record), or a data frame
            names: Columns to correlate. Every row must contain every name.

        Raises:
            ValidationError: If rows or names are malformed
            DimensionError: If a row lacks one of the names
        """
        rows = check_rows(rows)
        columns = check_names(names, "names")
        check_columns(rows, columns)

        data = np.full((len(rows), len(columns)), np.nan, dtype=np.float64)
        for i, row in enumerate(rows):
            for j, name in enumerate(columns):
                value = to_number(row[name])
                if value is not None:
                    data[i, j] = value

        return cls(_data=data, _columns=columns)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Data matrix (n x p), NaN where a cell is not numeric."""
        return self._data

    @property
    def n(self) -> int:
        """Number of rows."""
        return self._data.shape[0]

    @property
    def p(self) -> int:
        """Number of variables."""
        return self._data.shape[1]

    @property
    def columns(self) -> tuple[str, ...]:
        return self._columns

    def column(self, j: int) -> NDArray[np.floating[Any]]:
        return self._data[:, j]

    def __repr__(self) -> str:
        n_missing = int(np.sum(np.isnan(self._data)))
        missing = f", missing={n_missing}" if n_missing else ""
        return f"CorrelationDesign(n={self.n}, p={self.p}{missing})"
