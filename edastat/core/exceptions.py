"""
Exception hierarchy for edastat.

All exceptions inherit from EdaStatError to allow catching any
library-specific error.

Design principles:
    - Statistical edge cases (constant columns, tiny samples, empty groups)
      are NOT errors; they resolve to documented fallback values
    - Exceptions are reserved for structural contract violations
      (non-mapping rows, ragged rows, non-numeric observations)
    - Error messages are actionable with actual vs expected values
"""


class EdaStatError(Exception):
    """Base exception for all edastat errors."""
    pass


class ValidationError(EdaStatError):
    """
    Input validation failed.

    Raised when caller-provided inputs violate the structural contract
    of an operation (wrong container type, unknown column, non-numeric
    observations where numbers are required).
    """
    pass


class DimensionError(ValidationError):
    """
    Input shape is inconsistent.

    Raised when rows are ragged (a row lacks a column the request names)
    or when parallel sequences have different lengths.

    Attributes:
        row_index: Index of the first offending row, if known
        column: Name of the column that was expected, if known
    """

    def __init__(
        self,
        message: str,
        row_index: int | None = None,
        column: str | None = None,
    ):
        super().__init__(message)
        self.row_index = row_index
        self.column = column
