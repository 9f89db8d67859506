"""Custom exceptions for HSA Report."""

from datetime import date
from decimal import Decimal


class HSAReportError(Exception):
    """Base exception for HSA report errors."""


class DataValidationError(HSAReportError):
    """Raised when input data fails validation."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Validation error on '{field}': {message}")


class ReportParseError(HSAReportError):
    """Raised when an HSA transaction report cannot be parsed."""

    def __init__(self, file_path: str, message: str):
        self.file_path = file_path
        super().__init__(f"Report parse error for {file_path}: {message}")


class DateRangeError(ReportParseError):
    """Raised when the report's date-range header is missing or malformed."""

    def __init__(self, file_path: str, header: str):
        self.header = header
        super().__init__(file_path, f"Invalid date range: {header}")


class LotMatchingInconsistency(HSAReportError):
    """Raised when a sale's matched lots do not add up to the sale itself.

    This means the ledger is incomplete or corrupted, typically a sale with
    not enough earlier shares to cover it.
    """

    def __init__(
        self,
        fund: str,
        sale_date: date,
        what: str,
        expected: Decimal,
        actual: Decimal,
    ):
        self.fund = fund
        self.sale_date = sale_date
        self.what = what
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Lot matching mismatch for {fund} sale on {sale_date}: "
            f"{what} expected={expected}, actual={actual}"
        )
