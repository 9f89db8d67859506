"""Adapter for HSA "All Investment Transactions" HTML reports."""

import logging
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from pathlib import Path

from bs4 import BeautifulSoup
from pydantic import ValidationError

from hsareport.exceptions import DataValidationError, DateRangeError, ReportParseError
from hsareport.models.enums import Category
from hsareport.models.transaction import Transaction

logger = logging.getLogger(__name__)

TITLE = "All Investment Transactions"
DATE_RANGE_PATTERN = re.compile(r"Date Range:\s*(\d+/\d+/\d+)\s*to\s*(\d+/\d+/\d+)")
NUM_COLUMNS = 9

# Column layout of a transaction row
_COL_DATE = 0
_COL_FUND = 1
_COL_CATEGORY = 2
_COL_PRICE = 4
_COL_AMOUNT = 5
_COL_SHARES = 6
_COL_TOTAL_SHARES = 7
_COL_TOTAL_VALUE = 8


def parse_date(value: str) -> date:
    """Parse M/D/YYYY, falling back to M/D/YY."""
    stripped = value.strip()
    for fmt in ("%m/%d/%Y", "%m/%d/%y"):
        try:
            return datetime.strptime(stripped, fmt).date()
        except ValueError:
            continue
    raise DataValidationError("date", f"cannot parse date '{value}'")


def parse_number(value: str, field: str = "number") -> Decimal:
    """Parse report numbers such as '12.5', '$1,234.56' and '($7.00)'."""
    text = value.strip()
    if text.startswith("($") and text.endswith(")"):
        text = "-" + text[2:-1]
    elif text.startswith("$"):
        text = text[1:]
    text = text.replace(",", "")
    try:
        return Decimal(text)
    except InvalidOperation:
        raise DataValidationError(field, f"cannot parse number '{value}'") from None


def parse_category(value: str) -> Category:
    try:
        return Category(value.strip())
    except ValueError:
        known = ", ".join(c.value for c in Category)
        raise DataValidationError("category", f"unknown category '{value}' (expected {known})") from None


def parse_row(cells: list[str]) -> Transaction:
    """Build a Transaction from the text of one table row."""
    if len(cells) != NUM_COLUMNS:
        raise DataValidationError("row", f"expected {NUM_COLUMNS} columns, got {len(cells)}: {cells}")

    try:
        return Transaction(
            date=parse_date(cells[_COL_DATE]),
            fund=cells[_COL_FUND].strip(),
            category=parse_category(cells[_COL_CATEGORY]),
            price=parse_number(cells[_COL_PRICE], "price"),
            amount=parse_number(cells[_COL_AMOUNT], "amount"),
            shares=parse_number(cells[_COL_SHARES], "shares"),
            total_shares=parse_number(cells[_COL_TOTAL_SHARES], "total_shares"),
            total_value=parse_number(cells[_COL_TOTAL_VALUE], "total_value"),
        )
    except ValidationError as exc:
        raise DataValidationError("row", f"{cells}: {exc.errors()[0]['msg']}") from exc


@dataclass
class ParsedReport:
    """One report file: its header date range and its transaction rows."""

    source: Path
    date_from: date
    date_to: date
    transactions: list[Transaction] = field(default_factory=list)


class HSAReportAdapter:
    """Reads the transaction table exported from an HSA investment account.

    Expected rows: a title cell, a "Date Range: M/D/YYYY to M/D/YYYY" cell,
    a header row, then one row per transaction.
    """

    def parse(self, file_path: Path) -> ParsedReport:
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        soup = BeautifulSoup(file_path.read_text(encoding="utf-8"), "html.parser")
        rows = [
            [cell.get_text(strip=True) for cell in row.find_all("td")]
            for row in soup.find_all("tr")
        ]
        if len(rows) < 3:
            raise ReportParseError(str(file_path), f"expected at least 3 table rows, found {len(rows)}")

        self._check_title(file_path, rows[0])
        date_from, date_to = self._parse_date_range(file_path, rows[1])
        self._check_header(file_path, rows[2])

        transactions: list[Transaction] = []
        for cells in rows[3:]:
            if not cells:
                continue
            transactions.append(parse_row(cells))

        logger.info(
            "%s: %s -> %s, %d transactions", file_path.name, date_from, date_to, len(transactions)
        )
        return ParsedReport(
            source=file_path,
            date_from=date_from,
            date_to=date_to,
            transactions=transactions,
        )

    def validate(self, data: ParsedReport) -> list[str]:
        """Warn about transactions dated outside the report's date range."""
        warnings: list[str] = []
        for txn in data.transactions:
            if not data.date_from <= txn.date <= data.date_to:
                warnings.append(
                    f"{data.source.name}: {txn.category} {txn.fund} on {txn.date} is outside "
                    f"{data.date_from} -> {data.date_to}"
                )
        return warnings

    @staticmethod
    def _check_title(file_path: Path, cells: list[str]) -> None:
        if len(cells) != 1 or TITLE not in cells[0]:
            raise ReportParseError(str(file_path), f"missing '{TITLE}' title row")

    @staticmethod
    def _parse_date_range(file_path: Path, cells: list[str]) -> tuple[date, date]:
        header = cells[0] if len(cells) == 1 else " | ".join(cells)
        m = DATE_RANGE_PATTERN.search(header)
        if len(cells) != 1 or not m:
            raise DateRangeError(str(file_path), header)
        try:
            date_from = parse_date(m.group(1))
            date_to = parse_date(m.group(2))
        except DataValidationError:
            raise DateRangeError(str(file_path), header) from None
        if date_from > date_to:
            raise DateRangeError(str(file_path), header)
        return date_from, date_to

    @staticmethod
    def _check_header(file_path: Path, cells: list[str]) -> None:
        if len(cells) != NUM_COLUMNS or "Date" not in cells[0] or "Fund" not in cells[1]:
            raise ReportParseError(str(file_path), f"unexpected header row: {cells}")
