"""Shared test fixtures for HSA Report."""

from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from hsareport.models.enums import Category
from hsareport.models.transaction import Transaction

REPORT_HEADER = (
    "<tr><td>Date</td><td>Fund</td><td>Category</td><td>Description</td><td>Price</td>"
    "<td>Amount</td><td>Shares</td><td>Total Shares</td><td>Total Value</td></tr>"
)

SAMPLE_ROWS = [
    ["1/10/2023", "VIIIX", "Buy", "Purchase", "$10.00", "$1,000.00", "100.000", "100.000", "$1,000.00"],
    ["3/31/23", "VIIIX", "Dividend", "Reinvest", "$12.50", "$25.00", "2.000", "102.000", "$1,275.00"],
    ["6/1/2023", "VIIIX", "Sell", "Redemption", "$15.00", "($300.00)", "-20.000", "82.000", "$1,230.00"],
]


def report_html(
    rows: list[list[str]],
    date_range: str = "Date Range: 01/01/2023 to 12/31/2023",
    title: str = "All Investment Transactions",
) -> str:
    """Build an HSA transaction report the way the brokerage exports it."""
    body = "\n".join(
        "<tr>" + "".join(f"<td>{cell}</td>" for cell in row) + "</tr>" for row in rows
    )
    return (
        "<html><body><table>\n"
        f"<tr><td>{title}</td></tr>\n"
        f"<tr><td>{date_range}</td></tr>\n"
        f"{REPORT_HEADER}\n"
        f"{body}\n"
        "</table></body></html>\n"
    )


@pytest.fixture
def write_report(tmp_path: Path):
    """Write a report file into tmp_path and return its path."""

    def _write(name: str = "hsa-2023.html", rows: list[list[str]] | None = None, **kwargs) -> Path:
        path = tmp_path / name
        path.write_text(report_html(SAMPLE_ROWS if rows is None else rows, **kwargs), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_ledger() -> list[Transaction]:
    """One fund: two buys, a dividend reinvestment, then two sales."""
    return [
        Transaction(
            date=date(2022, 1, 10),
            fund="VIIIX",
            category=Category.BUY,
            price=Decimal("10"),
            amount=Decimal("100"),
            shares=Decimal("10"),
        ),
        Transaction(
            date=date(2022, 6, 1),
            fund="VIIIX",
            category=Category.BUY,
            price=Decimal("20"),
            amount=Decimal("100"),
            shares=Decimal("5"),
        ),
        Transaction(
            date=date(2023, 3, 1),
            fund="VIIIX",
            category=Category.DIVIDEND,
            price=Decimal("12"),
            amount=Decimal("12"),
            shares=Decimal("1"),
        ),
        Transaction(
            date=date(2023, 3, 15),
            fund="VIIIX",
            category=Category.SELL,
            price=Decimal("15"),
            amount=Decimal("-120"),
            shares=Decimal("-8"),
        ),
        Transaction(
            date=date(2023, 9, 1),
            fund="VIIIX",
            category=Category.SELL,
            price=Decimal("11"),
            amount=Decimal("-77"),
            shares=Decimal("-7"),
        ),
    ]
