"""Dividend income summary."""

from decimal import Decimal

from hsareport.models.enums import Category
from hsareport.models.reports import DividendYear
from hsareport.models.transaction import Transaction


class DividendSummarizer:
    """Totals dividends per year in a single pass over a date-ordered ledger."""

    def summarize(self, transactions: list[Transaction]) -> list[DividendYear]:
        """One entry per run of same-year dividends.

        The ledger is not re-sorted; out-of-order input yields one entry per
        contiguous run, so a year can appear more than once.
        """
        years: list[DividendYear] = []
        year: int | None = None
        total = Decimal("0")
        count = 0

        for transaction in transactions:
            if transaction.category != Category.DIVIDEND:
                continue
            if year is not None and transaction.date.year != year:
                years.append(DividendYear(year=year, total=total, count=count))
                total = Decimal("0")
                count = 0
            year = transaction.date.year
            total += transaction.amount
            count += 1

        if count > 0:
            years.append(DividendYear(year=year, total=total, count=count))
        return years
