"""Short-term vs. long-term holding period classification.

A lot is long-term when it was held for more than one year. The test is
done on the calendar period between the buy and sell dates, measured the
ISO-8601 way: whole months first (clamping to the end of shorter months),
then the leftover days.
"""

import calendar
from datetime import date
from typing import NamedTuple

from hsareport.models.enums import HoldingPeriod


class Period(NamedTuple):
    years: int
    months: int
    days: int


def _add_months(start: date, months: int) -> date:
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def period_between(start: date, end: date) -> Period:
    """Calendar period from start to end, e.g. 2023-01-31 -> 2023-03-01 is 0y 1m 1d."""
    if end < start:
        raise ValueError(f"Period end {end} is before start {start}")

    total_months = (end.year - start.year) * 12 + (end.month - start.month)
    days = end.day - start.day
    if total_months > 0 and days < 0:
        total_months -= 1
        days = (end - _add_months(start, total_months)).days
    return Period(total_months // 12, total_months % 12, days)


def is_long_term(buy_date: date, sell_date: date) -> bool:
    """True if shares bought on buy_date and sold on sell_date are a long-term gain."""
    if sell_date < buy_date:
        # Nonsense pair; lot selection should already have excluded it.
        return False

    period = period_between(buy_date, sell_date)
    if period.years < 1:
        return False
    if period.years > 1:
        return True

    # Selling on Feb 29 needs one extra day of holding.
    min_days = 2 if (sell_date.month == 2 and sell_date.day == 29) else 1
    return period.months > 0 or period.days >= min_days


def holding_period(buy_date: date, sell_date: date) -> HoldingPeriod:
    if is_long_term(buy_date, sell_date):
        return HoldingPeriod.LONG_TERM
    return HoldingPeriod.SHORT_TERM
