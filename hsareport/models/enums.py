"""Enumerations for HSA Report."""

from enum import StrEnum


class Category(StrEnum):
    BUY = "Buy"
    SELL = "Sell"
    DIVIDEND = "Dividend"


class HoldingPeriod(StrEnum):
    SHORT_TERM = "SHORT_TERM"
    LONG_TERM = "LONG_TERM"


class SortDirection(StrEnum):
    ASCENDING = "ASCENDING"
    DESCENDING = "DESCENDING"
