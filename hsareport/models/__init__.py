"""Data models for HSA Report."""

from hsareport.models.enums import Category, HoldingPeriod, SortDirection
from hsareport.models.reports import DividendYear, FundGains, LotAllocation, SaleMatch
from hsareport.models.transaction import Lot, Transaction

__all__ = [
    "Category",
    "DividendYear",
    "FundGains",
    "HoldingPeriod",
    "Lot",
    "LotAllocation",
    "SaleMatch",
    "SortDirection",
    "Transaction",
]
