"""Result models produced by the engines."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel

from hsareport.models.enums import HoldingPeriod
from hsareport.models.transaction import Transaction


class LotAllocation(BaseModel):
    """Shares taken from one lot to cover part of a sale."""

    lot_date: date
    lot_price: Decimal
    shares: Decimal
    cost_basis: Decimal
    proceeds: Decimal
    gain: Decimal
    holding_period: HoldingPeriod


class SaleMatch(BaseModel):
    """Outcome of matching one sale, plus the fund's running totals after it."""

    sale: Transaction
    allocations: list[LotAllocation]
    shares_matched: Decimal
    cost_basis: Decimal
    long_term_gain: Decimal
    short_term_gain: Decimal
    running_long_term_gain: Decimal = Decimal("0")
    running_short_term_gain: Decimal = Decimal("0")
    running_cost_basis: Decimal = Decimal("0")

    @property
    def total_gain(self) -> Decimal:
        return self.long_term_gain + self.short_term_gain

    @property
    def running_total_gain(self) -> Decimal:
        return self.running_long_term_gain + self.running_short_term_gain


class FundGains(BaseModel):
    """Realized gains for every sale of one fund."""

    fund: str
    sales: list[SaleMatch]
    long_term_gain: Decimal = Decimal("0")
    short_term_gain: Decimal = Decimal("0")
    cost_basis: Decimal = Decimal("0")

    @property
    def total_gain(self) -> Decimal:
        return self.long_term_gain + self.short_term_gain


class DividendYear(BaseModel):
    year: int
    total: Decimal
    count: int
