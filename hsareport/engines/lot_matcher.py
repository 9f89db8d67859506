"""Lot matching engine: realized gains per sale using loss-first specific lots."""

import logging
from decimal import Decimal

from hsareport.engines.holding_period import holding_period
from hsareport.engines.lot_selector import LotSelector
from hsareport.exceptions import LotMatchingInconsistency
from hsareport.models.enums import HoldingPeriod
from hsareport.models.reports import FundGains, LotAllocation, SaleMatch
from hsareport.models.transaction import Lot, Transaction

logger = logging.getLogger(__name__)

EPSILON = Decimal("0.0001")
ZERO = Decimal("0")


def approx_equal(a: Decimal, b: Decimal) -> bool:
    return abs(a - b) < EPSILON


def reduce_shares(total: Decimal, subtract: Decimal) -> Decimal:
    """Subtract, snapping results within EPSILON of zero to exactly zero."""
    total -= subtract
    if abs(total) < EPSILON:
        return ZERO
    return total


class LotMatcher:
    """Matches sales against earlier buy and dividend lots of the same fund."""

    def __init__(self, selector: LotSelector | None = None, prorate_basis: bool = False) -> None:
        """
        Args:
            selector: Lot ordering; defaults to LotSelector.
            prorate_basis: Charge a partly sold lot only its unsold share of cost.
                By default the lot's full original amount is spread over
                whatever shares it has left.
        """
        self.selector = selector or LotSelector()
        self.prorate_basis = prorate_basis

    def match_fund(self, fund: str, transactions: list[Transaction]) -> FundGains:
        """Match every sale of one fund in ledger order.

        Works on a fresh set of lots, so the transactions passed in are never
        modified and repeated calls give identical results.
        """
        lots = Lot.working_set(transactions)
        ltg = stg = cost_basis = ZERO
        sales: list[SaleMatch] = []

        for sale_index, lot in enumerate(lots):
            sale = lot.transaction
            if not sale.is_sale:
                continue

            candidates = self.selector.select(sale_index, lots)
            match = self.match_sale(sale, candidates)
            ltg += match.long_term_gain
            stg += match.short_term_gain
            cost_basis += match.cost_basis
            sales.append(
                match.model_copy(
                    update={
                        "running_long_term_gain": ltg,
                        "running_short_term_gain": stg,
                        "running_cost_basis": cost_basis,
                    }
                )
            )

        logger.debug("%s: %d sales, LTG=%.2f STG=%.2f basis=%.2f", fund, len(sales), ltg, stg, cost_basis)
        return FundGains(
            fund=fund,
            sales=sales,
            long_term_gain=ltg,
            short_term_gain=stg,
            cost_basis=cost_basis,
        )

    def match_sale(self, sale: Transaction, ordered_lots: list[Lot]) -> SaleMatch:
        """Consume shares from ordered_lots until the sale is covered.

        Lots are modified in place. Raises LotMatchingInconsistency when the
        lots cannot cover the sale.
        """
        shares_to_match = abs(sale.shares)
        shares_matched = ZERO
        cost_basis = ZERO
        gains = {HoldingPeriod.LONG_TERM: ZERO, HoldingPeriod.SHORT_TERM: ZERO}
        allocations: list[LotAllocation] = []

        for lot in ordered_lots:
            if shares_to_match <= 0:
                break
            if lot.exhausted:
                continue

            period = holding_period(lot.date, sale.date)
            consumed = min(lot.shares_remaining, shares_to_match)
            lot_amount = lot.amount_remaining if self.prorate_basis else lot.transaction.amount
            buy_value = consumed / lot.shares_remaining * lot_amount
            sell_value = consumed / sale.shares * sale.amount
            gain = sell_value - buy_value

            gains[period] += gain
            cost_basis += buy_value
            shares_matched += consumed

            lot.shares_remaining = reduce_shares(lot.shares_remaining, consumed)
            if lot.shares_remaining == 0:
                lot.amount_remaining = ZERO
            elif self.prorate_basis:
                lot.amount_remaining -= buy_value
            shares_to_match = reduce_shares(shares_to_match, consumed)

            logger.debug(
                "%s sale %s: %.4f sh from lot #%d (%s @ %.2f, %s), gain %.2f",
                sale.fund, sale.date, consumed, lot.index, lot.date, lot.price, period, gain,
            )
            allocations.append(
                LotAllocation(
                    lot_date=lot.date,
                    lot_price=lot.price,
                    shares=consumed,
                    cost_basis=buy_value,
                    proceeds=sell_value,
                    gain=gain,
                    holding_period=period,
                )
            )

        match = SaleMatch(
            sale=sale,
            allocations=allocations,
            shares_matched=shares_matched,
            cost_basis=cost_basis,
            long_term_gain=gains[HoldingPeriod.LONG_TERM],
            short_term_gain=gains[HoldingPeriod.SHORT_TERM],
        )
        self._check(match)
        return match

    @staticmethod
    def _check(match: SaleMatch) -> None:
        sale = match.sale
        if not approx_equal(abs(sale.shares), match.shares_matched):
            raise LotMatchingInconsistency(
                sale.fund, sale.date, "shares", abs(sale.shares), match.shares_matched
            )
        accounted = match.cost_basis + match.total_gain
        if not approx_equal(abs(sale.amount), accounted):
            raise LotMatchingInconsistency(sale.fund, sale.date, "value", abs(sale.amount), accounted)
