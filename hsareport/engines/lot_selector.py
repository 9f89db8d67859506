"""Lot selection: which earlier lots a sale draws from, and in what order."""

from collections.abc import Callable
from decimal import Decimal

from hsareport.engines.holding_period import is_long_term
from hsareport.exceptions import DataValidationError
from hsareport.models.enums import SortDirection
from hsareport.models.transaction import Lot, Transaction


def price_sort_key(direction: SortDirection) -> Callable[[Lot], Decimal]:
    """Sort key ordering lots by price in the given direction."""
    if direction == SortDirection.DESCENDING:
        return lambda lot: -lot.price
    return lambda lot: lot.price


def _by_price(lots: list[Lot], direction: SortDirection) -> list[Lot]:
    # sorted() is stable: equal prices keep ledger order.
    return sorted(lots, key=price_sort_key(direction))


class LotSelector:
    """Orders the open lots a sale can be matched against.

    Losing lots (bought above the sale price) come first, largest loss
    first. Winning lots follow, long-term before short-term, each group
    highest price first to keep realized gains small.
    """

    def select(self, sale_index: int, lots: list[Lot]) -> list[Lot]:
        """All eligible lots for the sale at sale_index, in consumption order."""
        return self.losers(sale_index, lots) + self.winners(sale_index, lots)

    def losers(self, sale_index: int, lots: list[Lot]) -> list[Lot]:
        """Eligible lots bought at a higher price than the sale, price descending."""
        sale = self._sale_at(sale_index, lots)
        losses = [lot for lot in self._eligible(sale, lots) if lot.price > sale.price]
        return _by_price(losses, SortDirection.DESCENDING)

    def winners(self, sale_index: int, lots: list[Lot]) -> list[Lot]:
        """Eligible lots bought at or below the sale price.

        Long-term lots come first, then short-term; each group price descending.
        """
        sale = self._sale_at(sale_index, lots)
        long_term: list[Lot] = []
        short_term: list[Lot] = []
        for lot in self._eligible(sale, lots):
            if lot.price > sale.price:
                continue
            if is_long_term(lot.date, sale.date):
                long_term.append(lot)
            else:
                short_term.append(lot)

        return _by_price(long_term, SortDirection.DESCENDING) + _by_price(
            short_term, SortDirection.DESCENDING
        )

    @staticmethod
    def _sale_at(sale_index: int, lots: list[Lot]) -> Transaction:
        sale = lots[sale_index].transaction
        if not sale.is_sale:
            raise DataValidationError(
                "category", f"transaction {sale_index} is a {sale.category}, not a Sell"
            )
        return sale

    @staticmethod
    def _eligible(sale: Transaction, lots: list[Lot]) -> list[Lot]:
        return [
            lot
            for lot in lots
            if lot.transaction.is_acquisition
            and lot.date < sale.date
            and lot.shares_remaining > 0
        ]
