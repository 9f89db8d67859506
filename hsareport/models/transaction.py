"""Ledger transaction and working lot models."""

from datetime import date as date_type
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from hsareport.models.enums import Category

ACQUISITION_CATEGORIES = frozenset({Category.BUY, Category.DIVIDEND})


class Transaction(BaseModel):
    """One row of an HSA investment transaction report."""

    model_config = ConfigDict(frozen=True)

    date: date_type
    fund: str
    category: Category
    price: Decimal = Field(ge=0)
    amount: Decimal
    shares: Decimal
    total_shares: Decimal = Decimal("0")
    total_value: Decimal = Decimal("0")

    @model_validator(mode="after")
    def _check_signs(self) -> "Transaction":
        if self.category == Category.SELL:
            if self.shares >= 0 or self.amount >= 0:
                raise ValueError(
                    f"Sell on {self.date} must have negative shares and amount "
                    f"(shares={self.shares}, amount={self.amount})"
                )
        elif self.shares <= 0:
            raise ValueError(
                f"{self.category} on {self.date} must have positive shares (shares={self.shares})"
            )
        return self

    @property
    def is_sale(self) -> bool:
        return self.category == Category.SELL

    @property
    def is_acquisition(self) -> bool:
        return self.category in ACQUISITION_CATEGORIES

    def describe(self) -> str:
        """One-line summary, negative amounts shown in parentheses."""
        amount = f"${abs(self.amount):.2f}"
        if self.amount < 0:
            amount = f"({amount})"
        return f"{self.date}  {self.fund:>5}  {self.shares:7.3f} @ ${self.price:.2f} = {amount}"


class Lot(BaseModel):
    """Scratch copy of an acquisition whose remaining shares are consumed by sales."""

    index: int
    transaction: Transaction
    shares_remaining: Decimal = Field(ge=0)
    amount_remaining: Decimal

    @classmethod
    def from_transaction(cls, index: int, transaction: Transaction) -> "Lot":
        return cls(
            index=index,
            transaction=transaction,
            shares_remaining=max(transaction.shares, Decimal("0")),
            amount_remaining=transaction.amount,
        )

    @classmethod
    def working_set(cls, transactions: list[Transaction]) -> list["Lot"]:
        """Fresh lots for one matching pass, one per transaction, in ledger order.

        Sales get a lot too (with no shares) so list positions line up with
        the ledger.
        """
        return [cls.from_transaction(i, txn) for i, txn in enumerate(transactions)]

    @property
    def date(self) -> date_type:
        return self.transaction.date

    @property
    def price(self) -> Decimal:
        return self.transaction.price

    @property
    def exhausted(self) -> bool:
        return self.shares_remaining <= 0
