"""Group a ledger by fund."""

from hsareport.models.transaction import Transaction


def split_by_fund(transactions: list[Transaction]) -> dict[str, list[Transaction]]:
    """Map fund symbol to its transactions, funds sorted by name, ledger order kept."""
    by_fund: dict[str, list[Transaction]] = {}
    for transaction in transactions:
        by_fund.setdefault(transaction.fund, []).append(transaction)
    return {fund: by_fund[fund] for fund in sorted(by_fund)}
