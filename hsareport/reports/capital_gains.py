"""Capital gains report generator."""

from decimal import Decimal
from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from rich.table import Table

from hsareport.models.reports import FundGains

TEMPLATE_DIR = Path(__file__).parent / "templates"


class CapitalGainsReportGenerator:
    """Renders per-sale running gains for each fund."""

    def __init__(self) -> None:
        self.env = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, funds: list[FundGains], details: bool = False) -> str:
        """Render the sale-by-sale report; details adds one line per lot used."""
        template = self.env.get_template("capital_gains.txt")
        return template.render(funds=funds, details=details)


def render_totals_table(funds: list[FundGains]) -> Table:
    """Summary table of realized gains per fund, with a grand total row."""
    table = Table(title="Realized Capital Gains")
    table.add_column("Fund")
    table.add_column("Sales", justify="right")
    table.add_column("LTG", justify="right")
    table.add_column("STG", justify="right")
    table.add_column("Total", justify="right")
    table.add_column("Basis", justify="right")

    for fund in funds:
        table.add_row(
            fund.fund,
            str(len(fund.sales)),
            f"{fund.long_term_gain:,.2f}",
            f"{fund.short_term_gain:,.2f}",
            f"{fund.total_gain:,.2f}",
            f"{fund.cost_basis:,.2f}",
        )

    ltg = sum((f.long_term_gain for f in funds), start=Decimal("0"))
    stg = sum((f.short_term_gain for f in funds), start=Decimal("0"))
    basis = sum((f.cost_basis for f in funds), start=Decimal("0"))
    table.add_section()
    table.add_row(
        "All funds",
        str(sum(len(f.sales) for f in funds)),
        f"{ltg:,.2f}",
        f"{stg:,.2f}",
        f"{ltg + stg:,.2f}",
        f"{basis:,.2f}",
    )
    return table
