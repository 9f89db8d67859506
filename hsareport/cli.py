"""Typer CLI interface for HSA Report."""

import logging

import typer
from rich.console import Console

from hsareport.engines.dividends import DividendSummarizer
from hsareport.engines.funds import split_by_fund
from hsareport.engines.lot_matcher import LotMatcher
from hsareport.exceptions import HSAReportError
from hsareport.ingestion.discovery import discover_files, load_transactions
from hsareport.models.reports import DividendYear, FundGains
from hsareport.models.transaction import Transaction
from hsareport.reports.capital_gains import CapitalGainsReportGenerator, render_totals_table
from hsareport.reports.dividends import DividendReportGenerator

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="hsareport",
    help="HSA Report: capital gains and dividends from HSA investment transaction reports.",
)

PATTERN_HELP = "Glob matching the exported HTML reports, e.g. 'reports/hsa-*.html'"
PRORATE_HELP = "Charge partly sold lots only the unsold share of their cost"


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        envvar="HSAREPORT_LOG_LEVEL",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    ),
) -> None:
    """HSA Report: capital gains and dividends from HSA investment transaction reports."""
    level = logging.DEBUG if verbose else getattr(logging, log_level.upper(), None)
    if not isinstance(level, int):
        typer.echo(f"Error: Unknown log level: {log_level}", err=True)
        raise typer.Exit(1)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _load(pattern: str) -> list[Transaction]:
    """Discover and parse the reports; exits the program on failure."""
    files = discover_files(pattern)
    if not files:
        typer.echo(f"No files match: {pattern}", err=True)
        raise typer.Exit(1)

    typer.echo(f"files: {len(files)}")
    try:
        transactions = load_transactions(files)
    except HSAReportError as exc:
        logger.error("Aborting: %s", exc)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc
    typer.echo(f"Total Transactions: {len(transactions)}")
    return transactions


def _compute_gains(transactions: list[Transaction], prorate_basis: bool = False) -> list[FundGains]:
    matcher = LotMatcher(prorate_basis=prorate_basis)
    try:
        return [
            matcher.match_fund(fund, fund_transactions)
            for fund, fund_transactions in split_by_fund(transactions).items()
        ]
    except HSAReportError as exc:
        logger.error("Aborting: %s", exc)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1) from exc


def _print_dividends(years: list[DividendYear]) -> None:
    typer.echo(DividendReportGenerator().render(years), nl=False)


def _print_gains(funds: list[FundGains], details: bool) -> None:
    typer.echo(CapitalGainsReportGenerator().render(funds, details=details), nl=False)
    if funds:
        Console().print(render_totals_table(funds))


@app.command()
def report(
    pattern: str = typer.Argument(..., help=PATTERN_HELP),
    details: bool = typer.Option(False, "--details", "-d", help="Show the lots used by each sale"),
    prorate_basis: bool = typer.Option(False, "--prorate-basis", help=PRORATE_HELP),
) -> None:
    """Dividends per year followed by realized capital gains per fund."""
    transactions = _load(pattern)
    # Compute everything before printing so a failed run prints no report.
    years = DividendSummarizer().summarize(transactions)
    funds = _compute_gains(transactions, prorate_basis)

    _print_dividends(years)
    typer.echo("")
    _print_gains(funds, details)


@app.command()
def dividends(
    pattern: str = typer.Argument(..., help=PATTERN_HELP),
) -> None:
    """Dividend income per year."""
    transactions = _load(pattern)
    _print_dividends(DividendSummarizer().summarize(transactions))


@app.command()
def gains(
    pattern: str = typer.Argument(..., help=PATTERN_HELP),
    details: bool = typer.Option(False, "--details", "-d", help="Show the lots used by each sale"),
    prorate_basis: bool = typer.Option(False, "--prorate-basis", help=PRORATE_HELP),
) -> None:
    """Realized capital gains per fund, sale by sale."""
    transactions = _load(pattern)
    _print_gains(_compute_gains(transactions, prorate_basis), details)
