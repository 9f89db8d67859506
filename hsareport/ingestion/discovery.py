"""Locate report files and combine them into one ledger."""

import logging
from datetime import timedelta
from pathlib import Path

from hsareport.ingestion.html_report import HSAReportAdapter, ParsedReport
from hsareport.models.transaction import Transaction

logger = logging.getLogger(__name__)


def discover_files(pattern: str) -> list[Path]:
    """Files matching a glob such as 'reports/hsa-*.html', sorted by name.

    Only the last path component may contain wildcards.
    """
    path = Path(pattern)
    directory = path.parent
    files = sorted(p for p in directory.glob(path.name) if p.is_file())
    logger.info("glob: [%s] + [%s] -> %d files", directory, path.name, len(files))
    return files


def check_date_coverage(results: list[ParsedReport]) -> list[str]:
    """Describe gaps or overlaps between the date ranges of consecutive reports."""
    problems: list[str] = []
    ordered = sorted(results, key=lambda r: r.date_from)
    for prev, curr in zip(ordered, ordered[1:]):
        if curr.date_from > prev.date_to + timedelta(days=1):
            problems.append(
                f"Gap between {prev.source.name} (to {prev.date_to}) and "
                f"{curr.source.name} (from {curr.date_from})"
            )
        elif curr.date_from <= prev.date_to:
            problems.append(
                f"Overlap between {prev.source.name} (to {prev.date_to}) and "
                f"{curr.source.name} (from {curr.date_from})"
            )
    for problem in problems:
        logger.warning(problem)
    return problems


def load_transactions(files: list[Path], adapter: HSAReportAdapter | None = None) -> list[Transaction]:
    """Parse every report and return one ledger in date order.

    Any parse error aborts the load; nothing is returned for partial input.
    """
    adapter = adapter or HSAReportAdapter()
    results: list[ParsedReport] = []
    for file_path in files:
        result = adapter.parse(file_path)
        for warning in adapter.validate(result):
            logger.warning(warning)
        results.append(result)

    check_date_coverage(results)

    transactions = [txn for result in results for txn in result.transactions]
    if len(files) > 1:
        logger.info("Total transactions: %d", len(transactions))
    # Stable: same-day rows keep their report order.
    return sorted(transactions, key=lambda txn: txn.date)
