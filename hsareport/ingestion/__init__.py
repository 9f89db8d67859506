"""Ingestion of HSA transaction reports."""

from hsareport.ingestion.discovery import check_date_coverage, discover_files, load_transactions
from hsareport.ingestion.html_report import HSAReportAdapter, ParsedReport

__all__ = [
    "HSAReportAdapter",
    "ParsedReport",
    "check_date_coverage",
    "discover_files",
    "load_transactions",
]
