"""Report generation for HSA Report."""

from hsareport.reports.capital_gains import CapitalGainsReportGenerator, render_totals_table
from hsareport.reports.dividends import DividendReportGenerator

__all__ = [
    "CapitalGainsReportGenerator",
    "DividendReportGenerator",
    "render_totals_table",
]
