"""Dividends-per-year report generator."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from hsareport.models.reports import DividendYear

TEMPLATE_DIR = Path(__file__).parent / "templates"


class DividendReportGenerator:
    """Renders yearly dividend totals as plain text."""

    def __init__(self) -> None:
        self.env = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, years: list[DividendYear]) -> str:
        template = self.env.get_template("dividends.txt")
        return template.render(years=years)
