"""HSA Report: capital gains and dividend summaries for HSA brokerage accounts."""

__version__ = "0.1.0"
