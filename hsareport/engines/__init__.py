"""Capital gains and dividend engines."""

from hsareport.engines.dividends import DividendSummarizer
from hsareport.engines.funds import split_by_fund
from hsareport.engines.holding_period import holding_period, is_long_term
from hsareport.engines.lot_matcher import LotMatcher
from hsareport.engines.lot_selector import LotSelector

__all__ = [
    "DividendSummarizer",
    "LotMatcher",
    "LotSelector",
    "holding_period",
    "is_long_term",
    "split_by_fund",
]
