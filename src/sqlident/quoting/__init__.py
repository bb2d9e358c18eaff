"""
Identifier quoting: policies, the segment normalizer and batch helpers.
"""

from .batch import quote_columns, quote_join, quote_join_func, unquote
from .policy import QuoteMode, QuotePolicy, mode_applies, should_quote
from .quoter import DialectQuoter, Quoter, normalize, quote, quote_to, split_quote_pair

__all__ = [
    "DialectQuoter",
    "QuoteMode",
    "QuotePolicy",
    "Quoter",
    "mode_applies",
    "normalize",
    "quote",
    "quote_columns",
    "quote_join",
    "quote_join_func",
    "quote_to",
    "should_quote",
    "split_quote_pair",
    "unquote",
]
