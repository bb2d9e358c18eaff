"""
sqlident public package initialization.

Dialect-aware quoting of table and column identifiers for generated SQL.
"""

from .dialects import Dialect, MSSQLDialect, MySQLDialect, PostgresDialect, SQLiteDialect
from .engine import Engine, QuoteConfig, QuoteConfigurationError, QuotingError
from .quoting import (
    DialectQuoter,
    QuoteMode,
    QuotePolicy,
    Quoter,
    quote,
    quote_columns,
    quote_join,
    quote_join_func,
    unquote,
)

__all__ = [
    "Dialect",
    "DialectQuoter",
    "Engine",
    "MSSQLDialect",
    "MySQLDialect",
    "PostgresDialect",
    "QuoteConfig",
    "QuoteConfigurationError",
    "QuoteMode",
    "QuotePolicy",
    "Quoter",
    "QuotingError",
    "SQLiteDialect",
    "quote",
    "quote_columns",
    "quote_join",
    "quote_join_func",
    "unquote",
]
