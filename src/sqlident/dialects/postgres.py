"""
PostgreSQL dialect implementation.
"""

from __future__ import annotations

from typing import Final

from .base import SQL_STANDARD_RESERVED

RESERVED_WORDS: Final[frozenset[str]] = SQL_STANDARD_RESERVED | {
    "ANALYSE", "ANALYZE", "ARRAY", "ASYMMETRIC", "BOTH", "CAST", "COLLATE",
    "CURRENT_CATALOG", "CURRENT_DATE", "CURRENT_ROLE", "CURRENT_TIME",
    "CURRENT_TIMESTAMP", "CURRENT_USER", "DEFERRABLE", "DO", "END",
    "EXCEPT", "FALSE", "FETCH", "FOR", "FULL", "ILIKE", "INITIALLY",
    "INTERSECT", "LATERAL", "LEADING", "LIMIT", "LOCALTIME",
    "LOCALTIMESTAMP", "NATURAL", "OFFSET", "ONLY", "PLACING", "RETURNING",
    "SESSION_USER", "SOME", "SYMMETRIC", "TRAILING", "TRUE", "USER",
    "USING", "VARIADIC", "WINDOW",
}


class PostgresDialect:
    """
    PostgreSQL dialect quoting identifiers with double quotes.
    """

    name: Final[str] = "postgresql"

    def quote(self, value: str = "") -> str:
        return f'"{value}"'

    def is_reserved(self, value: str) -> bool:
        return value.upper() in RESERVED_WORDS
