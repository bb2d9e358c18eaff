"""
SQLite dialect implementation.
"""

from __future__ import annotations

from typing import Final

from .base import SQL_STANDARD_RESERVED

RESERVED_WORDS: Final[frozenset[str]] = SQL_STANDARD_RESERVED | {
    "ABORT", "ACTION", "AFTER", "ATTACH", "AUTOINCREMENT", "BEFORE",
    "BEGIN", "CASCADE", "COLLATE", "COMMIT", "CONFLICT", "DEFERRED",
    "DETACH", "EACH", "END", "ESCAPE", "EXCEPT", "EXCLUSIVE", "EXPLAIN",
    "FAIL", "GLOB", "IGNORE", "IMMEDIATE", "INDEX", "INDEXED", "INSTEAD",
    "INTERSECT", "ISNULL", "KEY", "LIMIT", "MATCH", "NOTNULL", "OFFSET",
    "PLAN", "PRAGMA", "QUERY", "RAISE", "REGEXP", "REINDEX", "RELEASE",
    "RENAME", "REPLACE", "ROLLBACK", "ROW", "SAVEPOINT", "TEMP",
    "TEMPORARY", "TRANSACTION", "TRIGGER", "VACUUM", "VIEW", "VIRTUAL",
}


class SQLiteDialect:
    """
    SQLite dialect quoting identifiers with double quotes.
    """

    name: Final[str] = "sqlite"

    def quote(self, value: str = "") -> str:
        return f'"{value}"'

    def is_reserved(self, value: str) -> bool:
        return value.upper() in RESERVED_WORDS
