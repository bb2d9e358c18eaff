"""
MySQL dialect implementation.
"""

from __future__ import annotations

from typing import Final

from .base import SQL_STANDARD_RESERVED

RESERVED_WORDS: Final[frozenset[str]] = SQL_STANDARD_RESERVED | {
    "ACCESSIBLE", "ANALYZE", "BEFORE", "BIGINT", "BLOB", "CALL", "CHANGE",
    "CONDITION", "DATABASE", "DATABASES", "DAY_HOUR", "DELAYED", "DESCRIBE",
    "DIV", "DUAL", "EXPLAIN", "FULLTEXT", "IGNORE", "INDEX", "INTERVAL",
    "KEY", "KEYS", "KILL", "LIMIT", "LOCK", "LONG", "MATCH", "MOD",
    "OPTIMIZE", "PURGE", "RANGE", "READ", "REGEXP", "RENAME", "REPLACE",
    "REQUIRE", "RLIKE", "SCHEMA", "SCHEMAS", "SHOW", "SPATIAL", "STARTING",
    "TINYINT", "TRIGGER", "UNLOCK", "UNSIGNED", "USAGE", "USE", "XOR",
    "ZEROFILL",
}


class MySQLDialect:
    """
    MySQL dialect quoting identifiers with backticks.
    """

    name: Final[str] = "mysql"

    def quote(self, value: str = "") -> str:
        return f"`{value}`"

    def is_reserved(self, value: str) -> bool:
        return value.upper() in RESERVED_WORDS
