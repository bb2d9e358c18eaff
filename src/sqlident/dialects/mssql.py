"""
Microsoft SQL Server dialect implementation.
"""

from __future__ import annotations

from typing import Final

from .base import SQL_STANDARD_RESERVED

RESERVED_WORDS: Final[frozenset[str]] = SQL_STANDARD_RESERVED | {
    "BACKUP", "BEGIN", "BREAK", "BROWSE", "BULK", "CASCADE", "CHECKPOINT",
    "CLUSTERED", "COMMIT", "COMPUTE", "CONTAINS", "CONTINUE", "CURSOR",
    "DATABASE", "DBCC", "DEALLOCATE", "DECLARE", "DENY", "DISK", "DUMP",
    "ERRLVL", "EXEC", "EXECUTE", "EXIT", "FILE", "FILLFACTOR", "GOTO",
    "HOLDLOCK", "IDENTITY", "INDEX", "KEY", "KILL", "LINENO", "NOCHECK",
    "NONCLUSTERED", "OFF", "OFFSETS", "OPENQUERY", "PERCENT", "PIVOT",
    "PLAN", "PRINT", "PROC", "PROCEDURE", "RAISERROR", "READTEXT",
    "RESTORE", "REVERT", "ROWCOUNT", "RULE", "SAVE", "SCHEMA", "TOP",
    "TRAN", "TRANSACTION", "TRUNCATE", "TSEQUAL", "UNPIVOT", "USE",
    "WAITFOR", "WHILE", "WRITETEXT",
}


class MSSQLDialect:
    """
    SQL Server dialect quoting identifiers with square brackets.
    """

    name: Final[str] = "mssql"

    def quote(self, value: str = "") -> str:
        return f"[{value}]"

    def is_reserved(self, value: str) -> bool:
        return value.upper() in RESERVED_WORDS
