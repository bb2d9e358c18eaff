"""
Dialect interfaces supplying quote characters and reserved-word membership.
"""

from __future__ import annotations

from typing import Protocol


class Dialect(Protocol):
    """
    Provider interface consumed by the quoting engine.

    ``quote("")`` must return the two-character quote pair of the backend;
    ``is_reserved`` reports whether an identifier collides with a keyword.
    """

    def quote(self, value: str = "") -> str: ...

    def is_reserved(self, value: str) -> bool: ...


# Keywords reserved by every backend shipped with sqlident.
SQL_STANDARD_RESERVED: frozenset[str] = frozenset(
    {
        "ALL", "ALTER", "AND", "ANY", "AS", "ASC", "BETWEEN", "BY", "CASE",
        "CHECK", "COLUMN", "CONSTRAINT", "CREATE", "CROSS", "DEFAULT",
        "DELETE", "DESC", "DISTINCT", "DROP", "ELSE", "EXISTS", "FOREIGN",
        "FROM", "GRANT", "GROUP", "HAVING", "IN", "INNER", "INSERT", "INTO",
        "IS", "JOIN", "LEFT", "LIKE", "NOT", "NULL", "ON", "OR", "ORDER",
        "OUTER", "PRIMARY", "REFERENCES", "RIGHT", "SELECT", "SET", "TABLE",
        "THEN", "TO", "UNION", "UNIQUE", "UPDATE", "VALUES", "WHEN", "WHERE",
        "WITH",
    }
)
