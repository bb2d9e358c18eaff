"""
Batch quoting helpers for column lists and arbitrary sequences.
"""

from __future__ import annotations

from typing import Callable, Iterable, List

from .quoter import BACKTICK, Quoter, quote


def quote_columns(quoter: Quoter, column_str: str) -> str:
    """
    Quote each entry of a comma-separated column list, rejoined with ``,``.
    """
    return quote_join(quoter, column_str.split(","))


def quote_join(quoter: Quoter, columns: Iterable[str]) -> str:
    return ",".join(quote(quoter, column, True) for column in columns)


def quote_join_func(cols: Iterable[str], quote_func: Callable[[str], str], sep: str) -> str:
    """
    Apply ``quote_func`` to every item and join with ``sep`` plus a space.

    The input sequence is left untouched.
    """
    quoted: List[str] = [quote_func(col) for col in cols]
    return f"{sep} ".join(quoted)


def unquote(quoter: Quoter, value: str) -> str:
    """
    Strip the quoter's quote characters and backticks from both ends of ``value``.
    """
    left, right = quoter.quotes()
    return value.strip(f"{left}{right}{BACKTICK}")
