"""
Quoting capability and the segment normalizer for dotted identifiers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Protocol

from ..dialects.base import Dialect
from .policy import QuoteMode, QuotePolicy, should_quote

BACKTICK = "`"


class Quoter(Protocol):
    """
    Anything able to quote identifiers: a quote pair, a mode, a policy and
    a reserved-word test.
    """

    @property
    def quote_mode(self) -> QuoteMode: ...

    @property
    def quote_policy(self) -> QuotePolicy: ...

    def quotes(self) -> tuple[str, str]: ...

    def is_reserved(self, value: str) -> bool: ...


@dataclass(frozen=True)
class DialectQuoter:
    """
    Standalone quoting capability borrowing a dialect for its quote pair and
    reserved words.
    """

    dialect: Dialect
    quote_mode: QuoteMode = QuoteMode.TABLE_AND_COLUMNS
    quote_policy: QuotePolicy = QuotePolicy.ADD_ALWAYS

    def quotes(self) -> tuple[str, str]:
        return split_quote_pair(self.dialect)

    def is_reserved(self, value: str) -> bool:
        return self.dialect.is_reserved(value)


def split_quote_pair(dialect: Dialect) -> tuple[str, str]:
    pair = dialect.quote("")
    return pair[0], pair[1]


def normalize(value: str, prefix: str, suffix: str) -> str:
    """
    Rewrite every dot-separated segment of ``value`` with ``prefix``/``suffix``.

    Segments already wrapped in the canonical pair or in backticks are
    unwrapped and re-wrapped, so identifiers written for another dialect
    come out in canonical form. Unterminated quotes run to end of input.
    """
    value = value.strip()
    if not value:
        return ""
    if value == "*":
        return "*"

    out: List[str] = []
    i = 0
    length = len(value)
    while i < length:
        ch = value[i]
        if ch == ".":
            out.append(".")
            i += 1
        elif ch == prefix or ch == BACKTICK:
            close = suffix if ch == prefix else BACKTICK
            i += 1
            start = i
            while i < length and value[i] != close:
                i += 1
            out.append(prefix)
            out.append(value[start:i])
            out.append(suffix)
            i += 1
        else:
            # embedded quote characters are copied as-is
            start = i
            while i < length and value[i] != ".":
                i += 1
            out.append(prefix)
            out.append(value[start:i])
            out.append(suffix)
    return "".join(out)


def quote_to(quoter: Quoter, buf: List[str] | None, value: str, is_column: bool) -> None:
    """
    Append the quoted form of ``value`` to ``buf``; a ``None`` buffer is a no-op.
    """
    if buf is None:
        return
    if should_quote(is_column, quoter.quote_mode, quoter.quote_policy, value, quoter.is_reserved):
        prefix, suffix = quoter.quotes()
        buf.append(normalize(value, prefix, suffix))
        return
    buf.append(value)


def quote(quoter: Quoter, value: str, is_column: bool) -> str:
    buf: List[str] = []
    quote_to(quoter, buf, value, is_column)
    return "".join(buf)
