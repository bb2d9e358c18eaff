"""
Quote modes, quote policies, and the decision function combining them.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable


class QuoteMode(Enum):
    """
    Which identifier kinds the quoting rules apply to.
    """

    TABLE_AND_COLUMNS = "table_and_columns"
    TABLE_ONLY = "table_only"
    COLUMNS_ONLY = "columns_only"


class QuotePolicy(Enum):
    """
    When quotes are added to an identifier the mode applies to.
    """

    ADD_ALWAYS = "add_always"
    NO_ADD = "no_add"
    ADD_RESERVED = "add_reserved"


_COLUMN_MODES = frozenset({QuoteMode.TABLE_AND_COLUMNS, QuoteMode.COLUMNS_ONLY})
_TABLE_MODES = frozenset({QuoteMode.TABLE_AND_COLUMNS, QuoteMode.TABLE_ONLY})


def mode_applies(mode: QuoteMode, *, is_column: bool) -> bool:
    if is_column:
        return mode in _COLUMN_MODES
    return mode in _TABLE_MODES


def should_quote(
    is_column: bool,
    mode: QuoteMode,
    policy: QuotePolicy,
    value: str,
    is_reserved: Callable[[str], bool],
) -> bool:
    """
    Decide whether ``value`` is rewritten with the dialect's quote pair.

    A ``False`` result means the value is emitted verbatim, without any
    normalization of quotes it may already carry.
    """
    if not mode_applies(mode, is_column=is_column):
        return False
    if policy is QuotePolicy.ADD_ALWAYS:
        return True
    if policy is QuotePolicy.ADD_RESERVED:
        return is_reserved(value)
    return False
