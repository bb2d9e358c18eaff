"""
Engine owning the active dialect and its quoting configuration.
"""

from __future__ import annotations

from typing import Iterable

from ..dialects.base import Dialect
from ..quoting import batch
from ..quoting.policy import QuoteMode, QuotePolicy
from ..quoting.quoter import DialectQuoter, quote, split_quote_pair
from ..utils import get_logger
from .config import DEFAULT_ENV_PREFIX, QuoteConfig, parse_quote_mode, parse_quote_policy


class Engine:
    """
    Host binding exposing identifier quoting for one dialect configuration.

    The dialect, mode and policy are fixed at construction, so an engine can
    be shared between threads without locking.

    Mode and policy accept enum members or their string values.
    """

    def __init__(
        self,
        dialect: Dialect,
        *,
        quote_mode: QuoteMode | str = QuoteMode.TABLE_AND_COLUMNS,
        quote_policy: QuotePolicy | str = QuotePolicy.ADD_ALWAYS,
    ) -> None:
        self._dialect = dialect
        self._quote_mode = parse_quote_mode(quote_mode)
        self._quote_policy = parse_quote_policy(quote_policy)
        self.logger = get_logger("engine")
        self.logger.debug(
            "Engine bound to dialect %s (mode=%s, policy=%s)",
            getattr(dialect, "name", type(dialect).__name__),
            self._quote_mode.value,
            self._quote_policy.value,
        )

    @classmethod
    def from_config(cls, dialect: Dialect, config: QuoteConfig) -> "Engine":
        return cls(dialect, quote_mode=config.quote_mode, quote_policy=config.quote_policy)

    @classmethod
    def from_env(cls, dialect: Dialect, prefix: str = DEFAULT_ENV_PREFIX) -> "Engine":
        return cls.from_config(dialect, QuoteConfig.from_env(prefix))

    # ------------------------------------------------------------------ #
    # Quoter
    # ------------------------------------------------------------------ #
    @property
    def dialect(self) -> Dialect:
        return self._dialect

    @property
    def quote_mode(self) -> QuoteMode:
        return self._quote_mode

    @property
    def quote_policy(self) -> QuotePolicy:
        return self._quote_policy

    def quotes(self) -> tuple[str, str]:
        """
        Return the left and right quote characters of the dialect.
        """
        return split_quote_pair(self._dialect)

    def is_reserved(self, value: str) -> bool:
        return self._dialect.is_reserved(value)

    def quoter(self) -> DialectQuoter:
        return DialectQuoter(self._dialect, self._quote_mode, self._quote_policy)

    # ------------------------------------------------------------------ #
    # Quoting
    # ------------------------------------------------------------------ #
    def quote(self, value: str, is_column: bool = False) -> str:
        return quote(self, value, is_column)

    def quote_columns(self, column_str: str) -> str:
        return batch.quote_columns(self, column_str)

    def quote_join(self, columns: Iterable[str]) -> str:
        return batch.quote_join(self, columns)

    def unquote(self, value: str) -> str:
        return batch.unquote(self, value)
