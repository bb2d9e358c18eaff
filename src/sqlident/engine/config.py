"""
Quoting configuration loaded from keyword arguments, mappings or the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping, TypeVar

from ..quoting.policy import QuoteMode, QuotePolicy


class QuotingError(ValueError):
    """Base error for sqlident configuration failures."""


class QuoteConfigurationError(QuotingError):
    """Raised when a quote mode or quote policy value is not recognised."""


DEFAULT_ENV_PREFIX = "SQLIDENT"

_E = TypeVar("_E", QuoteMode, QuotePolicy)


def _parse_enum(enum_cls: type[_E], value: Any, *, key: str, label: str) -> _E:
    if isinstance(value, enum_cls):
        return value
    normalized = str(value).strip().lower().replace("-", "_")
    for member in enum_cls:
        if member.value == normalized:
            return member
    raise QuoteConfigurationError(f"Invalid {label} for '{key}': {value!r}")


def parse_quote_mode(value: Any, *, key: str = "quote_mode") -> QuoteMode:
    return _parse_enum(QuoteMode, value, key=key, label="quote mode")


def parse_quote_policy(value: Any, *, key: str = "quote_policy") -> QuotePolicy:
    return _parse_enum(QuotePolicy, value, key=key, label="quote policy")


@dataclass(frozen=True)
class QuoteConfig:
    """
    Quote mode and quote policy for an engine.
    """

    quote_mode: QuoteMode = QuoteMode.TABLE_AND_COLUMNS
    quote_policy: QuotePolicy = QuotePolicy.ADD_ALWAYS
    source: str | None = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any], *, source: str | None = None) -> "QuoteConfig":
        """
        Build a config from ``quote_mode`` / ``quote_policy`` keys; missing keys keep defaults.
        """

        quote_mode = cls.quote_mode
        quote_policy = cls.quote_policy
        if values.get("quote_mode") is not None:
            quote_mode = parse_quote_mode(values["quote_mode"])
        if values.get("quote_policy") is not None:
            quote_policy = parse_quote_policy(values["quote_policy"])
        return cls(quote_mode=quote_mode, quote_policy=quote_policy, source=source)

    @classmethod
    def from_env(cls, prefix: str = DEFAULT_ENV_PREFIX) -> "QuoteConfig":
        """
        Build a config from ``<prefix>_QUOTE_MODE`` and ``<prefix>_QUOTE_POLICY``.
        """

        mode_var = f"{prefix}_QUOTE_MODE"
        policy_var = f"{prefix}_QUOTE_POLICY"
        quote_mode = cls.quote_mode
        quote_policy = cls.quote_policy
        read: list[str] = []

        raw_mode = os.getenv(mode_var)
        if raw_mode:
            quote_mode = parse_quote_mode(raw_mode, key=mode_var)
            read.append(mode_var)
        raw_policy = os.getenv(policy_var)
        if raw_policy:
            quote_policy = parse_quote_policy(raw_policy, key=policy_var)
            read.append(policy_var)

        return cls(
            quote_mode=quote_mode,
            quote_policy=quote_policy,
            source=", ".join(read) or None,
        )

    def describe(self) -> str:
        label = f"mode={self.quote_mode.value} policy={self.quote_policy.value}"
        if self.source:
            return f"{label} (from {self.source})"
        return label
