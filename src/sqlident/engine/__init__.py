"""
Engine binding a dialect to a quote mode and policy.
"""

from .config import QuoteConfig, QuoteConfigurationError, QuotingError
from .engine import Engine

__all__ = ["Engine", "QuoteConfig", "QuoteConfigurationError", "QuotingError"]
