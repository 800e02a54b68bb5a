"""
Quote providers module.

Clients for remote quote services.
"""

from daily_quotes.providers.base import QuoteProvider
from daily_quotes.providers.errors import (
    ProviderError,
    NetworkError,
    HttpStatusError,
    MalformedPayloadError,
)
from daily_quotes.providers.quotable import QuotableProvider

__all__ = [
    "QuoteProvider",
    "QuotableProvider",
    "ProviderError",
    "NetworkError",
    "HttpStatusError",
    "MalformedPayloadError",
]
