"""
Quote provider failures.

Every failure a provider can surface is a ProviderError; the subclasses only
exist for diagnostics, callers treat them alike.
"""

from typing import Optional


class ProviderError(Exception):
    """Base class for quote provider failures."""


class NetworkError(ProviderError):
    """No response was received (connection error, timeout, DNS failure)."""


class HttpStatusError(ProviderError):
    """The provider answered with a non-success status code."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        super().__init__(message or f"Quote service returned HTTP {status_code}")


class MalformedPayloadError(ProviderError):
    """The response body could not be mapped to a quote."""
