"""
Quotable provider implementation.

Fetches random quotes from the Quotable API.
API Documentation: https://github.com/lukePeavey/quotable
"""

import logging
from typing import Any, Optional
import requests

from daily_quotes.config import QUOTE_API_BASE, REQUEST_TIMEOUT
from daily_quotes.models.quote import Quote
from daily_quotes.providers.base import QuoteProvider
from daily_quotes.providers.errors import (
    HttpStatusError,
    MalformedPayloadError,
    NetworkError,
)

logger = logging.getLogger(__name__)

RANDOM_PATH = "/random"


class QuotableProvider(QuoteProvider):
    """
    Fetches random quotes from a Quotable-compatible service.

    - ``GET <base>/random`` for an unfiltered quote
    - ``GET <base>/random?tags=<tag>`` when a tag is given

    Expected payload: ``{"content": str, "author": str, "tags": [str, ...]}``.
    Extra fields are ignored, ``tags`` may be missing.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = (base_url or QUOTE_API_BASE).rstrip("/")
        self.timeout = timeout or REQUEST_TIMEOUT
        self.session = session

    @property
    def name(self) -> str:
        return "quotable"

    @property
    def random_url(self) -> str:
        return f"{self.base_url}{RANDOM_PATH}"

    def fetch_quote(self, tag: Optional[str] = None) -> Quote:
        """
        Fetch one random quote.

        Args:
            tag: Optional topic filter appended as ``tags=<tag>``.

        Returns:
            Quote parsed from the response.

        Raises:
            NetworkError: No response received.
            HttpStatusError: Non-success status code.
            MalformedPayloadError: Body is not a usable quote.
        """
        params = {"tags": tag} if tag else None
        logger.debug("[%s] GET %s params=%s", self.name, self.random_url, params)

        http = self.session or requests
        try:
            response = http.get(self.random_url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            raise NetworkError(f"Error reaching quote service: {e}") from e

        if not response.ok:
            raise HttpStatusError(response.status_code)

        try:
            payload = response.json()
        except ValueError as e:
            raise MalformedPayloadError(f"Response is not valid JSON: {e}") from e

        return self._normalize_quote(payload)

    def _normalize_quote(self, raw: Any) -> Quote:
        """
        Convert a raw API payload to a Quote.

        Args:
            raw: Decoded JSON body.

        Returns:
            Quote instance.

        Raises:
            MalformedPayloadError: If required fields are missing or invalid.
        """
        if not isinstance(raw, dict):
            raise MalformedPayloadError(
                f"Expected a JSON object, got {type(raw).__name__}"
            )

        missing = [key for key in ("content", "author") if raw.get(key) is None]
        if missing:
            raise MalformedPayloadError(f"Missing required fields: {', '.join(missing)}")

        tags = raw.get("tags")
        if tags is not None and not isinstance(tags, list):
            raise MalformedPayloadError("tags must be a list")

        try:
            return Quote.from_dict(raw)
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedPayloadError(str(e)) from e
