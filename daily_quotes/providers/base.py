"""
Base provider abstraction for Daily Quotes.

Defines the abstract interface that all quote providers must implement.
"""

from abc import ABC, abstractmethod
from typing import Optional

from daily_quotes.models.quote import Quote


class QuoteProvider(ABC):
    """
    Abstract base class for quote providers.

    A provider performs a single lookup per call and never retries or caches;
    recovery is the caller's decision.

    Attributes:
        name: Identifier used in log messages (e.g., "quotable").
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the unique name identifier for this provider."""
        pass

    @abstractmethod
    def fetch_quote(self, tag: Optional[str] = None) -> Quote:
        """
        Fetch one random quote, optionally filtered by tag.

        The tag is passed through without checking it against the catalog;
        an unknown tag yields whatever the provider answers.

        Args:
            tag: Topic filter, or None / "" for an unfiltered quote.

        Returns:
            The fetched Quote.

        Raises:
            ProviderError: On any transport, status or payload failure.
        """
        pass

    def __str__(self) -> str:
        return f"QuoteProvider({self.name})"

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
