"""
Bounded history of recently viewed quotes.
"""

from typing import Iterator, List, Optional

from daily_quotes.config import HISTORY_LIMIT, MAX_HISTORY_LIMIT
from daily_quotes.models.quote import Quote


class QuoteHistory:
    """
    Most-recent-first sequence of quotes capped at ``limit`` entries.
    The cap never exceeds MAX_HISTORY_LIMIT, whatever limit is requested.

    ``push`` returns a new history instead of mutating, so a history held by
    an AppState snapshot never changes underneath it. Duplicates are kept.
    """

    __slots__ = ("_items", "limit")

    def __init__(self, items: Optional[List[Quote]] = None, limit: Optional[int] = None):
        self.limit = min(limit if limit is not None else HISTORY_LIMIT, MAX_HISTORY_LIMIT)
        if self.limit < 1:
            raise ValueError(f"history limit must be at least 1, got {self.limit}")
        self._items: tuple[Quote, ...] = tuple(items or ())[: self.limit]

    def push(self, quote: Quote) -> "QuoteHistory":
        """Return a history with ``quote`` first; entries beyond the cap are dropped."""
        return QuoteHistory([quote, *self._items], limit=self.limit)

    def select_at(self, index: int) -> Quote:
        """
        Read the entry at ``index`` without modifying the history.

        Raises:
            IndexError: If index is negative or past the end.
        """
        if not 0 <= index < len(self._items):
            raise IndexError(f"history index {index} out of range (size {len(self._items)})")
        return self._items[index]

    def to_list(self) -> List[Quote]:
        return list(self._items)

    def __getitem__(self, index: int) -> Quote:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Quote]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, QuoteHistory):
            return self._items == other._items and self.limit == other.limit
        return NotImplemented

    def __repr__(self) -> str:
        return f"QuoteHistory(size={len(self._items)}, limit={self.limit})"
