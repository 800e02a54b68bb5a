"""
Application state for the quote viewer.

A single immutable snapshot describes everything the view renders. New
snapshots are produced by the transition function in transitions.py.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from daily_quotes.models.quote import Quote
from daily_quotes.state.history import QuoteHistory


class Lifecycle(str, Enum):
    """Status of the most recently issued quote request."""

    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class AppState:
    """
    Snapshot of the viewer.

    Attributes:
        current_quote: Quote on display, None until the first success.
        lifecycle: Status of the latest request.
        selected_tag: Active tag filter ("" means no filter).
        is_favorited: Single favorite flag; not reset when the quote changes.
        show_history: Whether the history sidebar is open.
        history: Recently fetched quotes, newest first.
        request_id: Id of the latest issued request (0 before any).
    """

    current_quote: Optional[Quote] = None
    lifecycle: Lifecycle = Lifecycle.IDLE
    selected_tag: str = ""
    is_favorited: bool = False
    show_history: bool = False
    history: QuoteHistory = field(default_factory=QuoteHistory)
    request_id: int = 0

    @classmethod
    def initial(cls, history_limit: Optional[int] = None) -> "AppState":
        """State at application start: idle, nothing displayed, empty history."""
        return cls(history=QuoteHistory(limit=history_limit))

    @property
    def is_loading(self) -> bool:
        return self.lifecycle is Lifecycle.LOADING

    @property
    def has_quote(self) -> bool:
        return self.current_quote is not None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for the JSON API."""
        return {
            "quote": self.current_quote.to_dict() if self.current_quote else None,
            "lifecycle": self.lifecycle.value,
            "is_loading": self.is_loading,
            "selected_tag": self.selected_tag,
            "is_favorited": self.is_favorited,
            "show_history": self.show_history,
            "history": [quote.to_dict() for quote in self.history],
            "request_id": self.request_id,
        }
