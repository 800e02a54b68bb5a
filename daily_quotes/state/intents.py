"""
Intents and effects.

Intents are the named user or system actions fed to the transition
function. Effects are the side effects a transition asks the controller
to perform.
"""

from dataclasses import dataclass
from typing import Optional, Union

from daily_quotes.models.quote import Quote


# =============================================================================
# Intents
# =============================================================================

@dataclass(frozen=True)
class RequestQuote:
    """Fetch a new quote; a non-empty tag also becomes the selected tag."""
    tag: Optional[str] = None


@dataclass(frozen=True)
class Refresh:
    """Fetch a new quote using the currently selected tag."""


@dataclass(frozen=True)
class SelectTag:
    """Pick a tag from the catalog and fetch a quote for it."""
    tag: str


@dataclass(frozen=True)
class ProviderSucceeded:
    """The provider answered request ``request_id`` with ``quote``."""
    request_id: int
    quote: Quote


@dataclass(frozen=True)
class ProviderFailed:
    """Request ``request_id`` failed."""
    request_id: int
    error: Exception


@dataclass(frozen=True)
class ToggleFavorite:
    pass


@dataclass(frozen=True)
class ToggleHistoryPanel:
    pass


@dataclass(frozen=True)
class CloseHistoryPanel:
    pass


@dataclass(frozen=True)
class SelectFromHistory:
    index: int


@dataclass(frozen=True)
class Share:
    pass


Intent = Union[
    RequestQuote,
    Refresh,
    SelectTag,
    ProviderSucceeded,
    ProviderFailed,
    ToggleFavorite,
    ToggleHistoryPanel,
    CloseHistoryPanel,
    SelectFromHistory,
    Share,
]


# =============================================================================
# Effects
# =============================================================================

@dataclass(frozen=True)
class FetchQuote:
    """Call the quote provider and report back under ``request_id``."""
    request_id: int
    tag: Optional[str] = None


@dataclass(frozen=True)
class ShareText:
    """Hand ``text`` to the share capability."""
    text: str


Effect = Union[FetchQuote, ShareText]
