"""
View state module.

Application state snapshot, bounded history, intents and the transition function.
"""

from daily_quotes.state.app_state import AppState, Lifecycle
from daily_quotes.state.history import QuoteHistory
from daily_quotes.state.intents import (
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
    FetchQuote,
    ShareText,
)
from daily_quotes.state.transitions import InvalidIntentError, Transition, reduce

__all__ = [
    "AppState",
    "Lifecycle",
    "QuoteHistory",
    "RequestQuote",
    "Refresh",
    "SelectTag",
    "ProviderSucceeded",
    "ProviderFailed",
    "ToggleFavorite",
    "ToggleHistoryPanel",
    "CloseHistoryPanel",
    "SelectFromHistory",
    "Share",
    "FetchQuote",
    "ShareText",
    "InvalidIntentError",
    "Transition",
    "reduce",
]
