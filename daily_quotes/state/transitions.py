"""
State transition function.

``reduce(state, intent)`` is the only place that produces new AppState
values. It is pure: side effects are returned as an Effect for the
controller to execute.

Request identity: every fetch gets the next ``request_id``; a provider
response carrying any other id is stale and leaves the state untouched.
"""

from dataclasses import dataclass, replace
from typing import Optional, Sequence

from daily_quotes.config import QUOTE_TAGS
from daily_quotes.state.app_state import AppState, Lifecycle
from daily_quotes.state.intents import (
    CloseHistoryPanel,
    Effect,
    FetchQuote,
    Intent,
    ProviderFailed,
    ProviderSucceeded,
    Refresh,
    RequestQuote,
    SelectFromHistory,
    SelectTag,
    Share,
    ShareText,
    ToggleFavorite,
    ToggleHistoryPanel,
)


class InvalidIntentError(ValueError):
    """An intent's precondition does not hold (unknown tag, bad history index)."""


@dataclass(frozen=True)
class Transition:
    """Result of applying one intent."""
    state: AppState
    effect: Optional[Effect] = None


def _request(state: AppState, tag: Optional[str], catalog: Sequence[str]) -> Transition:
    # Tags outside the catalog still reach the provider but are never selected
    request_id = state.request_id + 1
    new_state = replace(
        state,
        lifecycle=Lifecycle.LOADING,
        request_id=request_id,
        selected_tag=tag if tag in catalog else state.selected_tag,
    )
    return Transition(new_state, FetchQuote(request_id=request_id, tag=tag or None))


def _is_current_response(state: AppState, request_id: int) -> bool:
    return state.is_loading and request_id == state.request_id


def reduce(
    state: AppState,
    intent: Intent,
    catalog: Sequence[str] = QUOTE_TAGS,
) -> Transition:
    """
    Apply ``intent`` to ``state``.

    Args:
        state: Current snapshot.
        intent: Action to apply.
        catalog: Recognized tags; only these become the selected tag.

    Returns:
        Transition holding the new state and an optional effect.

    Raises:
        InvalidIntentError: SelectTag with an unknown tag, or
            SelectFromHistory with an out-of-range index.
        TypeError: If ``intent`` is not a known intent type.
    """
    if isinstance(intent, RequestQuote):
        return _request(state, intent.tag, catalog)

    if isinstance(intent, Refresh):
        return _request(state, state.selected_tag or None, catalog)

    if isinstance(intent, SelectTag):
        if intent.tag not in catalog:
            raise InvalidIntentError(f"Unknown tag: {intent.tag!r}")
        return _request(state, intent.tag, catalog)

    if isinstance(intent, ProviderSucceeded):
        if not _is_current_response(state, intent.request_id):
            return Transition(state)
        new_state = replace(
            state,
            lifecycle=Lifecycle.LOADED,
            current_quote=intent.quote,
            history=state.history.push(intent.quote),
        )
        return Transition(new_state)

    if isinstance(intent, ProviderFailed):
        if not _is_current_response(state, intent.request_id):
            return Transition(state)
        return Transition(replace(state, lifecycle=Lifecycle.FAILED))

    if isinstance(intent, ToggleFavorite):
        if not state.has_quote:
            return Transition(state)
        return Transition(replace(state, is_favorited=not state.is_favorited))

    if isinstance(intent, ToggleHistoryPanel):
        return Transition(replace(state, show_history=not state.show_history))

    if isinstance(intent, CloseHistoryPanel):
        return Transition(replace(state, show_history=False))

    if isinstance(intent, SelectFromHistory):
        try:
            quote = state.history.select_at(intent.index)
        except IndexError as e:
            raise InvalidIntentError(str(e)) from e
        return Transition(replace(state, current_quote=quote, show_history=False))

    if isinstance(intent, Share):
        if not state.has_quote:
            return Transition(state)
        return Transition(state, ShareText(state.current_quote.share_text))

    raise TypeError(f"Unsupported intent: {intent!r}")
