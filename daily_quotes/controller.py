"""
Quote viewer controller.

Owns the single AppState and is the only writer to it:

    View intent → dispatch() → reduce() → observers → effect

Fetch effects run on a worker (a daemon thread by default, so the view
never blocks on the network); the worker reports back by dispatching
ProviderSucceeded or ProviderFailed. Dispatches are serialized, so every
transition runs to completion before the next one starts.
"""

import logging
import threading
from typing import Callable, List, Optional

from daily_quotes.config import HISTORY_LIMIT, QUOTE_TAGS
from daily_quotes.providers.base import QuoteProvider
from daily_quotes.providers.errors import ProviderError
from daily_quotes.share import ShareCapability, ShareOutcome, share_quote_text
from daily_quotes.state import (
    AppState,
    CloseHistoryPanel,
    FetchQuote,
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
    Transition,
    reduce,
)

logger = logging.getLogger(__name__)

Observer = Callable[[AppState], None]
Runner = Callable[[Callable[[], None]], None]


def thread_runner(task: Callable[[], None]) -> None:
    """Run ``task`` on a daemon thread."""
    thread = threading.Thread(target=task, name="quote-fetch")
    thread.daemon = True
    thread.start()


def inline_runner(task: Callable[[], None]) -> None:
    """Run ``task`` immediately on the calling thread."""
    task()


class QuoteController:
    """
    Single owner of the viewer state.

    Args:
        provider: Quote provider used for FetchQuote effects.
        share: Native share facility, if the platform has one.
        share_fallback: Clipboard-style facility used when native sharing is
            unavailable. With neither configured, Share only reports the text.
        runner: How fetch tasks are executed (default: background thread).
        history_limit: Maximum history size.
        tags: Recognized tag catalog.
    """

    def __init__(
        self,
        provider: QuoteProvider,
        share: Optional[ShareCapability] = None,
        share_fallback: Optional[ShareCapability] = None,
        runner: Optional[Runner] = None,
        history_limit: Optional[int] = None,
        tags: tuple[str, ...] = QUOTE_TAGS,
    ):
        self.provider = provider
        self.tags = tags
        self._share = share
        self._share_fallback = share_fallback
        self._runner = runner or thread_runner
        self._state = AppState.initial(history_limit or HISTORY_LIMIT)
        self._observers: List[Observer] = []
        self._lock = threading.RLock()
        self._idle = threading.Condition(self._lock)
        self.last_share: Optional[ShareOutcome] = None

    # -------------------------------------------------------------------------
    # State access and observers
    # -------------------------------------------------------------------------

    @property
    def state(self) -> AppState:
        return self._state

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """
        Register ``observer`` to be called with the new state after each transition.

        Returns:
            A function that removes the observer again.
        """
        with self._lock:
            self._observers.append(observer)

        def unsubscribe() -> None:
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe

    def _notify(self, state: AppState) -> None:
        for observer in list(self._observers):
            try:
                observer(state)
            except Exception:
                logger.exception("State observer %r failed", observer)

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def dispatch(self, intent) -> Transition:
        """
        Apply ``intent`` and execute the resulting effect.

        Raises:
            InvalidIntentError: If the intent's precondition does not hold.
        """
        with self._lock:
            transition = reduce(self._state, intent, self.tags)
            changed = transition.state is not self._state
            self._state = transition.state
            if changed:
                self._notify(transition.state)
            if not self._state.is_loading:
                self._idle.notify_all()

        if transition.effect is not None:
            self._execute(transition.effect)
        return transition

    def _execute(self, effect) -> None:
        if isinstance(effect, FetchQuote):
            logger.debug("Request #%d issued (tag=%r)", effect.request_id, effect.tag)
            self._runner(lambda: self._fetch(effect))
        elif isinstance(effect, ShareText):
            self.last_share = None
            if self._share_fallback is not None:
                self.last_share = share_quote_text(effect.text, self._share, self._share_fallback)
            elif self._share is not None and self._share.is_available():
                self._share.share_text(effect.text)
                self.last_share = ShareOutcome(text=effect.text, method="native")

    def _fetch(self, effect: FetchQuote) -> None:
        try:
            quote = self.provider.fetch_quote(effect.tag)
        except ProviderError as e:
            logger.warning("[%s] Error fetching quote: %s", self.provider.name, e)
            self.dispatch(ProviderFailed(effect.request_id, e))
            return
        except Exception as e:
            logger.exception("[%s] Unexpected error fetching quote", self.provider.name)
            self.dispatch(ProviderFailed(effect.request_id, e))
            return

        if effect.request_id != self._state.request_id:
            logger.debug("Discarding stale response for request #%d", effect.request_id)
            return
        self.dispatch(ProviderSucceeded(effect.request_id, quote))

    def wait_idle(self, timeout: Optional[float] = None) -> bool:
        """
        Block until no request is loading.

        Returns:
            True if idle, False if ``timeout`` expired first.
        """
        with self._idle:
            return self._idle.wait_for(lambda: not self._state.is_loading, timeout)

    # -------------------------------------------------------------------------
    # Intent shortcuts used by the views
    # -------------------------------------------------------------------------

    def start(self) -> Transition:
        """Seed the first quote."""
        logger.info("Starting quote viewer with provider %s", self.provider.name)
        return self.dispatch(RequestQuote())

    def request_quote(self, tag: Optional[str] = None) -> Transition:
        return self.dispatch(RequestQuote(tag))

    def refresh(self) -> Transition:
        return self.dispatch(Refresh())

    def select_tag(self, tag: str) -> Transition:
        return self.dispatch(SelectTag(tag))

    def toggle_favorite(self) -> Transition:
        return self.dispatch(ToggleFavorite())

    def toggle_history(self) -> Transition:
        return self.dispatch(ToggleHistoryPanel())

    def close_history(self) -> Transition:
        return self.dispatch(CloseHistoryPanel())

    def select_from_history(self, index: int) -> Transition:
        return self.dispatch(SelectFromHistory(index))

    def share(self) -> Optional[str]:
        """
        Share the displayed quote.

        Returns:
            The formatted text, or None when no quote is displayed.
        """
        transition = self.dispatch(Share())
        if isinstance(transition.effect, ShareText):
            return transition.effect.text
        return None
