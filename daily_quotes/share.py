"""
Share capability.

Sharing prefers the platform's native "share text" and falls back to
copying the text plus a confirmation notice when native sharing is
unavailable.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional

logger = logging.getLogger(__name__)

COPIED_NOTICE = "Quote copied to clipboard!"


@dataclass
class ShareOutcome:
    """How a share request was handled."""
    text: str
    method: str  # "native" or "clipboard"
    notice: Optional[str] = None


class ShareCapability(ABC):
    """A platform facility able to publish a piece of text."""

    # Shown to the user when this capability is used as the fallback
    notice: Optional[str] = COPIED_NOTICE

    @abstractmethod
    def is_available(self) -> bool:
        pass

    @abstractmethod
    def share_text(self, text: str) -> None:
        pass


def share_quote_text(
    text: str,
    native: Optional[ShareCapability],
    fallback: ShareCapability,
) -> ShareOutcome:
    """
    Share ``text`` natively when possible, else copy it via ``fallback``.

    Args:
        text: Formatted quote text.
        native: Native share facility, or None when the platform has none.
        fallback: Clipboard-style facility used when native is unavailable.

    Returns:
        ShareOutcome naming the method used; the clipboard path carries the
        notice to show the user.
    """
    if native is not None and native.is_available():
        native.share_text(text)
        return ShareOutcome(text=text, method="native")

    logger.debug("Native share unavailable, copying quote instead")
    fallback.share_text(text)
    return ShareOutcome(text=text, method="clipboard", notice=fallback.notice)


class ConsoleShare(ShareCapability):
    """
    Terminal stand-in for the clipboard: writes the text to stdout so it can
    be copied. Used by the command-line entry point, where no native share
    exists.
    """

    notice = None

    def __init__(self, write: Callable[[str], None] = print):
        self._write = write

    def is_available(self) -> bool:
        return True

    def share_text(self, text: str) -> None:
        self._write(text)
