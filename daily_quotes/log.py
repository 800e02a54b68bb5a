"""
Logging setup for Daily Quotes.

Modules log through ``logging.getLogger(__name__)``; entry points call
``configure_logging`` once.
"""

import logging
from typing import Optional, Union

from daily_quotes.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"
DATE_FORMAT = "%H:%M:%S"


def configure_logging(level: Optional[Union[str, int]] = None) -> None:
    """
    Install a single stream handler on the ``daily_quotes`` logger.

    Calling it again only changes the level.

    Args:
        level: Level name or number; defaults to LOG_LEVEL from config.
    """
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger("daily_quotes")
    root.setLevel(level)

    if not any(getattr(h, "_daily_quotes", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handler._daily_quotes = True
        root.addHandler(handler)
