"""
Data models module.

Defines the immutable quote record shared by providers, state and views.
"""

from daily_quotes.models.quote import Quote, SHARE_TEMPLATE

__all__ = [
    "Quote",
    "SHARE_TEMPLATE",
]
