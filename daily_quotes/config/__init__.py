"""
Configuration module.

Handles environment variables, the quote service endpoint, and application settings.
"""

from daily_quotes.config.config import (
    APP_ENV,
    DEBUG,
    LOG_LEVEL,
    QUOTE_API_BASE,
    REQUEST_TIMEOUT,
    QUOTE_TAGS,
    HISTORY_LIMIT,
    MAX_HISTORY_LIMIT,
    WEB_HOST,
    WEB_PORT,
    is_production,
    is_development,
    validate_config,
    print_config_summary,
)

__all__ = [
    "APP_ENV",
    "DEBUG",
    "LOG_LEVEL",
    "QUOTE_API_BASE",
    "REQUEST_TIMEOUT",
    "QUOTE_TAGS",
    "HISTORY_LIMIT",
    "MAX_HISTORY_LIMIT",
    "WEB_HOST",
    "WEB_PORT",
    "is_production",
    "is_development",
    "validate_config",
    "print_config_summary",
]
