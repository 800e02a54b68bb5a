"""
Configuration module for Daily Quotes.

Loads environment variables from .env file and exposes them as typed configuration values.
Uses python-dotenv for loading and provides safe defaults where appropriate.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from project root
# The .env file should be in the root directory (parent of daily_quotes/)
_project_root = Path(__file__).parent.parent.parent
_env_path = _project_root / ".env"
load_dotenv(_env_path)


# =============================================================================
# Application Environment
# =============================================================================

# Application environment: "development", "staging", or "production"
APP_ENV: str = os.getenv("APP_ENV", "development")

# Enable debug mode (Flask debugger, verbose logging)
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

# Log level name for the diagnostic channel
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()


# =============================================================================
# Quote Provider Configuration
# =============================================================================

# Base URL of the quote service; "/random" is appended per request
QUOTE_API_BASE: str = os.getenv("QUOTE_API_BASE", "https://api.quotable.io").rstrip("/")

# HTTP request timeout in seconds
REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "10"))

# Recognized tag catalog, in display order
QUOTE_TAGS: tuple[str, ...] = (
    "wisdom",
    "inspiration",
    "happiness",
    "success",
    "love",
    "life",
)


# =============================================================================
# History Configuration
# =============================================================================

# Upper bound on the history size; HISTORY_LIMIT may only lower it
MAX_HISTORY_LIMIT: int = 10

# Number of recently viewed quotes kept in memory
HISTORY_LIMIT: int = int(os.getenv("HISTORY_LIMIT", str(MAX_HISTORY_LIMIT)))


# =============================================================================
# Web Dashboard
# =============================================================================

WEB_HOST: str = os.getenv("WEB_HOST", "127.0.0.1")
WEB_PORT: int = int(os.getenv("WEB_PORT", "5001"))


# =============================================================================
# Helper Functions
# =============================================================================

def is_production() -> bool:
    """Check if running in production environment."""
    return APP_ENV == "production"


def is_development() -> bool:
    """Check if running in development environment."""
    return APP_ENV == "development"


def validate_config() -> list[str]:
    """
    Validate configuration values.

    Returns:
        List of invalid configuration keys with reasons (empty if all valid).
    """
    errors = []

    if not QUOTE_API_BASE.startswith(("http://", "https://")):
        errors.append("QUOTE_API_BASE must start with http:// or https://")

    if is_production() and not QUOTE_API_BASE.startswith("https://"):
        errors.append("QUOTE_API_BASE must use https:// in production")

    if REQUEST_TIMEOUT < 1:
        errors.append("REQUEST_TIMEOUT must be at least 1 second")

    if HISTORY_LIMIT < 1:
        errors.append("HISTORY_LIMIT must be at least 1")
    elif HISTORY_LIMIT > MAX_HISTORY_LIMIT:
        errors.append(f"HISTORY_LIMIT must not exceed {MAX_HISTORY_LIMIT}")

    if not (0 < WEB_PORT < 65536):
        errors.append("WEB_PORT must be between 1 and 65535")

    if is_production() and DEBUG:
        errors.append("DEBUG must be disabled in production")

    return errors


def print_config_summary() -> None:
    """Print a summary of current configuration."""
    print(f"  APP_ENV: {APP_ENV}")
    print(f"  DEBUG: {DEBUG}")
    print(f"  LOG_LEVEL: {LOG_LEVEL}")
    print(f"  QUOTE_API_BASE: {QUOTE_API_BASE}")
    print(f"  REQUEST_TIMEOUT: {REQUEST_TIMEOUT}s")
    print(f"  HISTORY_LIMIT: {HISTORY_LIMIT}")
    print(f"  QUOTE_TAGS: {', '.join(QUOTE_TAGS)}")
    print(f"  WEB: {WEB_HOST}:{WEB_PORT}")
