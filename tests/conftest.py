"""
Pytest Configuration and Fixtures

This module provides:
- Shared fixtures for all tests (quotes, fake providers, controllers)
- Test category markers
"""

import pytest
import sys
from pathlib import Path
from typing import List, Optional

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from tests.test_config import CONFIG, EXPECTED, TEST_DATA, TEST_CATEGORIES, get_sample_quote

from daily_quotes.controller import QuoteController, inline_runner
from daily_quotes.models.quote import Quote
from daily_quotes.providers.base import QuoteProvider
from daily_quotes.providers.errors import NetworkError


# =============================================================================
# FAKE COLLABORATORS
# =============================================================================

class FakeProvider(QuoteProvider):
    """
    In-memory provider returning queued results.

    Each entry in ``results`` is a Quote (returned) or an Exception (raised);
    when the queue is empty, a default quote is returned.
    """

    def __init__(self, results: Optional[list] = None):
        self.results = list(results or [])
        self.calls: List[Optional[str]] = []

    @property
    def name(self) -> str:
        return "fake"

    def fetch_quote(self, tag: Optional[str] = None) -> Quote:
        self.calls.append(tag)
        if not self.results:
            return Quote(content=f"Quote #{len(self.calls)}", author="Anon", tags=(tag,) if tag else ())
        result = self.results.pop(0)
        if isinstance(result, BaseException):
            raise result
        return result


class ManualRunner:
    """Runner that holds fetch tasks until the test releases them."""

    def __init__(self):
        self.pending = []

    def __call__(self, task):
        self.pending.append(task)

    def run(self, index: int = 0):
        self.pending.pop(index)()

    def run_all(self):
        while self.pending:
            self.run(0)


# =============================================================================
# SHARED FIXTURES
# =============================================================================

@pytest.fixture
def sample_quote():
    """Provide a single sample Quote."""
    return Quote.from_dict(get_sample_quote(0))


@pytest.fixture
def sample_quotes():
    """Provide all sample Quotes."""
    return [Quote.from_dict(data) for data in TEST_DATA["sample_quotes"]]


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture
def failing_provider():
    return FakeProvider([NetworkError("Simulated network failure")])


@pytest.fixture
def manual_runner():
    return ManualRunner()


@pytest.fixture
def controller(fake_provider):
    """Controller running fetches synchronously."""
    return QuoteController(fake_provider, runner=inline_runner, history_limit=EXPECTED["history"]["limit"])


@pytest.fixture
def test_config():
    return CONFIG


@pytest.fixture
def expected_values():
    return EXPECTED


# =============================================================================
# MARKERS FOR TEST CATEGORIES
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    for marker, info in TEST_CATEGORIES.items():
        config.addinivalue_line("markers", f"{marker}: {info['description']}")
