"""Shared test configuration and fixtures for all tests."""

import pytest
from unittest.mock import MagicMock, AsyncMock

from src.shared.config import Config
from src.pageload.models import Sample
from tests.test_const import MOCK_VITALS_RESPONSE, TEST_URL


class MockBrowserBuilder:
    """Builder for mocked Playwright browser type, browser, context and pages."""

    def __init__(self):
        self.pages = []
        self.evaluate_result = MOCK_VITALS_RESPONSE
        self.evaluate_side_effect = None
        self.goto_side_effect = None

        self.context = MagicMock()
        self.context.new_page = AsyncMock(side_effect=self._new_page)
        self.context.route = AsyncMock()
        self.context.close = AsyncMock()

        self.browser = MagicMock()
        self.browser.new_context = AsyncMock(return_value=self.context)
        self.browser.close = AsyncMock()

        self.browser_type = MagicMock()
        self.browser_type.launch = AsyncMock(return_value=self.browser)

    def _new_page(self):
        page = MagicMock()
        page.goto = AsyncMock(side_effect=self.goto_side_effect)
        page.evaluate = AsyncMock(return_value=self.evaluate_result, side_effect=self.evaluate_side_effect)
        page.close = AsyncMock()
        self.pages.append(page)
        return page

    def with_evaluate_result(self, result):
        self.evaluate_result = result
        return self

    def with_evaluate_error(self, error):
        self.evaluate_side_effect = error
        return self

    def with_goto_error(self, error):
        self.goto_side_effect = error
        return self

    def build(self):
        return self.browser_type


@pytest.fixture
def mock_browser_builder():
    """Builder fixture for creating mocked Playwright objects."""
    return MockBrowserBuilder()


@pytest.fixture
def test_config():
    """Small run configuration with no delays and no persistence."""
    return Config(
        sessions=2,
        iterations_per_session=2,
        target_url=TEST_URL,
        delay_between_sessions_ms=0,
        save_results=False,
    )


@pytest.fixture
def sample_results():
    """Four samples from two sessions, one of them without paint metrics."""
    return [
        Sample(session_id=1, iteration=1, load_time=10.0, timestamp=1000,
               dom_content_loaded=5.0, largest_contentful_paint=100.0,
               first_contentful_paint=50.0, time_to_interactive=120.0),
        Sample(session_id=1, iteration=2, load_time=20.0, timestamp=1001,
               dom_content_loaded=6.0, largest_contentful_paint=200.0,
               first_contentful_paint=60.0, time_to_interactive=220.0),
        Sample(session_id=2, iteration=1, load_time=30.0, timestamp=1002),
        Sample(session_id=2, iteration=2, load_time=40.0, timestamp=1003,
               dom_content_loaded=8.0, largest_contentful_paint=400.0,
               first_contentful_paint=80.0, time_to_interactive=420.0),
    ]
