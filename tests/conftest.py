"""
Pytest configuration and shared fixtures
"""
import os
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Load .env from project root for all tests (override=True to ensure fresh values)
from dotenv import load_dotenv
load_dotenv(Path(__file__).parent.parent / ".env", override=True)

from trendmaps.config import TrendsConfig
from trendmaps.request_handler import RequestHandler
from tests.fixtures.trends_payloads import (
    AGGREGATE_US,
    PER_KEYWORD_US,
    explore_response,
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "live: mark test as calling the real Google Trends API (set TRENDS_LIVE_TESTS=1)"
    )


def pytest_collection_modifyitems(config, items):
    """Skip live tests unless explicitly enabled"""
    if os.getenv('TRENDS_LIVE_TESTS') == '1':
        return
    skip_live = pytest.mark.skip(reason="live test, set TRENDS_LIVE_TESTS=1 to run")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


@pytest.fixture
def config():
    """Default configuration, independent of files and environment"""
    return TrendsConfig()


@pytest.fixture
def fake_handler():
    """
    RequestHandler double answering like Google for ['PS4', 'XBOX', 'PC'] in the US.

    widget_data() returns the aggregate map for token 'tok-geo' and the
    per-keyword map for 'tok-geo-<i>'.
    """
    keywords = ['PS4', 'XBOX', 'PC']
    by_token = {'tok-geo': AGGREGATE_US}
    for i, keyword in enumerate(keywords):
        by_token[f'tok-geo-{i}'] = PER_KEYWORD_US[keyword]

    handler = MagicMock(spec=RequestHandler)
    handler.explore.return_value = explore_response(keywords, geo='US')['widgets']
    handler.widget_data.side_effect = lambda endpoint, widget, tz: by_token[widget['token']]
    return handler
