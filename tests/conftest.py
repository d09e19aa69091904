"""Global test configuration and fixtures."""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, List

import pytest

# Configure logging for tests
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

ANALYTICS_ENV_VARS = [
    "ANALYTICS_DATE_FORMAT",
    "ANALYTICS_WEEK_STARTS_ON",
    "ANALYTICS_TIMEZONE",
    "ANALYTICS_DECIMAL_PLACES",
    "ANALYTICS_JSON_LOGS",
    "LOG_LEVEL",
]


# =============================================================================
# Test Environment Configuration
# =============================================================================


@pytest.fixture(autouse=True)
def clean_analytics_environment(monkeypatch):
    """Keep analytics settings from the host environment out of tests."""
    for name in ANALYTICS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    monkeypatch.setenv("TESTING", "true")
    yield


# =============================================================================
# Time Fixtures
# =============================================================================


@pytest.fixture
def fixed_now() -> datetime:
    """Wednesday, 15 March 2023, mid-day."""
    return datetime(2023, 3, 15, 12, 0, 0)


@pytest.fixture
def fixed_clock(fixed_now) -> Callable[[], datetime]:
    """Clock returning the fixed reference moment."""
    return lambda: fixed_now


# =============================================================================
# File Fixtures
# =============================================================================


@pytest.fixture
def write_records(tmp_path) -> Callable[[str, List[Any]], Path]:
    """Write a list of records as JSON into a temporary file."""

    def _write(name: str, records: List[Any]) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(records), encoding="utf-8")
        return path

    return _write


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    markers = [
        "unit: Unit tests",
        "slow: Slow running tests",
    ]

    for marker in markers:
        config.addinivalue_line("markers", marker)
