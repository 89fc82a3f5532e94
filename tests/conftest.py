"""Shared fixtures for stampline tests."""

from datetime import datetime

import pytest

from stampline import console

# ctime: "Wed Oct  7 09:05:01 2026"
FIXED_NOW = datetime(2026, 10, 7, 9, 5, 1)
STAMP = "[Wed Oct  7 09:05:01 2026] "


@pytest.fixture(autouse=True)
def clean_defaults(monkeypatch):
    """Keep the process-wide configuration out of the caller's environment."""
    for name in ("STAMPLINE_DEBUG", "STAMPLINE_VERBOSE", "STAMPLINE_OUTFILE", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)
    console.reset_defaults()
    yield
    console.reset_defaults()


@pytest.fixture
def now():
    return FIXED_NOW


@pytest.fixture
def stamp():
    return STAMP
