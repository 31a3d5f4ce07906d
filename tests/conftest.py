"""
Shared fixtures: environment isolation and the offline data toggle.
"""

import json
from unittest.mock import MagicMock

import pytest

_HUGEICONS_ENV = (
    "HUGEICONS_OFFLINE",
    "HUGEICONS_CATALOG_URL",
    "HUGEICONS_API_BASE",
    "HUGEICONS_HTTP_TIMEOUT",
    "HUGEICONS_CACHE_TTL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Run every test without HUGEICONS_* settings from the developer's shell."""
    for name in _HUGEICONS_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def offline(monkeypatch):
    """Serve the bundled mock catalog and mock glyphs."""
    monkeypatch.setenv("HUGEICONS_OFFLINE", "true")


def json_response(payload):
    """A urlopen() return value whose body is `payload` as JSON."""
    response = MagicMock()
    response.__enter__.return_value.read.return_value = json.dumps(payload).encode()
    return response
