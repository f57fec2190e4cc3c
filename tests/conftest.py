"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass, field

from cowshare import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate every test from COWSHARE_* variables and cached settings."""
    monkeypatch.delenv("COWSHARE_DUPLICATE_MODE", raising=False)
    monkeypatch.delenv("COWSHARE_LOG_LEVEL", raising=False)
    reset_settings()
    yield
    reset_settings()


@dataclass
class FixtureRequest:
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    retries: int = 0


@pytest.fixture
def request_cls():
    return FixtureRequest


@pytest.fixture
def base_request():
    """Request template shared by builder-style tests."""
    return FixtureRequest(url="https://example.test", headers={"accept": "json"})
