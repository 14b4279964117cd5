"""
Shared pytest fixtures for the activity ranking test suite.

This module contains fixtures shared across unit, UI and E2E modules,
plus the hook that switches on CI report publishing.

Key Concepts Demonstrated:
- Fixture dependencies
- Test data factories (Faker)
- Lightweight fakes for HTTP responses
- Environment-driven report configuration
"""

from __future__ import annotations

from typing import Any

import pytest
from faker import Faker

from config import get_config
from shared.activity_ranking_service import ActivityRankingService


# Initialize Faker for generating test data
fake = Faker()


# -----------------------------------------------------------------------------
# Report Configuration
# -----------------------------------------------------------------------------

@pytest.hookimpl(tryfirst=True)
def pytest_configure(config):
    """Create the report directory and add a JUnit report when the CI profile publishes results."""
    settings = get_config()
    settings.REPORT_DIR.mkdir(parents=True, exist_ok=True)
    if settings.PUBLISH_RESULTS and not config.option.xmlpath:
        config.option.xmlpath = str(settings.JUNIT_REPORT_PATH)


# -----------------------------------------------------------------------------
# HTTP Fakes
# -----------------------------------------------------------------------------

class FakeResponse:
    """Minimal stand-in for ``requests.Response`` as used by the ranking client."""

    def __init__(self, status_code: int = 200, payload: Any = None):
        self.status_code = status_code
        self._payload = payload if payload is not None else {}

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        return self._payload


@pytest.fixture
def fake_get(monkeypatch):
    """
    Replace ``requests.Session.get`` with a scripted fake.

    Returns:
        Function ``(status_code, payload)`` that sets the next response and
        returns the list of captured call kwargs.
    """
    calls: list[dict[str, Any]] = []
    state: dict[str, FakeResponse] = {"response": FakeResponse()}

    def _fake_session_get(self, url, **kwargs):
        calls.append({"url": url, **kwargs})
        return state["response"]

    monkeypatch.setattr("shared.activity_ranking_service.requests.Session.get", _fake_session_get)

    def _respond_with(status_code: int = 200, payload: Any = None) -> list[dict[str, Any]]:
        state["response"] = FakeResponse(status_code, payload)
        return calls

    return _respond_with


@pytest.fixture
def ranking_service():
    """Open a ranking client against a non-routable test host."""
    service = ActivityRankingService("http://ranking.test/api")
    service.open()
    yield service
    service.close()


# -----------------------------------------------------------------------------
# Test Data Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def activity_record_factory():
    """
    Factory fixture for ranking records.

    Example:
        def test_something(activity_record_factory):
            record = activity_record_factory(activity="Skiing", rank=9)
    """

    def _create(
        activity: str = "Skiing",
        date: str = "2026-01-01",
        rank: int | None = None,
        reasoning: str | None = None,
    ) -> dict[str, Any]:
        return {
            "activity": activity,
            "date": date,
            "rank": rank if rank is not None else fake.random_int(min=1, max=10),
            "reasoning": reasoning or fake.sentence(nb_words=8),
        }

    return _create
