"""Per-scenario state shared between BDD steps."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from urllib.parse import parse_qs, urlparse

RANKING_PATH = "/api/activities/rank"
AUTOCOMPLETE_PATH = "/api/cities/autocomplete"


@dataclass
class ScenarioContext:
    """
    State carried from one step to the next within a single scenario.

    A fresh instance is created for every scenario, so nothing leaks
    between scenarios even if they run in parallel workers.

    Attributes:
        last_response: Parsed body of the last successful ranking call.
        last_error: Exception raised by the last ranking call, if any.
        last_status_code: HTTP status of the last ranking call.
        ui_wait_error: Playwright timeout recorded while waiting for a search outcome.
        weather_condition: Condition named by a "weather forecast shows" step.
        selected_suggestion: Suggestion confirmed by an autocomplete step.
        suggestions_appeared: Whether the suggestion list showed after typing.
        suggestion_latency_ms: Time from typing to the suggestion list appearing.
        simulated_timeouts: Browser ranking requests still to be aborted.
        browser_requests: URLs of every request the page issued.
    """

    last_response: dict[str, Any] | None = None
    last_error: Exception | None = None
    last_status_code: int | None = None
    ui_wait_error: Exception | None = None
    weather_condition: str | None = None
    selected_suggestion: str | None = None
    suggestions_appeared: bool | None = None
    suggestion_latency_ms: float | None = None
    simulated_timeouts: int = 0
    browser_requests: list[str] = field(default_factory=list)

    def record_response(self, response: dict[str, Any], status_code: int | None = 200) -> None:
        self.last_response = response
        self.last_error = None
        self.last_status_code = status_code

    def record_error(self, error: Exception) -> None:
        self.last_response = None
        self.last_error = error
        self.last_status_code = getattr(error, "status_code", None)

    def record_browser_request(self, url: str) -> None:
        self.browser_requests.append(url)

    @property
    def activities(self) -> list[dict[str, Any]]:
        """Activity records of the last ranking response; fails the step if there is none."""
        assert self.last_response is not None, (
            f"No ranking response recorded (last error: {self.last_error!r})"
        )
        data = self.last_response.get("data")
        assert data is not None, "Ranking response has no 'data' field"
        return data

    def ranking_requests(self) -> list[str]:
        return [url for url in self.browser_requests if urlparse(url).path == RANKING_PATH]

    def autocomplete_queries(self) -> list[str]:
        """Return the ``q`` value of every autocomplete request the page issued, in order."""
        queries = []
        for url in self.browser_requests:
            parsed = urlparse(url)
            if parsed.path == AUTOCOMPLETE_PATH:
                queries.append(parse_qs(parsed.query).get("q", [""])[0])
        return queries
