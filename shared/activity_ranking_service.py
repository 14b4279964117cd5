"""
HTTP client for the activity ranking API and the Open-Meteo forecast API.

Step definitions use this client to cross-check what the browser shows
against what the API returns.  HTTP status codes are translated into a
small exception hierarchy so steps can tell an unknown city apart from
any other API failure:

  * ``CityNotFoundError`` -- the ranking API answered 404.
  * ``ActivityRankingApiError`` -- any other non-2xx ranking response.
  * ``WeatherApiError`` -- the Open-Meteo forecast request failed.

Transport-level problems (DNS, refused connections, timeouts) are raised
as the underlying ``requests`` exceptions.
"""

from __future__ import annotations

import logging
import re
from typing import Any

import requests

logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "http://localhost:3000/api"
OPEN_METEO_BASE_URL = "https://api.open-meteo.com/v1/forecast"

DAILY_WEATHER_FIELDS = (
    "temperature_2m_max",
    "temperature_2m_min",
    "precipitation_sum",
    "windspeed_10m_max",
    "weather_code",
)

FORECAST_DAYS = 7

_DISALLOWED_CITY_CHARS = re.compile(r"[^a-zA-Z\s'-]")
_LETTER = re.compile(r"[a-zA-Z]")


def _is_success(response: requests.Response) -> bool:
    """Only 2xx counts as success; unfollowed 3xx replies carry no JSON body."""
    return 200 <= response.status_code < 300


class ActivityRankingApiError(Exception):
    """Raised when the ranking API answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class CityNotFoundError(ActivityRankingApiError):
    """Raised when the ranking API does not know the requested city."""

    def __init__(self, message: str = "City not found"):
        super().__init__(message, status_code=404)


class WeatherApiError(Exception):
    """Raised when the Open-Meteo forecast cannot be fetched."""

    def __init__(self, message: str = "Failed to fetch weather data", status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ActivityRankingService:
    """
    Thin wrapper around the ranking, autocomplete and forecast endpoints.

    The underlying ``requests.Session`` is created by ``open()`` and
    released by ``close()``; both are idempotent.  The service is also a
    context manager.

    Attributes:
        api_base_url: Root URL of the ranking API (no trailing slash).
        weather_base_url: Open-Meteo forecast endpoint.
        timeout: Per-request timeout in seconds.
        last_status_code: Status of the most recent ranking request.
    """

    def __init__(
        self,
        api_base_url: str = DEFAULT_API_BASE_URL,
        weather_base_url: str = OPEN_METEO_BASE_URL,
        timeout: float = 5,
    ):
        self.api_base_url = api_base_url.rstrip("/")
        self.weather_base_url = weather_base_url
        self.timeout = timeout
        self.last_status_code: int | None = None
        self._session: requests.Session | None = None

    def __enter__(self) -> "ActivityRankingService":
        self.open()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # -------------------------------------------------------------------------
    # Session lifecycle
    # -------------------------------------------------------------------------

    def open(self) -> None:
        """Create the HTTP session if it does not exist yet."""
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update({"Accept": "application/json"})

    def close(self) -> None:
        """Close the HTTP session if one is open."""
        if self._session is not None:
            self._session.close()
            self._session = None

    @property
    def is_open(self) -> bool:
        return self._session is not None

    def _get(self, url: str, params: dict[str, Any]) -> requests.Response:
        if self._session is None:
            raise RuntimeError("ActivityRankingService is not open; call open() first")
        logger.info("GET %s params=%s", url, params)
        return self._session.get(url, params=params, timeout=self.timeout)

    # -------------------------------------------------------------------------
    # Ranking API
    # -------------------------------------------------------------------------

    def get_activity_rankings(self, city: str) -> dict[str, Any]:
        """
        Fetch the 7-day activity ranking for a city.

        Args:
            city: City name; URL-encoded by ``requests``.

        Returns:
            Parsed JSON body, ``{"data": [{activity, date, rank, reasoning}, ...]}``.

        Raises:
            CityNotFoundError: The API answered 404.
            ActivityRankingApiError: The API answered any other non-2xx status.
        """
        response = self._get(f"{self.api_base_url}/activities/rank", {"city": city})
        self.last_status_code = response.status_code

        if response.status_code == 404:
            logger.warning("Ranking lookup for %r returned 404", city)
            raise CityNotFoundError()

        if not _is_success(response):
            logger.warning("Ranking lookup for %r failed with %s", city, response.status_code)
            raise ActivityRankingApiError(
                f"API error: {response.status_code}", status_code=response.status_code
            )

        return response.json()

    def get_autocomplete_suggestions(self, query: str) -> list[str]:
        """
        Fetch city suggestions for a partial name.

        Any non-2xx answer yields an empty list rather than an error.
        """
        response = self._get(f"{self.api_base_url}/cities/autocomplete", {"q": query})

        if not _is_success(response):
            logger.warning("Autocomplete for %r failed with %s", query, response.status_code)
            return []

        data = response.json()
        return data.get("suggestions") or []

    # -------------------------------------------------------------------------
    # Open-Meteo
    # -------------------------------------------------------------------------

    def fetch_weather_data(self, lat: float, lon: float) -> dict[str, Any]:
        """
        Fetch a 7-day daily forecast from Open-Meteo.

        Raises:
            WeatherApiError: The forecast endpoint answered non-2xx.
        """
        params = {
            "latitude": str(lat),
            "longitude": str(lon),
            "daily": ",".join(DAILY_WEATHER_FIELDS),
            "timezone": "auto",
            "forecast_days": str(FORECAST_DAYS),
        }
        response = self._get(self.weather_base_url, params)

        if not _is_success(response):
            logger.warning("Open-Meteo request failed with %s", response.status_code)
            raise WeatherApiError(status_code=response.status_code)

        return response.json()

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    @staticmethod
    def validate_city(city: str) -> bool:
        """Return True if ``city`` still holds a letter once disallowed symbols are stripped."""
        clean_city = _DISALLOWED_CITY_CHARS.sub("", city)
        return len(clean_city.strip()) > 0 and _LETTER.search(clean_city) is not None
