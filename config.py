"""
Test-suite configuration module.

This module defines configuration classes for the environments the suite
runs in (local development, CI). Values are loaded from environment
variables with defaults that target an application running on
``localhost:3000``.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


class Config:
    """Base configuration with default settings."""

    # Root URL of the city search UI
    APP_BASE_URL: str = os.environ.get("APP_BASE_URL", "http://localhost:3000")

    # Root URL of the activity ranking API
    API_BASE_URL: str = os.environ.get("API_BASE_URL", "http://localhost:3000/api")

    OPEN_METEO_BASE_URL: str = os.environ.get(
        "OPEN_METEO_BASE_URL", "https://api.open-meteo.com/v1/forecast"
    )

    # Seconds before an API request is abandoned
    REQUEST_TIMEOUT: int = int(os.environ.get("REQUEST_TIMEOUT", "5"))

    # Playwright wait budgets, in milliseconds
    DEFAULT_WAIT_TIMEOUT_MS: int = 5000
    AUTOCOMPLETE_TIMEOUT_MS: int = 1000
    MESSAGE_TIMEOUT_MS: int = 3000

    # Optional shell command that starts the application under test
    APP_START_COMMAND: str | None = os.environ.get("APP_START_COMMAND")

    REPORT_DIR: Path = BASE_DIR / "test-results"
    CUCUMBER_REPORT_PATH: Path = REPORT_DIR / "cucumber-report.json"
    JUNIT_REPORT_PATH: Path = REPORT_DIR / "junit.xml"
    SCREENSHOT_DIR: Path = REPORT_DIR / "screenshots"

    PUBLISH_RESULTS: bool = False


class DevelopmentConfig(Config):
    """Local development configuration."""

    DEBUG: bool = True


class CIConfig(Config):
    """Continuous-integration configuration."""

    DEBUG: bool = False

    # Write a JUnit report alongside the Cucumber JSON for the CI server
    PUBLISH_RESULTS: bool = os.environ.get("PUBLISH_RESULTS", "true").lower() == "true"


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "ci": CIConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, ci).
             If None, uses TEST_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("TEST_ENV", "development")
    return config.get(env, config["default"])
