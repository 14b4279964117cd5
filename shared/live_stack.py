"""Live-application helpers for smoke and E2E test suites."""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
import time
from collections.abc import Generator

import pytest
import requests

logger = logging.getLogger(__name__)

HEALTH_PATH = "/api/cities/autocomplete?q=a"


def is_app_ready(url: str, timeout: int = 2) -> bool:
    """Return True when the autocomplete endpoint of the app at ``url`` responds with 200."""
    try:
        response = requests.get(f"{url}{HEALTH_PATH}", timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code == 200


def wait_for_app_healthy(url: str, timeout: int = 60, interval: int = 1) -> None:
    """Poll the application until it answers or ``timeout`` seconds pass."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_app_ready(url):
            return
        time.sleep(interval)
    raise RuntimeError(f"Application at {url} not healthy after {timeout}s")


def live_app_url(
    *,
    base_url_env: str,
    base_url_default: str,
    suite_name: str,
    start_command: str | None = None,
) -> Generator[str, None, None]:
    """
    Yield a healthy application base URL, reusing or starting the app when needed.

    Priority:
    1. Use explicit base URL from `base_url_env` (and wait for health).
    2. Reuse an already-running app at `base_url_default`.
    3. Run `start_command`, wait for health, then stop it on exit.
    4. Skip the suite.
    """
    provided_base_url = os.getenv(base_url_env)
    if provided_base_url:
        wait_for_app_healthy(provided_base_url)
        yield provided_base_url
        return

    base_url = base_url_default
    if is_app_ready(base_url):
        yield base_url
        return

    if not start_command:
        pytest.skip(
            f"no application at {base_url}; set {base_url_env} or APP_START_COMMAND "
            f"to run {suite_name} tests"
        )

    logger.info("Starting application under test: %s", start_command)
    try:
        process = subprocess.Popen(
            shlex.split(start_command),
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except FileNotFoundError:
        pytest.skip(f"cannot run {start_command!r}; set {base_url_env} to run {suite_name} tests")

    try:
        wait_for_app_healthy(base_url)
        yield base_url
    finally:
        process.terminate()
        try:
            process.wait(timeout=10)
        except subprocess.TimeoutExpired:
            process.kill()
