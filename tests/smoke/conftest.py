"""
Smoke-test fixtures for the activity ranking application.

Provides the ``smoke_base_url`` session-scoped fixture that yields a healthy
application URL shared across the entire smoke suite.  URL resolution is
delegated to :func:`shared.live_stack.live_app_url`, which reuses an
already-running app when one is healthy or starts one on demand.

Key SDET Concepts Demonstrated:
- Session-scoped URL fixtures to share a single live app across all smoke tests
- Delegating app lifecycle management to a shared helper for reuse across suites
"""

from __future__ import annotations

from collections.abc import Generator

import pytest

from config import get_config
from shared.live_stack import live_app_url


@pytest.fixture(scope="session")
def smoke_base_url() -> Generator[str, None, None]:
    """Yield a healthy application URL for smoke tests."""
    settings = get_config()
    yield from live_app_url(
        base_url_env="TEST_BASE_URL",
        base_url_default=settings.APP_BASE_URL,
        suite_name="smoke",
        start_command=settings.APP_START_COMMAND,
    )
