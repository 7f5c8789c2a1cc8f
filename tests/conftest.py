"""Shared pytest fixtures and configuration for the craft-capture test suite.

Guidelines
----------
* No internet access in any test.
* httpx must be mocked at the transport boundary (``httpx.MockTransport``).
* Core tests must be pure — no side effects.
* Tests must not depend on OS state: credentials and the config
  directory always come from fixtures.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from craft_capture.core.models import Credentials


@pytest.fixture(autouse=True)
def _isolate_environment(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> Iterator[None]:
    """Strip real credentials and point the config dir at an empty tmp dir."""
    for name in ("CRAFT_API_KEY", "CRAFT_API_URL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    yield
    app_logger = logging.getLogger("craft_capture")
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
    app_logger.setLevel(logging.NOTSET)
    app_logger.propagate = True


@pytest.fixture()
def credentials() -> Credentials:
    return Credentials(api_key="secret-key-123", api_url="https://connect.craft.test/api/v1")


@pytest.fixture()
def env_credentials() -> dict[str, str]:
    return {
        "CRAFT_API_KEY": "secret-key-123",
        "CRAFT_API_URL": "https://connect.craft.test/api/v1",
    }
