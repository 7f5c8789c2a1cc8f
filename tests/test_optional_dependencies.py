"""Regression tests for optional and required dependency boundaries.

These tests verify that output paths degrade to plain stderr when Rich
is missing, and that missing httpx / python-dotenv fail cleanly with a
typed error instead of a raw ``ImportError``.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

from craft_capture.cli.app import main
from craft_capture.cli.console import console
from craft_capture.cli.log import configure_logging
from craft_capture.core.models import CaptureRequest, Credentials
from craft_capture.core.payload import serialize_request
from craft_capture.exceptions import DependencyMissingError
from craft_capture.infra.config_loader import load_credentials
from craft_capture.infra.craft_client import CraftApiClient


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.logging", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)


def _remove_httpx(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "httpx", None)


def _remove_dotenv(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "dotenv", None)


# ---------------------------------------------------------------------------
# Rich missing
# ---------------------------------------------------------------------------

def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_console_error_falls_back_to_plain_stderr(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    console.error("something [broke]", "try [this]")
    err = capsys.readouterr().err
    assert "Error: something [broke]" in err
    assert "Hint: try [this]" in err


def test_logging_falls_back_to_plain_handler(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    logger = configure_logging(logging.DEBUG)
    logger.getChild("config").debug("Loading config file")

    err = capsys.readouterr().err
    assert "DEBUG [craft_capture.config] Loading config file" in err


# ---------------------------------------------------------------------------
# httpx / python-dotenv missing
# ---------------------------------------------------------------------------

def test_main_fails_fast_without_httpx(monkeypatch: pytest.MonkeyPatch) -> None:
    _remove_httpx(monkeypatch)

    with pytest.raises(DependencyMissingError, match="httpx"):
        main(["hello"])


def test_main_fails_fast_without_dotenv(monkeypatch: pytest.MonkeyPatch) -> None:
    _remove_dotenv(monkeypatch)

    with pytest.raises(DependencyMissingError, match="python-dotenv"):
        main(["hello"])


def test_client_raises_dependency_error_without_httpx(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _remove_httpx(monkeypatch)
    client = CraftApiClient(Credentials(api_key="k", api_url="https://x.test"))

    with pytest.raises(DependencyMissingError, match="httpx is not installed"):
        client.post_blocks(serialize_request(CaptureRequest(text="hi")))


def test_config_file_requires_dotenv(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path,
) -> None:
    _remove_dotenv(monkeypatch)
    config = tmp_path / "config"
    config.write_text("CRAFT_API_KEY=k\nCRAFT_API_URL=https://x.test\n")

    with pytest.raises(DependencyMissingError, match="python-dotenv is not installed"):
        load_credentials({}, config)


def test_env_credentials_do_not_need_dotenv(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path,
) -> None:
    _remove_dotenv(monkeypatch)

    creds = load_credentials(
        {"CRAFT_API_KEY": "k", "CRAFT_API_URL": "https://x.test"},
        tmp_path / "absent",
    )
    assert creds.api_url == "https://x.test"
