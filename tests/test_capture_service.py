"""Tests for the capture service (core/capture_service.py).

All tests mock the :class:`BlocksClient` — no network access.

Coverage:
* Serialized body handed to the client.
* Response pass-through.
* Exception propagation and wrapping.
"""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock

import pytest

from craft_capture.core.capture_service import CaptureService
from craft_capture.core.models import ApiResponse, CaptureRequest
from craft_capture.exceptions import ApiFailureError, NetworkError, PayloadInvalidError


# ---------------------------------------------------------------------------
# Delegation
# ---------------------------------------------------------------------------

class TestCaptureServiceDelegation:
    def test_calls_client_with_serialized_body(self) -> None:
        client = MagicMock()
        client.post_blocks.return_value = ApiResponse(status_code=200, body="")
        svc = CaptureService(client)

        svc.capture(CaptureRequest(text="hello"))

        client.post_blocks.assert_called_once_with(
            '{"blocks":[{"type":"text","markdown":"hello"}],'
            '"position":{"position":"end","date":"today"}}'
        )

    def test_code_wrapped_body(self) -> None:
        client = MagicMock()
        client.post_blocks.return_value = ApiResponse(status_code=200, body="")
        svc = CaptureService(client)

        svc.capture(CaptureRequest(text="a\nb", code_wrapped=True))

        (body,), _ = client.post_blocks.call_args
        assert json.loads(body)["blocks"][0]["markdown"] == "```\na\nb\n```"

    def test_returns_client_response(self) -> None:
        client = MagicMock()
        response = ApiResponse(status_code=201, body='{"items": []}')
        client.post_blocks.return_value = response
        svc = CaptureService(client)

        assert svc.capture(CaptureRequest(text="x")) is response

    def test_logs_payload_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        client = MagicMock()
        client.post_blocks.return_value = ApiResponse(status_code=200, body="")
        logger = logging.getLogger("test.service")
        svc = CaptureService(client, logger=logger)

        with caplog.at_level(logging.DEBUG, logger="test.service"):
            svc.capture(CaptureRequest(text="logged text"))

        assert any("logged text" in rec.getMessage() for rec in caplog.records)


# ---------------------------------------------------------------------------
# Exception mapping
# ---------------------------------------------------------------------------

class TestCaptureServiceExceptions:
    @pytest.mark.parametrize(
        "error",
        [
            ApiFailureError(500, "oops"),
            NetworkError("refused"),
            PayloadInvalidError("bad"),
        ],
    )
    def test_capture_errors_propagate_unchanged(self, error: Exception) -> None:
        client = MagicMock()
        client.post_blocks.side_effect = error
        svc = CaptureService(client)

        with pytest.raises(type(error)) as exc_info:
            svc.capture(CaptureRequest(text="x"))
        assert exc_info.value is error

    def test_unexpected_error_wrapped(self) -> None:
        client = MagicMock()
        original = RuntimeError("root cause")
        client.post_blocks.side_effect = original
        svc = CaptureService(client)

        with pytest.raises(NetworkError, match="Unexpected") as exc_info:
            svc.capture(CaptureRequest(text="x"))
        assert exc_info.value.__cause__ is original
