"""httpx backed implementation of :class:`~craft_capture.core.protocols.BlocksClient`.

This module is the **only** place in the codebase that imports
``httpx``.  All httpx exceptions are caught here and re-raised as typed
:class:`~craft_capture.exceptions.CaptureError` subclasses — nothing raw
escapes the infrastructure boundary.

One request per call, no retries.  The response body stays in memory.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from craft_capture.core.models import ApiResponse, Credentials
from craft_capture.core.payload import validate_payload
from craft_capture.exceptions import (
    ApiFailureError,
    DependencyMissingError,
    NetworkError,
)

BLOCKS_ACTION: str = "blocks"

DEFAULT_TIMEOUT_SECONDS: float = 30.0

_log = logging.getLogger(__name__)


class CraftApiClient:
    """Concrete :class:`BlocksClient` backed by ``httpx.Client``.

    Usage::

        client = CraftApiClient(credentials)
        response = client.post_blocks(body)

    Parameters
    ----------
    credentials:
        Explicit API key and base URL for this invocation.
    timeout:
        Seconds before connect/read/write give up.  ``None`` disables
        the timeout.
    transport:
        Optional ``httpx.BaseTransport`` (tests pass ``httpx.MockTransport``).
    logger:
        Leveled logger shared with the rest of the pipeline.
    """

    def __init__(
        self,
        credentials: Credentials,
        *,
        timeout: float | None = DEFAULT_TIMEOUT_SECONDS,
        transport: Any = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._credentials: Credentials = credentials
        self._timeout: float | None = timeout
        self._transport: Any = transport
        self._log: logging.Logger = logger or _log

    @property
    def endpoint(self) -> str:
        return f"{self._credentials.api_url.rstrip('/')}/{BLOCKS_ACTION}"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._credentials.api_key}",
            "Content-Type": "application/json",
        }

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def post_blocks(self, body: str) -> ApiResponse:
        """POST *body* to ``{api_url}/blocks``.

        Raises
        ------
        PayloadInvalidError
            When *body* is not a valid JSON object.  Nothing is sent.
        NetworkError
            For DNS, connection, timeout and URL errors.
        ApiFailureError
            When the status code is outside 200–299.
        """
        validate_payload(body)

        try:
            import httpx
        except ModuleNotFoundError as exc:
            raise DependencyMissingError(
                "httpx is not installed. Install with: pip install httpx",
            ) from exc

        url = self.endpoint
        self._log.debug("Sending request url=%s endpoint=%s", url, BLOCKS_ACTION)

        try:
            with httpx.Client(
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = client.post(
                    url,
                    content=body.encode("utf-8"),
                    headers=self._headers(),
                )
                result = ApiResponse(
                    status_code=response.status_code,
                    body=response.text,
                )
        except httpx.TimeoutException as exc:
            raise NetworkError(
                f"Request to {url} timed out.",
                hint="Check your network connection and try again.",
            ) from exc
        except httpx.RequestError as exc:
            raise NetworkError(
                f"Request to {url} failed: {exc}",
                hint="Check your network connection and CRAFT_API_URL.",
            ) from exc
        except httpx.InvalidURL as exc:
            raise NetworkError(
                f"Invalid API URL: {url}",
                hint="CRAFT_API_URL must be a full https:// URL.",
            ) from exc

        self._log.debug("Response received http_code=%d", result.status_code)

        if not result.ok:
            raise ApiFailureError(result.status_code, result.body)

        if result.body and self._log.isEnabledFor(logging.DEBUG):
            self._log.debug("Response body:\n%s", _pretty_body(result.body))
        return result


def _pretty_body(body: str) -> str:
    """Indent *body* when it is JSON, else return it unchanged."""
    try:
        return json.dumps(json.loads(body), indent=2, ensure_ascii=False)
    except ValueError:
        return body
