"""Core capture service — turns a request into one API call.

This service delegates the actual HTTP call to a
:class:`~craft_capture.core.protocols.BlocksClient` injected at
construction time.  It is responsible for:

* Building and serializing the payload.
* Delegating to the client.
* Ensuring only :class:`~craft_capture.exceptions.CaptureError`
  subclasses escape.

Guarantees
----------
* Pure orchestration — no I/O, no ``print()``, no filesystem access.
* No httpx import.
"""

from __future__ import annotations

import logging

from craft_capture.core.models import ApiResponse, CaptureRequest
from craft_capture.core.payload import serialize_request
from craft_capture.core.protocols import BlocksClient
from craft_capture.exceptions import CaptureError, NetworkError

_log = logging.getLogger(__name__)


class CaptureService:
    """Stateless service that posts one capture.

    Parameters
    ----------
    client:
        Any object satisfying the :class:`BlocksClient` protocol.
    logger:
        Leveled logger shared with the rest of the pipeline.
    """

    def __init__(
        self,
        client: BlocksClient,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._client: BlocksClient = client
        self._log: logging.Logger = logger or _log

    def capture(self, request: CaptureRequest) -> ApiResponse:
        """Post *request* and return the successful response.

        Raises
        ------
        PayloadInvalidError
            If the serialized payload fails validation.
        NetworkError
            If the request could not be delivered.
        ApiFailureError
            If the API rejects the request.
        """
        self._log.debug(
            "Building payload position=%s date=%s code=%s",
            request.position,
            request.date,
            request.code_wrapped,
        )
        body = serialize_request(request)
        self._log.debug("Payload: %s", body)

        try:
            return self._client.post_blocks(body)
        except CaptureError:
            raise
        except Exception as exc:
            raise NetworkError(f"Unexpected client error: {exc}") from exc
