"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Protocol

from craft_capture.core.models import ApiResponse


class BlocksClient(Protocol):
    """Contract for backends that accept a serialized blocks payload.

    Any object that implements :meth:`post_blocks` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def post_blocks(self, body: str) -> ApiResponse:
        """Send *body* (a JSON document) and return the API response.

        Implementations must map all backend-specific exceptions to
        :class:`~craft_capture.exceptions.CaptureError` subclasses.

        Raises
        ------
        PayloadInvalidError
            When *body* is not valid JSON.  No request is made.
        NetworkError
            When the request cannot be delivered.
        ApiFailureError
            When the API answers with a non-2xx status.
        """
        ...  # pragma: no cover
