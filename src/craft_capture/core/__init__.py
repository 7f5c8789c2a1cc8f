"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from craft_capture.core.capture_service import CaptureService
from craft_capture.core.models import ApiResponse, CaptureRequest, Credentials
from craft_capture.core.payload import (
    build_payload,
    serialize_payload,
    serialize_request,
    validate_payload,
    wrap_in_code_fence,
)
from craft_capture.core.protocols import BlocksClient

__all__: list[str] = [
    "ApiResponse",
    "BlocksClient",
    "CaptureRequest",
    "CaptureService",
    "Credentials",
    "build_payload",
    "serialize_payload",
    "serialize_request",
    "validate_payload",
    "wrap_in_code_fence",
]
