"""Pure payload construction and validation.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic, and trivially unit-testable.

Pipeline order (enforced by :func:`serialize_request`):

1. **Wrap** — optionally fence the text as a code block.
2. **Build** — project the request onto the blocks payload shape.
3. **Serialize** — compact UTF-8 JSON.
"""

from __future__ import annotations

import json
from typing import Any

from craft_capture.core.models import CaptureRequest
from craft_capture.exceptions import PayloadInvalidError

CODE_FENCE: str = "```"


# ---------------------------------------------------------------------------
# 1. Wrap
# ---------------------------------------------------------------------------

def wrap_in_code_fence(text: str) -> str:
    """Return *text* inside a fenced code block, each fence on its own line."""
    return f"{CODE_FENCE}\n{text}\n{CODE_FENCE}"


# ---------------------------------------------------------------------------
# 2. Build
# ---------------------------------------------------------------------------

def build_payload(request: CaptureRequest) -> dict[str, Any]:
    """Project a :class:`CaptureRequest` onto the blocks API payload."""
    markdown = (
        wrap_in_code_fence(request.text) if request.code_wrapped else request.text
    )
    return {
        "blocks": [
            {
                "type": "text",
                "markdown": markdown,
            },
        ],
        "position": {
            "position": request.position,
            "date": request.date,
        },
    }


# ---------------------------------------------------------------------------
# 3. Serialize
# ---------------------------------------------------------------------------

def serialize_payload(payload: dict[str, Any]) -> str:
    """Serialize *payload* to compact JSON.

    Quotes, backslashes and control characters are escaped by the
    encoder; non-ASCII text is kept as-is and sent as UTF-8.
    """
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def serialize_request(request: CaptureRequest) -> str:
    """Run the full wrap → build → serialize pipeline."""
    return serialize_payload(build_payload(request))


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def validate_payload(body: str) -> None:
    """Raise :class:`PayloadInvalidError` unless *body* is a JSON object."""
    if not body:
        raise PayloadInvalidError("Payload is empty.")
    try:
        decoded: object = json.loads(body)
    except ValueError as exc:
        raise PayloadInvalidError(f"Invalid JSON payload: {exc}") from exc
    if not isinstance(decoded, dict):
        raise PayloadInvalidError("Payload must be a JSON object.")
