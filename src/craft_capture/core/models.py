"""Domain models for craft-capture.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O, zero dependencies on
external packages, and live for a single invocation only.
"""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_POSITION: str = "end"
"""Placement of the new block inside the target document."""

DEFAULT_DATE: str = "today"
"""Daily note the block is appended to."""


# ---------------------------------------------------------------------------
# Credentials
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Credentials:
    """API key and base URL for the Craft API.

    The key is excluded from ``repr`` so it never leaks into logs or
    tracebacks.
    """

    api_key: str = field(repr=False)
    """Bearer token sent in the ``Authorization`` header."""

    api_url: str
    """Base URL; action names are appended as path segments."""


# ---------------------------------------------------------------------------
# Capture request
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CaptureRequest:
    """A single piece of text to post, plus its placement."""

    text: str
    """Raw user text.  Never empty once it reaches the core."""

    position: str = DEFAULT_POSITION
    date: str = DEFAULT_DATE

    code_wrapped: bool = False
    """Wrap :attr:`text` in a fenced code block before posting."""


# ---------------------------------------------------------------------------
# API response
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ApiResponse:
    """Status code and raw body of one API call."""

    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code <= 299
