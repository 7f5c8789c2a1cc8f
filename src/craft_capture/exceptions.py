"""Custom exception hierarchy for craft-capture.

All exceptions that cross layer boundaries must inherit from
:class:`CaptureError`.  Raw third-party exceptions (e.g. from httpx or
python-dotenv) must NEVER propagate beyond the infrastructure layer —
they must be caught and re-raised as a typed subclass defined here.

Hierarchy
---------
CaptureError
├── DependencyMissingError
├── ConfigError
│   ├── ConfigMissingError
│   └── ConfigIncompleteError
├── InputError
│   ├── NoInputProvidedError
│   └── EmptyInputError
├── UnknownFlagError
├── PayloadInvalidError
├── NetworkError
└── ApiFailureError
"""

from __future__ import annotations


class CaptureError(Exception):
    """Base exception for all craft-capture errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Environment / tooling -------------------------------------------------

class DependencyMissingError(CaptureError):
    """Raised when a required runtime dependency is not available."""


# --- Configuration ---------------------------------------------------------

class ConfigError(CaptureError):
    """Base for credential resolution failures."""


class ConfigMissingError(ConfigError):
    """Raised when neither the environment nor a config file supplies credentials."""


class ConfigIncompleteError(ConfigError):
    """Raised when a config file was read but a required field is still empty."""

    def __init__(self, field: str, *, hint: str | None = None) -> None:
        super().__init__(
            f"{field} not found in config file or environment.",
            hint=hint,
        )
        self.field: str = field


# --- Input -----------------------------------------------------------------

class InputError(CaptureError):
    """Base for input collection failures."""


class NoInputProvidedError(InputError):
    """Raised when there are no arguments and nothing is piped on stdin."""


class EmptyInputError(InputError):
    """Raised when the collected input is empty or whitespace only."""


# --- Command line ----------------------------------------------------------

class UnknownFlagError(CaptureError):
    """Raised when an unrecognised option is passed on the command line."""

    def __init__(self, flag: str, *, hint: str | None = None) -> None:
        super().__init__(f"Unknown option: {flag}", hint=hint)
        self.flag: str = flag


# --- Payload / transport ---------------------------------------------------

class PayloadInvalidError(CaptureError):
    """Raised when a request body fails JSON validation before sending."""


class NetworkError(CaptureError):
    """Raised when the request could not be delivered (DNS, refused, timeout)."""


class ApiFailureError(CaptureError):
    """Raised when the API answers with a status outside 200–299."""

    def __init__(
        self,
        status_code: int,
        response_body: str,
        *,
        hint: str | None = None,
    ) -> None:
        message = f"Request failed with HTTP {status_code}"
        if response_body:
            message = f"{message}: {response_body}"
        super().__init__(message, hint=hint)
        self.status_code: int = status_code
        self.response_body: str = response_body
