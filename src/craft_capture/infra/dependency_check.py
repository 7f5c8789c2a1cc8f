"""Infrastructure: runtime dependency detection and install guidance.

This module is responsible for confirming the HTTP and config-parsing
libraries are importable before any work starts, and for providing
installation guidance when they are missing.

Rules
-----
* Detection via :func:`importlib.util.find_spec` only; nothing is
  imported here.
* No automatic installation.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import importlib.util
from dataclasses import dataclass

from craft_capture.exceptions import DependencyMissingError

REQUIRED_MODULES: tuple[tuple[str, str], ...] = (
    ("httpx", "httpx"),
    ("dotenv", "python-dotenv"),
)
"""``(import name, distribution name)`` pairs needed at runtime."""


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class DependencyStatus:
    """Result of a dependency probe.

    Attributes
    ----------
    missing : tuple[str, ...]
        Distribution names of the packages that could not be found.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing them.  Empty when
        nothing is missing.
    """

    missing: tuple[str, ...]
    install_commands: tuple[str, ...]

    @property
    def ok(self) -> bool:
        return not self.missing


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def _is_importable(module_name: str) -> bool:
    try:
        return importlib.util.find_spec(module_name) is not None
    except (ImportError, ValueError):
        return False


def detect_dependencies(
    required: tuple[tuple[str, str], ...] = REQUIRED_MODULES,
) -> DependencyStatus:
    """Probe for every module in *required*.

    Returns a :class:`DependencyStatus` regardless of the outcome — the
    caller decides whether to abort.
    """
    missing = tuple(
        dist_name
        for module_name, dist_name in required
        if not _is_importable(module_name)
    )
    if not missing:
        return DependencyStatus(missing=(), install_commands=())
    return DependencyStatus(
        missing=missing,
        install_commands=(f"pip install {' '.join(missing)}",),
    )


def require_dependencies(
    required: tuple[tuple[str, str], ...] = REQUIRED_MODULES,
) -> None:
    """Raise :class:`DependencyMissingError` if anything in *required* is absent."""
    status = detect_dependencies(required)
    if status.ok:
        return
    hint_lines = ["Install the missing packages with:"]
    hint_lines.extend(f"  {cmd}" for cmd in status.install_commands)
    raise DependencyMissingError(
        f"Missing required dependencies: {', '.join(status.missing)}",
        hint="\n".join(hint_lines),
    )
