"""Infrastructure layer — external system integration.

This layer wraps all interaction with httpx, python-dotenv, the
environment and the filesystem.  Every raw third-party exception must
be caught here and re-raised as a
:class:`~craft_capture.exceptions.CaptureError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from craft_capture.infra.config_loader import default_config_path, load_credentials
from craft_capture.infra.craft_client import CraftApiClient
from craft_capture.infra.dependency_check import (
    DependencyStatus,
    detect_dependencies,
    require_dependencies,
)

__all__: list[str] = [
    "CraftApiClient",
    "DependencyStatus",
    "default_config_path",
    "detect_dependencies",
    "load_credentials",
    "require_dependencies",
]
