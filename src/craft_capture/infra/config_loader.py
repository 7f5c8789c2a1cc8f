"""Infrastructure: credential resolution from the environment or a file.

The environment always wins when it carries both values.  Otherwise a
``KEY=value`` file under the user's config directory is parsed with
python-dotenv.  The file is never executed and nothing is written back
to it or to ``os.environ``.

Rules
-----
* No ``print()`` — callers handle user-facing output.
* The API key value is never logged.
* python-dotenv errors and ``OSError`` are mapped to
  :class:`~craft_capture.exceptions.ConfigError` subclasses.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from craft_capture.core.models import Credentials
from craft_capture.exceptions import (
    ConfigIncompleteError,
    ConfigMissingError,
    DependencyMissingError,
)

ENV_API_KEY: str = "CRAFT_API_KEY"
ENV_API_URL: str = "CRAFT_API_URL"

CONFIG_DIR_NAME: str = "craft-capture"
CONFIG_FILE_NAME: str = "config"

_log = logging.getLogger(__name__)


def default_config_path(environ: Mapping[str, str] | None = None) -> Path:
    """Return ``$XDG_CONFIG_HOME/craft-capture/config`` (``~/.config`` fallback)."""
    env = os.environ if environ is None else environ
    base = env.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def _read_config_file(path: Path) -> dict[str, str]:
    """Parse *path* as ``KEY=value`` lines and drop valueless keys.

    ``${VAR}`` references are expanded by python-dotenv from earlier
    keys in the file and from the process environment (``os.environ``),
    not from the *environ* mapping given to :func:`load_credentials`.
    """
    try:
        from dotenv import dotenv_values
    except ModuleNotFoundError as exc:
        raise DependencyMissingError(
            "python-dotenv is not installed. Install with: pip install python-dotenv",
        ) from exc

    try:
        raw = dotenv_values(path)
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigMissingError(
            f"Config file could not be read: {path}",
            hint=str(exc),
        ) from exc
    return {key: value for key, value in raw.items() if value is not None}


def load_credentials(
    environ: Mapping[str, str] | None = None,
    config_path: Path | None = None,
    *,
    logger: logging.Logger | None = None,
) -> Credentials:
    """Resolve :class:`Credentials` for this invocation.

    Parameters
    ----------
    environ:
        Environment mapping.  Defaults to ``os.environ``.
    config_path:
        Fallback file.  Defaults to :func:`default_config_path`.
        ``${VAR}`` references inside it expand against the file itself
        and ``os.environ`` only.
    logger:
        Leveled logger shared with the rest of the pipeline.

    Raises
    ------
    ConfigMissingError
        When the environment is incomplete and the file does not exist
        or cannot be read.
    ConfigIncompleteError
        When a value is still empty after reading the file.
    """
    log = logger or _log
    env = os.environ if environ is None else environ
    path = config_path if config_path is not None else default_config_path(env)

    api_key = env.get(ENV_API_KEY, "")
    api_url = env.get(ENV_API_URL, "")

    if api_key and api_url:
        log.debug("Using credentials from environment")
        return Credentials(api_key=api_key, api_url=api_url.rstrip("/"))

    if not path.is_file():
        raise ConfigMissingError(
            f"Config file not found: {path}",
            hint=(
                f"Set {ENV_API_KEY} and {ENV_API_URL} environment variables "
                f"or create {path}"
            ),
        )

    log.debug("Loading config file path=%s", path)
    values = _read_config_file(path)

    # File assignments override partial environment values.
    api_key = values.get(ENV_API_KEY) or api_key
    api_url = values.get(ENV_API_URL) or api_url

    if not api_key:
        raise ConfigIncompleteError(ENV_API_KEY, hint=f"Add {ENV_API_KEY}=... to {path}")
    if not api_url:
        raise ConfigIncompleteError(ENV_API_URL, hint=f"Add {ENV_API_URL}=... to {path}")

    log.debug("Credentials loaded successfully url=%s", api_url)
    return Credentials(api_key=api_key, api_url=api_url.rstrip("/"))
