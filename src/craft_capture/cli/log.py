"""Leveled logging setup for the CLI.

One handler is attached to the ``craft_capture`` logger; every
component receives a logger from this namespace.  Rich is used for
rendering when installed, otherwise a plain stderr handler with the
same levels.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping

LOGGER_NAME: str = "craft_capture"

LOG_LEVEL_ENV: str = "LOG_LEVEL"

_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def resolve_log_level(
    debug: bool,
    environ: Mapping[str, str] | None = None,
) -> int:
    """``--debug`` wins, then ``$LOG_LEVEL``, then ``INFO``."""
    if debug:
        return logging.DEBUG
    env = os.environ if environ is None else environ
    name = env.get(LOG_LEVEL_ENV, "").strip().lower()
    return _LEVELS.get(name, logging.INFO)


def _build_handler() -> logging.Handler:
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)-5s [%(name)s] %(message)s"))
        return handler

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("[%(name)s] %(message)s"))
    return handler


def configure_logging(level: int) -> logging.Logger:
    """Install a single stderr handler at *level* and return the root app logger."""
    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(_build_handler())
    logger.setLevel(level)
    logger.propagate = False
    return logger
