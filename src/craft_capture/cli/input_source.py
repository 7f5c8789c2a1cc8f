"""Collect the text to capture from arguments or standard input.

Positional arguments always take precedence; stdin is only read when
there are none and it is not an interactive terminal.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence
from typing import IO, Any

from craft_capture.exceptions import EmptyInputError, NoInputProvidedError

_log = logging.getLogger(__name__)


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def _from_arguments(tokens: Sequence[str]) -> str:
    # Round-trip through the filesystem encoding so undecodable argv
    # bytes become U+FFFD instead of lone surrogates.
    return " ".join(_decode(os.fsencode(token)) for token in tokens)


def _from_stream(stream: IO[Any]) -> str:
    raw = getattr(stream, "buffer", stream).read()
    text = _decode(raw) if isinstance(raw, bytes) else raw
    return text.rstrip("\n")


def collect_input(
    tokens: Sequence[str],
    stdin: IO[Any] | None = None,
    *,
    logger: logging.Logger | None = None,
) -> str:
    """Return the text to capture.

    Parameters
    ----------
    tokens:
        Positional command-line arguments, joined with single spaces.
    stdin:
        Stream read to EOF when *tokens* is empty.  Defaults to
        ``sys.stdin``.
    logger:
        Leveled logger shared with the rest of the pipeline.

    Raises
    ------
    NoInputProvidedError
        No arguments and stdin is a terminal (or closed).
    EmptyInputError
        The collected text is empty or whitespace only.
    """
    log = logger or _log

    if tokens:
        text = _from_arguments(tokens)
        log.debug("Input received from arguments length=%d", len(text))
    else:
        stream = sys.stdin if stdin is None else stdin
        if stream is None or stream.isatty():
            raise NoInputProvidedError(
                "No input provided.",
                hint="Pass text as arguments or pipe it on stdin.",
            )
        text = _from_stream(stream)
        log.debug("Input received from stdin/pipe length=%d", len(text))

    if not text.strip():
        raise EmptyInputError("Input is empty.")
    return text
