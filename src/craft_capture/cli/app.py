"""CLI application entry point for craft-capture.

This module is the **sole error boundary** for the entire application.
It catches :class:`~craft_capture.exceptions.CaptureError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core/service
  and infrastructure layers.
* The pipeline is a straight line with early exit on the first failure:
  dependencies → flags → logging → credentials → input → build → send.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from collections.abc import Mapping
from typing import IO, Any, NoReturn

from craft_capture.cli import exit_codes
from craft_capture.cli.console import console
from craft_capture.exceptions import CaptureError, NoInputProvidedError, UnknownFlagError
from craft_capture.version import __version__

PROG: str = "craft-capture"

_HELP_HINT: str = f"Run '{PROG} --help' for usage."

_EPILOG: str = f"""\
examples:
  {PROG} "Started work on x."
  echo "Some text" | {PROG}
  cat app.py | {PROG} --code
  pbpaste | {PROG}

config:
  environment:  CRAFT_API_KEY, CRAFT_API_URL (LOG_LEVEL=debug|info|error)
  config file:  $XDG_CONFIG_HOME/craft-capture/config (~/.config fallback)
"""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

_ARGUMENT_NAME = re.compile(r"argument (\S+?):")


class _CaptureArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` whose usage errors raise :class:`UnknownFlagError`.

    argparse would otherwise exit with status 2 from inside
    :meth:`error`, bypassing the ``cli()`` error boundary.
    """

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        match = _ARGUMENT_NAME.search(message)
        flag = match.group(1) if match else message
        raise UnknownFlagError(flag, hint=f"{message}. {_HELP_HINT}")


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``craft-capture [-c] [-d] <text...>``  — capture arguments
    * ``<cmd> | craft-capture [-c] [-d]``    — capture stdin
    * ``craft-capture --version``
    """
    parser = _CaptureArgumentParser(
        prog=PROG,
        allow_abbrev=False,
        description="Quick capture for Craft: post text as a note to today's daily note.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "-c",
        "--code",
        action="store_true",
        help="Wrap the input in a markdown code block.",
    )
    parser.add_argument(
        "input",
        nargs="*",
        default=[],
        help="Text to capture (or pipe it on stdin).",
    )
    return parser


def _parse_args(
    parser: argparse.ArgumentParser,
    argv: list[str] | None,
) -> argparse.Namespace:
    """Parse *argv*, raising :class:`UnknownFlagError` for unrecognised options."""
    args, extras = parser.parse_known_intermixed_args(argv)
    unknown = [arg for arg in extras if arg.startswith("-")]
    if unknown:
        parser.print_usage(sys.stderr)
        raise UnknownFlagError(unknown[0], hint=_HELP_HINT)
    args.input = [*args.input, *extras]
    return args


# ---------------------------------------------------------------------------
# Capture pipeline
# ---------------------------------------------------------------------------

def _handle_capture(
    args: argparse.Namespace,
    *,
    stdin: IO[Any] | None,
    environ: Mapping[str, str] | None,
    log: logging.Logger,
) -> int:
    """Resolve credentials, collect input and post it.

    Flow:
    1. Load credentials (environment, then config file).
    2. Collect input from arguments or stdin.
    3. Build, validate and send the payload.
    """
    from craft_capture.cli.input_source import collect_input
    from craft_capture.core.capture_service import CaptureService
    from craft_capture.core.models import CaptureRequest
    from craft_capture.infra.config_loader import load_credentials
    from craft_capture.infra.craft_client import CraftApiClient

    credentials = load_credentials(environ, logger=log.getChild("config"))

    text = collect_input(args.input, stdin, logger=log.getChild("input"))
    log.debug("Processing input length=%d", len(text))

    request = CaptureRequest(text=text, code_wrapped=args.code)
    client = CraftApiClient(credentials, logger=log.getChild("client"))
    service = CaptureService(client, logger=log.getChild("service"))
    service.capture(request)

    log.info("Posted note to Craft.")
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    stdin: IO[Any] | None = None,
    environ: Mapping[str, str] | None = None,
) -> int:
    """Run the craft-capture CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    stdin:
        Input stream; defaults to ``sys.stdin``.
    environ:
        Environment mapping; defaults to ``os.environ``.

    Returns
    -------
    int
        OS process exit code.
    """
    from craft_capture.cli.log import configure_logging, resolve_log_level
    from craft_capture.infra.dependency_check import require_dependencies

    require_dependencies()

    parser = _build_parser()
    args = _parse_args(parser, argv)

    log = configure_logging(resolve_log_level(args.debug, environ))
    log.debug("Starting %s version=%s", PROG, __version__)

    try:
        return _handle_capture(args, stdin=stdin, environ=environ, log=log)
    except NoInputProvidedError:
        parser.print_usage(sys.stderr)
        raise


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli(argv: list[str] | None = None) -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main(argv)
        sys.exit(code)
    except CaptureError as exc:
        console.error(str(exc), exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.error(
            f"Unexpected error. Please report this issue.\n  {type(exc).__name__}: {exc}",
        )
        sys.exit(exit_codes.GENERAL_ERROR)
