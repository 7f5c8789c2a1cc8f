"""Allow ``python -m craft_capture`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m craft_capture`` behaves identically to the
``craft-capture`` console script.
"""

from __future__ import annotations

from craft_capture.cli.app import cli

if __name__ == "__main__":
    cli()
