"""Allow ``python -m fakestore_cli`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m fakestore_cli`` behaves identically to the
``fakestore-cli`` console script.
"""

from __future__ import annotations

from fakestore_cli.cli.app import cli

if __name__ == "__main__":
    cli()
