"""CLI application entry point and command routing for fakestore-cli.

This module is the **sole error boundary** for the entire application.
It catches :class:`~fakestore_cli.exceptions.FakestoreError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  dispatcher and the infrastructure executor.
* ``print()`` is forbidden outside the CLI layer; Rich console is used
  exclusively.
* Handled errors still exit with :data:`exit_codes.SUCCESS`; only
  interrupts and crashes map to other exit codes.
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich.logging import RichHandler

from fakestore_cli.cli import exit_codes
from fakestore_cli.cli.console import err_console
from fakestore_cli.cli.presenter import render_error, render_outcome
from fakestore_cli.config import DEFAULT_BASE_URL, ClientConfig
from fakestore_cli.core.dispatcher import CommandDispatcher
from fakestore_cli.core.interpreter import parse_arguments
from fakestore_cli.core.models import MissingArguments
from fakestore_cli.exceptions import FakestoreError
from fakestore_cli.infra.http_executor import HttpRequestExecutor
from fakestore_cli.version import __version__

_EPILOG = """\
commands:
  GET products                                  fetch all products
  GET products/<productId>                      fetch one product by id
  GET products/<productId> <field>              fetch one field (e.g. image, title, price)
  POST products <title> <price> <category> [description] [image]
                                                create a product (description and
                                                image fall back to defaults)
  DELETE products/<productId>                   delete a product by id

examples:
  fakestore-cli GET products
  fakestore-cli GET products/15
  fakestore-cli GET products/20 image
  fakestore-cli POST products "Amazing T-Shirt" 19.99 "men's clothing" "A great t-shirt" "https://i.pravatar.cc"
  fakestore-cli POST products "Cool Gadget" 299.99 "electronics"
  fakestore-cli DELETE products/7
"""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Everything after the options is handed verbatim to
    :func:`~fakestore_cli.core.interpreter.parse_arguments`.
    """
    parser = argparse.ArgumentParser(
        prog="fakestore-cli",
        usage="%(prog)s [options] <COMMAND> <RESOURCE_PATH> [ARGUMENTS... | FIELD]",
        description="Command-line client for a REST products catalog.",
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
        "-v",
        "--verbose",
        action="store_true",
        help="Log every request to stderr.",
    )
    parser.add_argument(
        "--base-url",
        default=DEFAULT_BASE_URL,
        help=f"Products service address (default: {DEFAULT_BASE_URL}).",
    )
    parser.add_argument(
        "command",
        nargs=argparse.REMAINDER,
        help="<COMMAND> <RESOURCE_PATH> [ARGUMENTS...]",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
    )
    logging.getLogger("fakestore_cli").setLevel(
        logging.DEBUG if verbose else logging.WARNING,
    )


def _build_executor(config: ClientConfig) -> HttpRequestExecutor:
    return HttpRequestExecutor(config)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the fakestore-cli CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    command = parse_arguments(args.command)
    if isinstance(command, MissingArguments):
        parser.print_help()
        return exit_codes.SUCCESS

    config = ClientConfig(base_url=args.base_url.rstrip("/"))
    try:
        with _build_executor(config) as executor:
            outcome = CommandDispatcher(executor).dispatch(command)
    except FakestoreError as exc:
        render_error(exc)
        return exit_codes.SUCCESS

    render_outcome(outcome)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
