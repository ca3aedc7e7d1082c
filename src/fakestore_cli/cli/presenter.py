"""Terminal rendering of dispatch outcomes and errors.

All display logic lives here — no business logic, no requests.
Results are written to stdout, errors to stderr.
"""

from __future__ import annotations

from typing import Any

from rich.markup import escape

from fakestore_cli.cli.console import console, err_console
from fakestore_cli.core.models import Outcome, OutcomeKind
from fakestore_cli.exceptions import (
    FakestoreError,
    FieldNotFoundError,
    InvalidResponseError,
    InvalidRouteError,
    RemoteError,
    TransportError,
    UnrecognizedCommandError,
    ValidationError,
)

_ERROR_LABELS: tuple[tuple[type[FakestoreError], str], ...] = (
    (ValidationError, "Validation error"),
    (InvalidRouteError, "Invalid route"),
    (UnrecognizedCommandError, "Unrecognized command"),
    (FieldNotFoundError, "Field not found"),
    (RemoteError, "Remote error"),
    (TransportError, "Network error"),
    (InvalidResponseError, "Invalid response"),
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _heading(text: str) -> None:
    console.print(f"[bold cyan]{escape(text)}[/bold cyan]", soft_wrap=True)


def _render_value(value: Any) -> None:
    """Strings print as-is; everything else prints as JSON."""
    if isinstance(value, str):
        console.print(escape(value), soft_wrap=True, highlight=False)
    else:
        console.print_json(data=value)


def _heading_for(outcome: Outcome) -> str:
    match outcome.kind:
        case OutcomeKind.COLLECTION:
            return "Products fetched:"
        case OutcomeKind.PRODUCT:
            return "Product fetched:"
        case OutcomeKind.FIELD:
            return f"Field '{outcome.field}' of product {outcome.product_id}:"
        case OutcomeKind.NOT_FOUND:
            return (
                f"API response for products/{outcome.product_id} "
                "(product possibly not found):"
            )
        case OutcomeKind.CREATED:
            return "Product created:"
        case OutcomeKind.DELETED:
            return f"Product with ID {outcome.product_id} (reportedly) deleted:"


def error_label(exc: FakestoreError) -> str:
    """Short category shown before the error message."""
    for exc_type, label in _ERROR_LABELS:
        if isinstance(exc, exc_type):
            return label
    return "Error"


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def render_outcome(outcome: Outcome) -> None:
    """Print a heading for *outcome* followed by its payload."""
    _heading(_heading_for(outcome))
    _render_value(outcome.payload)


def render_error(exc: FakestoreError) -> None:
    """Print *exc* with its category, hint and, for remote errors, the body."""
    err_console.print(
        f"[bold red]{error_label(exc)}:[/bold red] {escape(str(exc))}",
        soft_wrap=True,
    )
    if isinstance(exc, RemoteError) and exc.body:
        err_console.print(f"[dim]Body:[/dim] {escape(exc.body)}", soft_wrap=True)
    if exc.hint:
        err_console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}", soft_wrap=True)
