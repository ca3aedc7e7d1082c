"""Custom exception hierarchy for fakestore-cli.

All exceptions that cross layer boundaries must inherit from
:class:`FakestoreError`.  Raw httpx exceptions must NEVER propagate
beyond the infrastructure layer — they are caught there and re-raised
as :class:`TransportError`.

Hierarchy
---------
FakestoreError
├── CommandError
│   ├── ValidationError
│   ├── InvalidRouteError
│   ├── UnrecognizedCommandError
│   └── FieldNotFoundError
└── ApiError
    ├── RemoteError
    ├── TransportError
    └── InvalidResponseError
"""

from __future__ import annotations

from collections.abc import Sequence


class FakestoreError(Exception):
    """Base exception for all fakestore-cli errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI layer can render a clean message without
    leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Command-level errors (raised before any request is issued) ------------

class CommandError(FakestoreError):
    """A command was rejected locally; no request was sent."""


class ValidationError(CommandError):
    """Raised when a verb's arguments fail their preconditions."""


class InvalidRouteError(CommandError):
    """Raised when a known verb is paired with an unsupported path."""


class UnrecognizedCommandError(CommandError):
    """Raised when the verb is not one of GET, POST or DELETE."""


class FieldNotFoundError(CommandError):
    """Raised when a projected field is absent from the fetched product."""

    def __init__(
        self,
        field: str,
        product_id: str,
        available: Sequence[str],
    ) -> None:
        super().__init__(
            f"Field '{field}' does not exist on product {product_id}.",
            hint="Available fields: " + ", ".join(available),
        )
        self.field: str = field
        self.product_id: str = product_id
        self.available: tuple[str, ...] = tuple(available)


# --- Remote API errors ------------------------------------------------------

class ApiError(FakestoreError):
    """A request was issued but did not produce a usable reply."""


class RemoteError(ApiError):
    """Raised when the remote service answers with a non-success status."""

    def __init__(self, status_code: int, reason: str, body: str) -> None:
        super().__init__(f"Remote service returned {status_code} {reason}".rstrip())
        self.status_code: int = status_code
        self.reason: str = reason
        self.body: str = body


class TransportError(ApiError):
    """Raised when the network call itself could not complete."""


class InvalidResponseError(ApiError):
    """Raised when a reply advertised as JSON cannot be parsed."""
