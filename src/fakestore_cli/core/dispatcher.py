"""Core command dispatcher — per-verb validation and request orchestration.

This is the central service class consumed by the CLI layer.  It
depends on a :class:`~fakestore_cli.core.protocols.RequestExecutor`
injected at construction time (dependency inversion), keeping the core
free of any network imports.

Guarantees
----------
* Pure orchestration — no ``print()``, no direct network access.
* Every :class:`~fakestore_cli.exceptions.CommandError` is raised before
  a request is issued.
* At most one request per command.
* Executor errors propagate unchanged.
"""

from __future__ import annotations

import re

from fakestore_cli.core.models import (
    Command,
    JsonValue,
    Outcome,
    OutcomeKind,
    PostArgs,
    Verb,
    unwrap,
)
from fakestore_cli.core.protocols import RequestExecutor
from fakestore_cli.exceptions import (
    FieldNotFoundError,
    InvalidRouteError,
    UnrecognizedCommandError,
    ValidationError,
)

COLLECTION: str = "products"

_ITEM_PATH = re.compile(rf"^{COLLECTION}/([^/]+)$")


def match_item_path(resource_path: str) -> str | None:
    """Return the id segment of ``products/<id>``, or ``None``."""
    match = _ITEM_PATH.match(resource_path)
    return match.group(1) if match else None


class CommandDispatcher:
    """Maps a :class:`Command` to at most one executor call.

    Parameters
    ----------
    executor:
        Any object satisfying the :class:`RequestExecutor` protocol.
    """

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor: RequestExecutor = executor

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def dispatch(self, command: Command) -> Outcome:
        """Validate *command* and run it.

        Raises
        ------
        ValidationError
            Arguments fail the verb's preconditions.
        InvalidRouteError
            The path shape is not supported for the verb.
        UnrecognizedCommandError
            The verb is not GET, POST or DELETE.
        FieldNotFoundError
            A projected field is missing from the fetched product.
        """
        match command.verb:
            case Verb.GET:
                return self._get(command)
            case Verb.POST:
                return self._post(command)
            case Verb.DELETE:
                return self._delete(command)
            case Verb.UNRECOGNIZED:
                raise UnrecognizedCommandError(
                    f"Unrecognized command: {command.verb_token}.",
                    hint="Valid commands: GET, POST, DELETE.",
                )

    # ------------------------------------------------------------------
    # Verb handlers
    # ------------------------------------------------------------------

    def _get(self, command: Command) -> Outcome:
        path = command.resource_path
        if path == COLLECTION and not command.arguments:
            result = self._executor.execute(f"/{path}", "GET")
            return Outcome(OutcomeKind.COLLECTION, unwrap(result))

        product_id = match_item_path(path)
        if product_id is None:
            raise InvalidRouteError(
                f"Invalid route for GET: '{path}'.",
                hint="Use 'products', 'products/<id>' or 'products/<id> <field>'.",
            )

        result = self._executor.execute(f"/{path}", "GET")
        if not command.arguments:
            return Outcome(OutcomeKind.PRODUCT, unwrap(result), product_id)

        field = command.arguments[0]
        product = result.value if isinstance(result, JsonValue) else None
        if not isinstance(product, dict):
            # Not an object: most likely the product does not exist.
            return Outcome(OutcomeKind.NOT_FOUND, unwrap(result), product_id, field)
        if field not in product:
            raise FieldNotFoundError(field, product_id, list(product))
        return Outcome(OutcomeKind.FIELD, product[field], product_id, field)

    def _post(self, command: Command) -> Outcome:
        path = command.resource_path
        if path != COLLECTION:
            raise InvalidRouteError(
                f"Invalid route for POST: '{path}'.",
                hint="Use 'products'.",
            )

        draft = PostArgs.parse(command.arguments).to_draft()
        result = self._executor.execute(f"/{path}", "POST", draft.to_payload())
        return Outcome(OutcomeKind.CREATED, unwrap(result))

    def _delete(self, command: Command) -> Outcome:
        path = command.resource_path
        raw_id = match_item_path(path)
        if raw_id is None:
            raise InvalidRouteError(
                f"Invalid route for DELETE: '{path}'.",
                hint="Use 'products/<id>'.",
            )
        # ASCII digits only: rejects signs, underscores and whitespace int() allows.
        if not (raw_id.isascii() and raw_id.isdigit()):
            raise ValidationError(
                f"DELETE requires a numeric product id, got '{raw_id}'.",
                hint="Use 'products/<productId>', e.g. products/7.",
            )

        result = self._executor.execute(f"/{path}", "DELETE")
        return Outcome(OutcomeKind.DELETED, unwrap(result), raw_id)
