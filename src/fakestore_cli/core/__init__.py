"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
"""

from fakestore_cli.core.dispatcher import CommandDispatcher
from fakestore_cli.core.interpreter import parse_arguments
from fakestore_cli.core.models import (
    ApiResult,
    Command,
    HttpCall,
    JsonValue,
    MissingArguments,
    Outcome,
    OutcomeKind,
    PostArgs,
    ProductDraft,
    StatusMessage,
    Verb,
)
from fakestore_cli.core.protocols import RequestExecutor

__all__: list[str] = [
    "ApiResult",
    "Command",
    "CommandDispatcher",
    "HttpCall",
    "JsonValue",
    "MissingArguments",
    "Outcome",
    "OutcomeKind",
    "PostArgs",
    "ProductDraft",
    "RequestExecutor",
    "StatusMessage",
    "Verb",
    "parse_arguments",
]
