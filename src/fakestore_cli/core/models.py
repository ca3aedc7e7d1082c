"""Domain models for fakestore-cli.

All models are **frozen** dataclasses — immutable value objects.  They
carry zero I/O and zero dependencies on external packages.  The only
behaviour here is parsing raw CLI tokens into typed values.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from fakestore_cli.exceptions import ValidationError

DEFAULT_DESCRIPTION: str = "Default product description"
DEFAULT_IMAGE: str = "https://calculo-intereses.onrender.com"


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

class Verb(Enum):
    """HTTP-style action word driving dispatch."""

    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"
    UNRECOGNIZED = "UNRECOGNIZED"

    @classmethod
    def parse(cls, token: str) -> Verb:
        """Map *token* (any case) to a verb, or :attr:`UNRECOGNIZED`."""
        try:
            return cls(token.upper())
        except ValueError:
            return cls.UNRECOGNIZED


@dataclass(frozen=True, slots=True)
class Command:
    """A parsed invocation: verb, resource path and trailing arguments."""

    verb: Verb
    verb_token: str
    """The uppercased first token, kept verbatim even when unrecognized."""

    resource_path: str
    arguments: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class MissingArguments:
    """Returned instead of a :class:`Command` when verb or path is absent."""

    provided: tuple[str, ...] = ()


# ---------------------------------------------------------------------------
# HTTP call and result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class HttpCall:
    """Everything needed to issue one request."""

    method: str
    url: str
    headers: dict[str, str]
    body: str | None = None


@dataclass(frozen=True, slots=True)
class JsonValue:
    """A successful reply whose body was parsed as JSON."""

    value: Any


@dataclass(frozen=True, slots=True)
class StatusMessage:
    """A successful reply without a JSON body."""

    status_code: int

    @property
    def text(self) -> str:
        """Human-readable success line embedding :attr:`status_code`."""
        return f"Operation successful. Status: {self.status_code}"


ApiResult = JsonValue | StatusMessage


def unwrap(result: ApiResult) -> Any:
    """Return the parsed JSON value, or the status text."""
    if isinstance(result, JsonValue):
        return result.value
    return result.text


# ---------------------------------------------------------------------------
# Product creation
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ProductDraft:
    """Payload sent to create a product."""

    title: str
    price: float
    category: str
    description: str = DEFAULT_DESCRIPTION
    image: str = DEFAULT_IMAGE

    def to_payload(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "price": self.price,
            "category": self.category,
            "description": self.description,
            "image": self.image,
        }


@dataclass(frozen=True, slots=True)
class PostArgs:
    """Typed view of the arguments following ``POST products``."""

    title: str
    price: float
    category: str
    description: str | None = None
    image: str | None = None

    @classmethod
    def parse(cls, arguments: Sequence[str]) -> PostArgs:
        """Build from positional tokens ``title price category [description] [image]``.

        Raises
        ------
        ValidationError
            When fewer than three tokens are given or *price* is not a
            finite number.
        """
        if len(arguments) < 3:
            raise ValidationError(
                "POST products requires at least: <title> <price> <category>.",
                hint='Example: fakestore-cli POST products "My Product" 10.99 "electronics"',
            )
        title, raw_price, category = arguments[0], arguments[1], arguments[2]
        description = arguments[3] if len(arguments) > 3 else None
        image = arguments[4] if len(arguments) > 4 else None

        try:
            price = float(raw_price)
        except ValueError:
            price = math.nan
        if not math.isfinite(price):
            raise ValidationError(
                f"Price must be a valid number, got '{raw_price}'.",
            )

        return cls(
            title=title,
            price=price,
            category=category,
            description=description,
            image=image,
        )

    def to_draft(self) -> ProductDraft:
        """Fill in the default description and image for empty values."""
        return ProductDraft(
            title=self.title,
            price=self.price,
            category=self.category,
            description=self.description or DEFAULT_DESCRIPTION,
            image=self.image or DEFAULT_IMAGE,
        )


# ---------------------------------------------------------------------------
# Dispatch outcome
# ---------------------------------------------------------------------------

class OutcomeKind(Enum):
    """What a successfully dispatched command produced."""

    COLLECTION = "collection"
    PRODUCT = "product"
    FIELD = "field"
    NOT_FOUND = "not_found"
    CREATED = "created"
    DELETED = "deleted"


@dataclass(frozen=True, slots=True)
class Outcome:
    """Result handed from the dispatcher to the presenter."""

    kind: OutcomeKind
    payload: Any
    product_id: str | None = None
    field: str | None = None
