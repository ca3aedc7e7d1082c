"""httpx backed implementation of :class:`~fakestore_cli.core.protocols.RequestExecutor`.

This module is the **only** place in the codebase that imports ``httpx``.
All httpx exceptions are caught here and re-raised as
:class:`~fakestore_cli.exceptions.TransportError` — nothing raw escapes
the infrastructure boundary.
"""

from __future__ import annotations

import json
import logging
from types import TracebackType
from typing import Any

import httpx

from fakestore_cli.config import ClientConfig
from fakestore_cli.core.models import ApiResult, HttpCall, JsonValue, StatusMessage
from fakestore_cli.exceptions import (
    FakestoreError,
    InvalidResponseError,
    RemoteError,
    TransportError,
)

logger = logging.getLogger(__name__)

_BODY_METHODS: frozenset[str] = frozenset({"POST", "PUT"})


def build_client(transport: httpx.BaseTransport | None = None) -> httpx.Client:
    """Create the synchronous ``httpx.Client`` used for every request.

    Redirects are followed; the timeout is httpx's default.
    """
    return httpx.Client(follow_redirects=True, transport=transport)


def is_json_media_type(content_type: str | None) -> bool:
    """True for ``application/json`` and ``+json`` structured suffixes."""
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


class HttpRequestExecutor:
    """Concrete :class:`RequestExecutor` backed by ``httpx.Client``.

    Usage::

        with HttpRequestExecutor(ClientConfig()) as executor:
            result = executor.execute("/products/1", "GET")

    A client passed in is left open on exit; a client created here is
    closed.
    """

    def __init__(
        self,
        config: ClientConfig,
        client: httpx.Client | None = None,
    ) -> None:
        self._config: ClientConfig = config
        self._owns_client: bool = client is None
        self._client: httpx.Client = client if client is not None else build_client()

    def __enter__(self) -> HttpRequestExecutor:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    # ------------------------------------------------------------------
    # Call construction (pure)
    # ------------------------------------------------------------------

    def build_call(
        self,
        path: str,
        method: str,
        payload: dict[str, Any] | None = None,
    ) -> HttpCall:
        """Assemble the :class:`HttpCall` for *method* on *path*.

        Only POST and PUT carry a body; a payload given to any other
        method is dropped.
        """
        method = method.upper()
        headers: dict[str, str] = {}
        body: str | None = None
        if payload is not None and method in _BODY_METHODS:
            headers["Content-Type"] = "application/json"
            body = json.dumps(payload)
        return HttpCall(
            method=method,
            url=f"{self._config.base_url}{path}",
            headers=headers,
            body=body,
        )

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def execute(
        self,
        path: str,
        method: str,
        payload: dict[str, Any] | None = None,
    ) -> ApiResult:
        """Send one request and normalize the reply.

        Raises
        ------
        RemoteError
            For any non-2xx status; carries the raw body text.
        TransportError
            When httpx cannot complete the request.
        InvalidResponseError
            When a JSON-typed body does not parse.
        """
        call = self.build_call(path, method, payload)
        logger.debug("%s %s", call.method, call.url)
        try:
            return self._send(call)
        except FakestoreError as exc:
            logger.error("API request failed for %s %s: %s", call.method, call.url, exc)
            raise
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error("API request failed for %s %s: %s", call.method, call.url, exc)
            raise TransportError(
                f"Could not reach {call.url}: {exc}",
                hint="Check your network connection and the service address.",
            ) from exc

    def _send(self, call: HttpCall) -> ApiResult:
        response = self._client.request(
            call.method,
            call.url,
            headers=call.headers,
            content=call.body,
        )

        if not response.is_success:
            raise RemoteError(response.status_code, response.reason_phrase, response.text)

        if not is_json_media_type(response.headers.get("content-type")):
            return StatusMessage(status_code=response.status_code)

        try:
            return JsonValue(value=response.json())
        except ValueError as exc:
            raise InvalidResponseError(
                f"Reply advertised JSON but could not be parsed: {exc}",
            ) from exc
