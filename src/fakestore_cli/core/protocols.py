"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Any, Protocol

from fakestore_cli.core.models import ApiResult


class RequestExecutor(Protocol):
    """Contract for HTTP backends.

    Any object that implements :meth:`execute` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def execute(
        self,
        path: str,
        method: str,
        payload: dict[str, Any] | None = None,
    ) -> ApiResult:
        """Issue one request against ``base_url + path``.

        *payload* is serialized into the body for POST and PUT only.

        Implementations must map all backend-specific exceptions to
        :class:`~fakestore_cli.exceptions.FakestoreError` subclasses.

        Raises
        ------
        RemoteError
            When the service replies with a non-success status.
        TransportError
            When the request could not be completed.
        InvalidResponseError
            When a JSON-typed reply body cannot be parsed.
        """
        ...  # pragma: no cover
