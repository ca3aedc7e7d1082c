"""Infrastructure layer — external system integration.

This layer wraps all interaction with the remote products service.
Every raw httpx exception must be caught here and re-raised as a
:class:`~fakestore_cli.exceptions.FakestoreError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from fakestore_cli.infra.http_executor import HttpRequestExecutor, build_client

__all__: list[str] = [
    "HttpRequestExecutor",
    "build_client",
]
