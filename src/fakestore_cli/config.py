"""Client configuration.

The remote base address is the only setting.  It is passed to the
request executor at construction time so tests can point it anywhere.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BASE_URL: str = "https://fakestoreapi.com"


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Immutable settings for one CLI invocation."""

    base_url: str = DEFAULT_BASE_URL
    """Scheme and host of the products service, without a trailing slash."""
