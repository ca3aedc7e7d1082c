"""fakestore-cli — command-line client for a REST products catalog.

Built on httpx with a strict layered architecture.
"""

from fakestore_cli.version import __version__

__all__: list[str] = ["__version__"]
