"""Rich consoles shared by the CLI layer.

Results go to stdout, errors and log records to stderr.
"""

from __future__ import annotations

from rich.console import Console

console = Console()
err_console = Console(stderr=True)
