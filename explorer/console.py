"""Shared consoles for CLI commands.

Query text goes to stdout so it can be piped; status and errors go to
``err_console``.
"""

from __future__ import annotations

from rich.console import Console

console = Console()
err_console = Console(stderr=True)
