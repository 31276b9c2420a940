"""Rich console shared by the graph commands."""

from __future__ import annotations

from rich.console import Console

console = Console()


def truncate(text: str, width: int) -> str:
    """Shorten a description to fit a table cell of *width* characters."""
    if len(text) <= width:
        return text
    return text[: width - 3].rstrip() + "..."
