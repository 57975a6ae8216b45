"""Shared utility functions for the Flash Builder descriptor generator.

Provides path canonicalisation, separator normalisation for template output,
and Rich-based console reporting.  Path helpers never raise on I/O problems;
they fall back to the absolute path instead.
"""

from __future__ import annotations

import os
from pathlib import Path

from rich.console import Console
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Path helpers
# ---------------------------------------------------------------------------


def canonical_path(path: str | Path) -> str:
    """Return the canonical absolute form of *path*.

    Symlinks and ``..`` segments are resolved.  The path does not need to
    exist.  If resolution fails with an ``OSError`` the plain absolute path
    is returned instead.

    Examples::

        canonical_path("/m/./bin/../bin/a.swc") -> "/m/bin/a.swc"
    """
    try:
        return os.path.realpath(os.fspath(path))
    except OSError:
        return os.path.abspath(os.fspath(path))


def portable_path(path: str | Path) -> str:
    """Canonicalise *path* and normalise separators to forward slashes.

    Descriptor files are shared between Windows and POSIX checkouts, so every
    path written into them uses ``/``.
    """
    return canonical_path(path).replace("\\", "/")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
