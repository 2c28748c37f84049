"""Rich console output for the catalogr CLI."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

CATALOGR_THEME = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "red bold",
        "dim": "dim",
        "path": "cyan",
        "title": "bold white",
        "hint": "dim italic",
    }
)

# Primary console for normal output
console = Console(theme=CATALOGR_THEME, stderr=False)

# Error console for stderr output
err_console = Console(theme=CATALOGR_THEME, stderr=True)


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]✓[/] {escape(message)}")


def print_info(message: str) -> None:
    """Print an informational message."""
    console.print(f"[info]ℹ[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(f"[error]✗ {escape(message)}[/]")
