"""catalogr CLI built with Typer and Rich.

Commands are grouped in help panels:
- Titles (title)
- Container Paths (path, chain)
- Metadata (year, playlist)
- Configuration (rules)
"""

from __future__ import annotations

from catalogr.cli._app import create_main_callback, make_app
from catalogr.cli._context import RuntimeContext, get_runtime_context

app = make_app()

# Register main callback (handles --version, --verbose, --rules-file, --strict)
create_main_callback(app)

from catalogr.cli.naming import register_naming_commands  # noqa: E402

register_naming_commands(app)


def main() -> int:
    """Main entry point for the CLI."""
    try:
        app()
        return 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0


__all__ = [
    "RuntimeContext",
    "app",
    "get_runtime_context",
    "main",
]
