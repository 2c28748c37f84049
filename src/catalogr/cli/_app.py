"""App configuration, callbacks, and shared types for CLI.

This module contains the Typer application factory, the main callback, and
type aliases shared by the commands.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError as PydanticValidationError

from catalogr import __version__
from catalogr.cli._context import RuntimeContext
from catalogr.console import console, print_error
from catalogr.env_settings import get_env_settings
from catalogr.logging_setup import setup_logging

logger = logging.getLogger(__name__)

# =============================================================================
# Help Panel Names
# =============================================================================

TITLE_COMMANDS = "Titles"
PATH_COMMANDS = "Container Paths"
METADATA_COMMANDS = "Metadata"
CONFIG_COMMANDS = "Configuration"


# =============================================================================
# Version Callback
# =============================================================================


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[title]catalogr[/] {__version__}")
        raise typer.Exit()


# Type alias for plain (script-friendly) output
PlainOpt = Annotated[
    bool,
    typer.Option(
        "--plain",
        "-p",
        help="Print bare values only, one per line.",
    ),
]


# =============================================================================
# App Factory
# =============================================================================


MAIN_EPILOG = """
[bold cyan]Examples:[/]
  catalogr title "The.Movie.2010.BluRay.x264-YIFY.mkv"
  catalogr path --root /movies/root.cfg /movies/Action/Foo/bar.mkv
  catalogr chain Video Directories "AC/DC"
  catalogr year 2010-03-23

[dim]Set CATALOGR_RULES_FILE to use your own noise-token list.[/]
"""


def make_app() -> typer.Typer:
    """Create and configure the main Typer application."""
    return typer.Typer(
        name="catalogr",
        help="Title and container-path helpers for media catalog imports",
        epilog=MAIN_EPILOG,
        rich_markup_mode="rich",
        pretty_exceptions_enable=True,
        pretty_exceptions_show_locals=False,
        no_args_is_help=True,
        add_completion=False,
        context_settings={"help_option_names": ["-h", "--help"]},
    )


def create_main_callback(app: typer.Typer) -> None:
    """Register the main callback on the app."""

    @app.callback()
    def main_callback(
        ctx: typer.Context,
        version: Annotated[
            bool,
            typer.Option(
                "--version",
                "-V",
                callback=version_callback,
                is_eager=True,
                help="Show version and exit.",
            ),
        ] = False,
        verbose: Annotated[
            bool,
            typer.Option(
                "--verbose",
                "-v",
                help="Enable verbose (DEBUG) logging and rule tracing.",
            ),
        ] = False,
        log_file: Annotated[
            Path | None,
            typer.Option(
                "--log-file",
                help="Also write DEBUG logs to this file.",
            ),
        ] = None,
        rules_file: Annotated[
            Path | None,
            typer.Option(
                "--rules-file",
                "-r",
                help="YAML/JSON title rules (overrides CATALOGR_RULES_FILE).",
            ),
        ] = None,
        strict: Annotated[
            bool,
            typer.Option(
                "--strict",
                help="Reject locations outside the import root (also: CATALOGR_STRICT_PATHS).",
            ),
        ] = False,
    ) -> None:
        """Title and container-path helpers for media catalog imports.

        Cleans release file names into display titles and builds the
        escaped container paths media items are filed under.
        """
        try:
            env = get_env_settings()
        except PydanticValidationError as e:
            print_error(f"Invalid environment settings: {e.errors()[0]['msg']}")
            raise typer.Exit(1) from e

        setup_logging(log_level="DEBUG" if verbose else env.log_level, log_file=log_file)

        ctx.obj = RuntimeContext(
            rules_file=rules_file,
            strict_paths=strict or env.strict_paths,
            verbose=verbose,
        )
        logger.debug("Runtime context: %r", ctx.obj)
