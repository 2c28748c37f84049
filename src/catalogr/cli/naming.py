"""Naming commands: title, path, chain, year, playlist, rules."""

from __future__ import annotations

import logging
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from catalogr.cli._app import (
    CONFIG_COMMANDS,
    METADATA_COMMANDS,
    PATH_COMMANDS,
    TITLE_COMMANDS,
    PlainOpt,
)
from catalogr.cli._context import get_runtime_context
from catalogr.console import console, print_error, print_info, print_success
from catalogr.exceptions import ConfigurationError, LocationOutsideRootError
from catalogr.naming import (
    RootedLocation,
    build_container_chain,
    get_playlist_type,
    get_root_path,
    get_year,
    transform_title,
)
from catalogr.schemas.rules import TitleRules

logger = logging.getLogger(__name__)


def _load_rules(ctx: typer.Context) -> TitleRules:
    """Load active rules, exiting with code 1 on configuration errors."""
    runtime = get_runtime_context(ctx)
    try:
        return runtime.rules
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(1) from e


def register_naming_commands(app: typer.Typer) -> None:
    """Register naming commands on the main app."""

    @app.command("title", rich_help_panel=TITLE_COMMANDS)
    def title_command(
        ctx: typer.Context,
        names: Annotated[
            list[str],
            typer.Argument(help="Raw file names or titles to clean."),
        ],
        plain: PlainOpt = False,
    ) -> None:
        """🎬 Clean release file names into display titles.

        [bold]Examples:[/]
          catalogr title "The.Movie.2010.BluRay.x264-YIFY.mkv"
          catalogr -v title Some_Show.S01E01.HDRip.avi   # Trace each rule

        Blacklisted track labels (e.g. "English") come out empty.
        """
        runtime = get_runtime_context(ctx)
        rules = _load_rules(ctx)
        results = [(raw, transform_title(raw, rules, verbose=runtime.verbose)) for raw in names]

        if plain:
            for _, title in results:
                typer.echo(title)
            return

        table = Table(title="Titles", show_lines=False)
        table.add_column("Raw", style="dim", overflow="fold")
        table.add_column("Title", style="title", overflow="fold")
        for raw, title in results:
            table.add_row(escape(raw), escape(title) if title else "[hint](dropped)[/]")
        console.print(table)

    @app.command("path", rich_help_panel=PATH_COMMANDS)
    def path_command(
        ctx: typer.Context,
        location: Annotated[
            str,
            typer.Argument(help="Absolute location of the media file."),
        ],
        root: Annotated[
            str,
            typer.Option("--root", help="Import root path (empty: use parent directory)."),
        ] = "",
        plain: PlainOpt = False,
    ) -> None:
        """📁 Show the container segments and chain for a file location.

        [bold]Examples:[/]
          catalogr path --root /movies/root.cfg /movies/Action/Foo/bar.mkv
          catalogr path /movies/Foo/bar.mkv
          catalogr --strict path --root /movies/x /tv/show/ep.mkv   # Exits 1
        """
        runtime = get_runtime_context(ctx)
        try:
            if runtime.strict_paths:
                segments = RootedLocation(root, location).segments
            else:
                segments = get_root_path(root, location)
        except LocationOutsideRootError as e:
            print_error(str(e))
            raise typer.Exit(1) from e

        chain = build_container_chain(segments)
        if plain:
            typer.echo(chain)
            return

        console.print(f"[bold]Location:[/] [path]{escape(location)}[/]")
        console.print(f"[bold]Root:[/]     [path]{escape(root) or '(none)'}[/]")
        console.print(f"[bold]Segments:[/] {escape(repr(segments))}")
        console.print(f"[bold]Chain:[/]    [path]{escape(chain) or '(empty)'}[/]")

    @app.command("chain", rich_help_panel=PATH_COMMANDS)
    def chain_command(
        segments: Annotated[
            list[str],
            typer.Argument(help="Container segments, outermost first."),
        ],
    ) -> None:
        """🔗 Join segments into an escaped container path.

        [bold]Example:[/]
          catalogr chain Audio Artists "AC/DC"   # /Audio/Artists/AC\\/DC
        """
        typer.echo(build_container_chain(segments))

    @app.command("year", rich_help_panel=METADATA_COMMANDS)
    def year_command(
        date: Annotated[str, typer.Argument(help="Date string, e.g. 2010-03-23.")],
    ) -> None:
        """📅 Extract the year from an ISO-like date (other input passes through)."""
        typer.echo(get_year(date))

    @app.command("playlist", rich_help_panel=METADATA_COMMANDS)
    def playlist_command(
        mimetype: Annotated[str, typer.Argument(help="Mimetype reported for the file.")],
    ) -> None:
        """🎵 Detect the playlist format for a mimetype.

        Prints "m3u" or "pls"; exits 1 when the mimetype is not a playlist.
        """
        playlist_type = get_playlist_type(mimetype)
        if not playlist_type:
            print_info(f"Not a playlist mimetype: {mimetype}")
            raise typer.Exit(1)
        typer.echo(playlist_type)

    @app.command("rules", rich_help_panel=CONFIG_COMMANDS)
    def rules_command(ctx: typer.Context) -> None:
        """📋 Validate and list the active title rules.

        [bold]Examples:[/]
          catalogr rules
          catalogr --rules-file my-rules.yaml rules
        """
        runtime = get_runtime_context(ctx)
        rules = _load_rules(ctx)
        source = str(runtime.rules_file) if runtime.rules_file else "active configuration"
        print_success(
            f"{len(rules.noise_tokens)} noise tokens, "
            f"{len(rules.blacklist)} blacklist entries ({source})"
        )

        table = Table(title="Noise tokens (applied in order)")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Token")
        for i, token in enumerate(rules.noise_tokens, start=1):
            table.add_row(str(i), escape(token))
        console.print(table)

        console.print(f"[bold]Blacklist:[/] {escape(', '.join(rules.blacklist))}")
