"""
themestyle CLI.

Commands:
- resolve: Resolve a props bag against a theme file with the built-in system
- medias: Show a theme's breakpoints and media queries
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.table import Table

from themestyle._version import get_version
from themestyle.errors import ThemeStyleError

if TYPE_CHECKING:
    from themestyle.theme import Theme

app = typer.Typer(
    help="Resolve theme-aware style props into style declarations.",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"themestyle {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
) -> None:
    """Resolve theme-aware style props into style declarations."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_theme_or_exit(theme_file: Path) -> Theme:
    from themestyle.loader import load_theme

    try:
        return load_theme(theme_file)
    except ThemeStyleError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)


@app.command("resolve")
def resolve(
    theme_file: Annotated[Path, typer.Argument(help="Theme file (YAML or JSON)")],
    props: Annotated[
        str,
        typer.Option("--props", "-p", help='Props bag as JSON, e.g. \'{"color": "primary"}\''),
    ] = "{}",
    compact: Annotated[
        bool, typer.Option("--compact", help="Print JSON on a single line")
    ] = False,
) -> None:
    """Resolve props against a theme using the built-in style system.

    Examples:
        themestyle resolve theme.yaml --props '{"color": "primary"}'
        themestyle resolve theme.yaml -p '{"p": {"xs": "sm", "md": "lg"}}'
    """
    from themestyle.props import system

    theme = _load_theme_or_exit(theme_file)

    try:
        props_bag = json.loads(props)
    except json.JSONDecodeError as e:
        typer.echo(f"Error: invalid --props JSON: {e}", err=True)
        raise typer.Exit(code=1)
    if not isinstance(props_bag, dict):
        typer.echo("Error: --props must be a JSON object", err=True)
        raise typer.Exit(code=1)

    styles = system({**props_bag, "theme": theme})

    if compact:
        typer.echo(json.dumps(styles))
    else:
        console.print_json(json.dumps(styles))


@app.command("medias")
def medias(
    theme_file: Annotated[Path, typer.Argument(help="Theme file (YAML or JSON)")],
) -> None:
    """Show breakpoints and their media queries in theme order."""
    from themestyle.theme import get_breakpoint_min, media_min_width

    theme = _load_theme_or_exit(theme_file)

    table = Table(title=f"Breakpoints: {theme.name}")
    table.add_column("Breakpoint", style="cyan")
    table.add_column("Min width", justify="right")
    table.add_column("Media query")

    for name, minimum in theme.breakpoints.items():
        media = media_min_width(get_breakpoint_min(theme.breakpoints, name))
        table.add_row(name, f"{minimum}px", media or "(base)")

    console.print(table)


def main(argv: list[str] | None = None) -> None:
    """Console script entry point."""
    app(args=argv)


__all__ = ["app", "main"]
