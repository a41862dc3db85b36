#!/usr/bin/env python3
"""
Main CLI entry point for guideview
"""

import asyncio
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from guideview import __version__
from guideview.config.settings import (
    check_setting,
    describe_settings,
    get_log_level,
    get_origin,
    invalid_settings,
)
from guideview.exceptions import ConfigurationError, FetchError
from guideview.services.guide_fetcher import GuideFetcher
from guideview.services.guide_parser import parse_guide
from guideview.ui.render_dispatch import render as render_nodes
from guideview.ui.rich_render import to_renderables
from guideview.utils.logging import setup_logging

app = typer.Typer(help="View markdown guides served over HTTP.")
console = Console()
err_console = Console(stderr=True)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    guideview - render remote markdown guides in the terminal

    [bold]Examples:[/bold]

    Open a guide in the viewer:
        [cyan]guideview view textguide[/cyan]

    Print a guide:
        [cyan]guideview render textguide --origin https://example.com[/cyan]
    """
    try:
        level = "DEBUG" if verbose else get_log_level()
    except ConfigurationError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    setup_logging(level)


def _resolve_origin(origin: Optional[str]) -> str:
    if origin is not None:
        error = check_setting("GUIDEVIEW_ORIGIN", origin)
        if error:
            err_console.print(f"[red]{error.replace('GUIDEVIEW_ORIGIN', '--origin')}[/red]")
            raise typer.Exit(1)
        return origin.rstrip("/")
    try:
        return get_origin()
    except ConfigurationError as e:
        err_console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


@app.command()
def view(
    name: str = typer.Argument(..., help="Guide name, e.g. 'textguide'"),
    origin: Optional[str] = typer.Option(
        None, "--origin", "-o", help="Origin serving /guides/<name>.mdx"
    ),
    theme: Optional[str] = typer.Option(None, "--theme", "-t", help="Code highlighting theme"),
):
    """Open a guide in the interactive viewer"""
    from guideview.ui.guide_app import GuideApp

    GuideApp(name, origin=_resolve_origin(origin), code_theme=theme).run()


async def _fetch(fetcher: GuideFetcher, name: str) -> str:
    async with fetcher:
        return await fetcher.fetch(name)


@app.command("render")
def render_guide(
    name: str = typer.Argument(..., help="Guide name, e.g. 'textguide'"),
    origin: Optional[str] = typer.Option(
        None, "--origin", "-o", help="Origin serving /guides/<name>.mdx"
    ),
    theme: Optional[str] = typer.Option(None, "--theme", "-t", help="Code highlighting theme"),
):
    """Fetch a guide once and print it"""
    fetcher = GuideFetcher(_resolve_origin(origin))
    try:
        text = asyncio.run(_fetch(fetcher, name))
    except FetchError as e:
        err_console.print(Text.assemble(("Error: ", "bold red"), "Failed to load guide"))
        err_console.print(f"[dim]{e.reason}[/dim]")
        raise typer.Exit(1)

    for renderable in to_renderables(render_nodes(parse_guide(text), theme)):
        console.print(renderable)


@app.command()
def config():
    """Show configuration environment variables"""
    table = Table(title="guideview configuration")
    table.add_column("Variable", style="cyan")
    table.add_column("Value")
    table.add_column("Default", style="dim")
    table.add_column("Description")

    for setting in describe_settings():
        value = setting.value if setting.is_set else "[dim]unset[/dim]"
        if setting.error:
            value = f"[red]{setting.value} (invalid)[/red]"
        table.add_row(setting.name, value, setting.default or "-", setting.description)
    console.print(table)

    errors = invalid_settings()
    if errors:
        for error in errors:
            err_console.print(f"[red]{error}[/red]")
        raise typer.Exit(1)


@app.command()
def version():
    """Show guideview version"""
    typer.echo(f"guideview version {__version__}")


def run():
    """Entry point for the guideview script"""
    app()


if __name__ == "__main__":
    run()
