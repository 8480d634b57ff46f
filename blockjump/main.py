#!/usr/bin/env python3
"""
Main CLI entry point for blockjump
"""

from pathlib import Path
from typing import Optional

import typer
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from blockjump import __version__
from blockjump.catalog import Catalog, load_catalog_files
from blockjump.config import JumpConfig, load_config
from blockjump.exceptions import BlockjumpError
from blockjump.search import SearchIndex
from blockjump.ui.jump import build_preview
from blockjump.utils.logging_utils import setup_cli_logging, setup_tui_logging
from blockjump.utils.output import console, print_json

app = typer.Typer(help="Fuzzy jump overlay for blocks and patterns")


state = {"verbose": False}


def _load(
    blocks: Optional[Path], patterns: Optional[Path]
) -> tuple[JumpConfig, Catalog, SearchIndex]:
    """Resolve config and build the catalog and index, exiting on failure."""
    try:
        config = load_config()
        catalog = load_catalog_files(
            blocks or config.blocks_path, patterns or config.patterns_path
        )
        index = SearchIndex.build(catalog, threshold=config.score_threshold)
    except BlockjumpError as e:
        console.print(f"❌ Error: {e}", style="red")
        raise typer.Exit(1) from e
    return config, catalog, index


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    blockjump - search blocks and patterns from a keyboard-triggered overlay.

    [bold]Examples:[/bold]

    Open the overlay browser (press CTRL + J):
        [cyan]blockjump browse[/cyan]

    Search from the shell:
        [cyan]blockjump search "hero"[/cyan]
    """
    state["verbose"] = verbose


@app.command()
def browse(
    blocks: Optional[Path] = typer.Option(None, "--blocks", help="Blocks JSON file"),
    patterns: Optional[Path] = typer.Option(None, "--patterns", help="Patterns JSON file"),
):
    """Open the TUI with the jump overlay."""
    from blockjump.ui.jump_app import JumpApp

    setup_tui_logging(__name__, verbose=state["verbose"])
    config, catalog, index = _load(blocks, patterns)
    try:
        JumpApp(catalog, index, config).run()
    except KeyboardInterrupt:
        pass


@app.command()
def search(
    query: str = typer.Argument(..., help="Search text"),
    limit: int = typer.Option(10, "--limit", "-n", help="Max results"),
    blocks: Optional[Path] = typer.Option(None, "--blocks", help="Blocks JSON file"),
    patterns: Optional[Path] = typer.Option(None, "--patterns", help="Patterns JSON file"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Rank catalog entries against QUERY."""
    setup_cli_logging(state["verbose"])
    _, _, index = _load(blocks, patterns)
    results = index.query(query, limit=limit)

    if json_output:
        print_json(
            [
                {
                    "rank": r.rank,
                    "id": r.entry.id,
                    "title": r.entry.display_title,
                    "category": r.entry.category_label,
                    "score": round(r.score, 4),
                }
                for r in results
            ]
        )
        return

    if not results:
        console.print("[yellow]No results found[/yellow]")
        return

    table = Table(title=f"Results for '{query}'")
    table.add_column("#", style="dim", width=3)
    table.add_column("Title", style="bold")
    table.add_column("Category", style="cyan")
    table.add_column("Score", justify="right")
    table.add_column("ID", style="dim")
    for r in results:
        table.add_row(
            str(r.rank + 1),
            r.entry.display_title,
            r.entry.category_label,
            f"{r.score:.3f}",
            r.entry.id,
        )
    console.print(table)


@app.command()
def show(
    entry_id: str = typer.Argument(..., help="Entry id"),
    blocks: Optional[Path] = typer.Option(None, "--blocks", help="Blocks JSON file"),
    patterns: Optional[Path] = typer.Option(None, "--patterns", help="Patterns JSON file"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show the preview of one entry."""
    setup_cli_logging(state["verbose"])
    _, catalog, _ = _load(blocks, patterns)
    preview = build_preview(catalog.get(entry_id))
    if preview is None:
        console.print(f"[red]No entry with id '{entry_id}'[/red]")
        raise typer.Exit(1)

    if json_output:
        print_json(
            {
                "id": preview.entry_id,
                "category": preview.label,
                "title": preview.title,
                "description": preview.description,
                "content": preview.body,
            }
        )
        return

    console.print(f"[reverse] {preview.label} [/reverse]")
    console.print(Panel(preview.description, title=f"[bold]{preview.title}[/bold]"))
    if preview.body:
        console.print(Syntax(preview.body, "html", word_wrap=True))


@app.command()
def version():
    """Show blockjump version"""
    typer.echo(f"blockjump version {__version__}")


def run():
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
