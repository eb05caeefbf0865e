"""Command-line entry point: launch the TUI or query the cheatsheet directly."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence

import typer
from loguru import logger
from rich.console import Console
from rich.table import Table
from rich.text import Text

from lazykeys.commands.chord_parser import ChordParseError, parse_keys
from lazykeys.commands.record_store import (
    DEFAULT_DATA_PATH,
    RecordLoadError,
    RecordStore,
    load_records,
)
from lazykeys.keyboard.keyframes import KeyframeGenerator, KeyframeSequence
from lazykeys.keyboard.layout import default_layout
from lazykeys.keyboard.render import KeyboardRenderer, frame_caption, legend_caption
from lazykeys.search.models import SearchMatch
from lazykeys.search.search_engine import SearchEngine
from lazykeys.utils.config import Config, load_config

app = typer.Typer(help="Searchable LazyVim keybinding cheatsheet.")

console = Console()


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def _load_config(config_path: Path | None) -> Config:
    try:
        return load_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Failed to load config: {e}[/red]")
        raise typer.Exit(code=1)


def _load_store(data_path: Path | None, cfg: Config) -> RecordStore:
    try:
        return load_records(data_path or cfg.data_path)
    except (FileNotFoundError, RecordLoadError) as e:
        console.print(f"[red]Failed to load keybindings: {e}[/red]")
        raise typer.Exit(code=1)


def _render_match_table(store: RecordStore, matches: Sequence[SearchMatch], *, title: str) -> None:
    table = Table(title=title)
    table.add_column("Keys", style="cyan")
    table.add_column("Description")
    table.add_column("Category", style="yellow")
    table.add_column("Mode")
    table.add_column("Score", justify="right")

    for match in matches:
        record = store[match.record_index]
        table.add_row(
            Text(record.keys),
            Text(record.description),
            record.category_label,
            record.mode_label,
            f"{match.score:.0f}",
        )

    console.print(table)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr."),
) -> None:
    """Launch the interactive cheatsheet when no subcommand is given."""
    _configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        tui(config=None, data=None)


@app.command("tui")
def tui(
    config: Optional[Path] = typer.Option(None, help="Path to config file."),
    data: Optional[Path] = typer.Option(None, help="Keybinding data file (JSON)."),
) -> None:
    """Launch the interactive cheatsheet."""
    from lazykeys.tui.app import run
    from lazykeys.tui.tui_logging import setup_tui_logging

    cfg = _load_config(config)
    store = _load_store(data, cfg)
    setup_tui_logging(cfg.logging)
    run(store, config=cfg)


@app.command("search")
def search(
    query: str = typer.Argument(..., help="Fuzzy query over keys, descriptions and categories."),
    limit: int = typer.Option(20, help="Maximum results.", min=1),
    config: Optional[Path] = typer.Option(None, help="Path to config file."),
    data: Optional[Path] = typer.Option(None, help="Keybinding data file (JSON)."),
) -> None:
    """Print keybindings matching QUERY, best first."""
    cfg = _load_config(config)
    store = _load_store(data, cfg)
    matches = SearchEngine(config=cfg.search).search(store, query, limit=limit)
    if not matches:
        console.print("[yellow]No matches found.[/yellow]")
        return
    _render_match_table(store, matches, title=f"Keybindings matching {query!r}")


@app.command("show")
def show(
    keys: str = typer.Argument(..., help="Key sequence, e.g. '<leader>ff' or '<C-w>v'."),
    legend: bool = typer.Option(False, "--legend", help="Show all steps on one diagram."),
) -> None:
    """Draw a key sequence on the keyboard, step by step or as a legend."""
    try:
        chords = parse_keys(keys)
    except ChordParseError as e:
        console.print(f"[red]Invalid key sequence: {e}[/red]")
        raise typer.Exit(code=1)

    layout = default_layout()
    renderer = KeyboardRenderer(layout)
    sequence = KeyframeSequence(KeyframeGenerator(layout).generate(chords), loop=False)

    if legend:
        console.print(renderer.render_legend(sequence.legend))
        console.print(legend_caption(sequence.legend))
        return

    for frame in sequence.frames:
        console.print(frame_caption(frame, len(sequence)))
        console.print(renderer.render_frame(frame))


@app.command("validate")
def validate(
    data: Optional[Path] = typer.Option(None, help="Keybinding data file (JSON)."),
) -> None:
    """Check that a keybinding data file loads and every key sequence parses."""
    path = data or DEFAULT_DATA_PATH
    try:
        store = load_records(path)
    except (FileNotFoundError, RecordLoadError) as e:
        console.print(f"[red]Invalid keybinding data: {e}[/red]")
        raise typer.Exit(code=1)
    console.print(f"OK: {len(store)} keybindings in {path}")


def run() -> None:
    """Entrypoint for Typer."""
    app()


if __name__ == "__main__":
    run()
