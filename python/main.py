#!/usr/bin/env python3
"""The Sorting Hat: a puzzle game for learning sorting algorithms.

Usage::

    python main.py                                  # interactive menu
    python main.py trace 3 1 2 -a SELECTION_SORT    # show the swaps
    python main.py level data/BubbleSortLevel1.shl # inspect a level
    python main.py new-level out.shl -c 0,0 -c 1,0  # write a level
    python main.py stats                            # player record
"""

import logging
import sys
from pathlib import Path
from typing import List

import rich.box
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import DATA_DIR, load_settings  # noqa: E402
from backend.engine.transactions import generate_transactions, replay  # noqa: E402
from backend.errors import LevelLoadError, LoggingErrorReporter  # noqa: E402
from backend.fileio import FileManager, decode_level, encode_level  # noqa: E402
from backend.fileio.datastream import DataFormatError  # noqa: E402
from backend.models.algorithm import AlgorithmType  # noqa: E402
from backend.models.level import SnakeCell  # noqa: E402
from backend.models.tile import ids_of, tiles_from_ids  # noqa: E402

console = Console()

app = typer.Typer(add_completion=False, invoke_without_command=True)


# -- helpers ------------------------------------------------------------------


def _parse_cell(raw: str) -> SnakeCell:
    try:
        col, row = (int(v) for v in raw.split(","))
    except ValueError:
        raise typer.BadParameter(f"Expected COL,ROW but got {raw!r}") from None
    return SnakeCell(col, row)


# -- CLI entry points ---------------------------------------------------------


@app.callback()
def main(
    ctx: typer.Context,
    data_dir: Path = typer.Option(
        DATA_DIR, "-d", "--data-dir",
        help="Directory holding settings.json, levels and the player record.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log file activity.",
    ),
) -> None:
    """The Sorting Hat."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )
    ctx.obj = data_dir
    if ctx.invoked_subcommand is None:
        from frontend.cli.rich.app import run

        run(data_dir=data_dir)


@app.command()
def trace(
    ids: List[int] = typer.Argument(..., help="Tile ids in their starting order."),
    algorithm: AlgorithmType = typer.Option(
        AlgorithmType.BUBBLE_SORT, "-a", "--algorithm",
        help="Sorting algorithm to trace.",
    ),
) -> None:
    """Print the swaps an algorithm performs on IDS."""
    tiles = tiles_from_ids(ids)
    transactions = generate_transactions(algorithm, tiles)

    table = Table(title=algorithm.display_name, box=rich.box.ROUNDED)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Swap", justify="center", style="cyan")
    table.add_column("Tiles after", style="yellow")
    working = list(tiles)
    for i, t in enumerate(transactions, 1):
        t.apply(working)
        table.add_row(str(i), f"{t.first} ↔ {t.second}", " ".join(map(str, ids_of(working))))
    console.print(table)
    console.print(f"Final order: {' '.join(map(str, ids_of(replay(tiles, transactions))))}")


@app.command()
def level(path: Path = typer.Argument(..., exists=True, dir_okay=False)) -> None:
    """Decode a level file and print its layout."""
    try:
        lvl = decode_level(path.read_bytes(), path.name)
    except LevelLoadError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)

    console.print(f"[bold]{lvl.identifier}[/bold]  {lvl.algorithm.display_name}")
    console.print(
        f"Grid {lvl.columns}x{lvl.rows} "
        f"(declared {lvl.declared_columns}x{lvl.declared_rows}), {lvl.length} cells"
    )
    console.print(" ".join(f"({c.col},{c.row})" for c in lvl.snake))


@app.command("new-level")
def new_level(
    path: Path = typer.Argument(..., dir_okay=False),
    algorithm: AlgorithmType = typer.Option(
        AlgorithmType.BUBBLE_SORT, "-a", "--algorithm",
    ),
    cells: List[str] = typer.Option(
        ..., "-c", "--cell",
        help="Snake cell as COL,ROW; repeat in path order.",
    ),
) -> None:
    """Write a level file from a list of snake cells."""
    snake = [_parse_cell(raw) for raw in cells]
    try:
        payload = encode_level(algorithm, snake)
    except DataFormatError as exc:
        console.print(f"[red]Cannot encode level: {exc}[/red]")
        raise typer.Exit(code=1)
    path.write_bytes(payload)
    console.print(f"Wrote {len(snake)} cells to {path}")


@app.command()
def stats(ctx: typer.Context) -> None:
    """Show the player record for every configured level."""
    settings = load_settings(ctx.obj)
    record = FileManager(settings, LoggingErrorReporter()).load_record()

    table = Table(box=rich.box.ROUNDED)
    for name in ("Level", "Algorithm", "Played", "Wins", "Perfect", "Fastest (ms)"):
        table.add_column(name)
    for identifier in settings.level_options:
        table.add_row(
            identifier,
            record.get_algorithm(identifier) or "-",
            str(record.get_games_played(identifier)),
            str(record.get_wins(identifier)),
            str(record.get_perfect_wins(identifier)),
            str(record.get_fastest_win(identifier)),
        )
    console.print(table)


if __name__ == "__main__":
    app()
