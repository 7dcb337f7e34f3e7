"""Rich terminal frontend: tables, colours, and panels.

The player picks a level from the menu, then sorts the tiles laid along
the level's snake by typing the two positions to swap. Every swap is
checked against the level's sorting algorithm.
"""

from __future__ import annotations

from pathlib import Path

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.config import Settings, load_settings
from backend.engine.gameplay import GamePlay
from backend.engine.registry import AlgorithmRegistry
from backend.errors import ErrorType, LoggingErrorReporter
from backend.fileio import FileManager
from backend.models.level import Level
from backend.models.record import PlayerRecord
from backend.models.tile import Tile
from backend.models.viewport import Viewport

console = Console()


# -- helpers ------------------------------------------------------------------


def _format_time(ms: int) -> str:
    if ms <= 0:
        return "--:--"
    m, s = divmod(ms // 1000, 60)
    return f"{m:02d}:{s:02d}"


class ConsoleErrorReporter(LoggingErrorReporter):
    """Logs the error and shows it to the player."""

    def process_error(self, error: ErrorType) -> None:
        super().process_error(error)
        console.print(Align.center(Text(f"  {error.value}", style="bold red")))


# -- board rendering ----------------------------------------------------------


def _render_snake(level: Level, tiles: list[Tile]) -> Table:
    """Return a Rich Table with each tile drawn at its snake cell.

    Cells show ``position:id``; tiles already in place are green.
    """
    grid: list[list[str]] = [["" for _ in range(level.columns)] for _ in range(level.rows)]
    ordered = sorted(t.id for t in tiles)
    for i, (cell, tile) in enumerate(zip(level.snake, tiles)):
        style = "bold green" if ordered[i] == tile.id else "bold white"
        grid[cell.row][cell.col] = f"[dim]{i}:[/dim][{style}]{tile.id}[/{style}]"

    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(level.columns):
        table.add_column(min_width=5, justify="center")
    for row in grid:
        table.add_row(*row)
    return table


def _render_record(settings: Settings, record: PlayerRecord) -> Table:
    table = Table(
        box=rich.box.ROUNDED,
        border_style="dim",
        title_style="bold cyan",
    )
    table.add_column("#", justify="right", style="dim", width=3)
    table.add_column("Level")
    table.add_column("Algorithm", style="cyan")
    table.add_column("Played", justify="right", style="yellow")
    table.add_column("Wins", justify="right", style="yellow")
    table.add_column("Perfect", justify="right", style="yellow")
    table.add_column("Fastest", justify="right", style="yellow")

    for i, identifier in enumerate(settings.level_options, 1):
        table.add_row(
            str(i),
            identifier,
            record.get_algorithm(identifier) or "-",
            str(record.get_games_played(identifier)),
            str(record.get_wins(identifier)),
            str(record.get_perfect_wins(identifier)),
            _format_time(record.get_fastest_win(identifier)),
        )
    return table


# -- screens ------------------------------------------------------------------


def _draw_menu(settings: Settings, record: PlayerRecord) -> None:
    console.clear()

    opts = Text()
    opts.append("  1-9", style="bold cyan")
    opts.append("  play level    ")
    opts.append("Q", style="dim bold")
    opts.append("  quit", style="dim")

    body = Group(
        Align.center(_render_record(settings, record)),
        Text(""),
        Align.center(opts),
    )
    panel = Panel(
        body,
        title="[bold]T H E   S O R T I N G   H A T[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )
    console.print()
    console.print(Align.center(panel))


def _draw_game(game: GamePlay, status: str = "") -> None:
    console.clear()

    done, total = game.progress
    stats = Text()
    stats.append("  Step: ", style="dim")
    stats.append(f"{done}/{total}", style="bold yellow")
    stats.append("    Mistakes: ", style="dim")
    stats.append(str(game.state.mistakes), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(game.state.elapsed_ms), style="bold yellow")

    controls = Text()
    controls.append("  a b", style="bold cyan")
    controls.append("  swap positions a and b   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  back", style="dim")

    panel = Panel(
        Align.center(_render_snake(game.level, game.state.tiles)),
        title=f"[bold cyan]{game.level.algorithm.display_name}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _draw_win(game: GamePlay) -> None:
    console.clear()

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    if game.is_perfect:
        congrats.append("PERFECT!", style="bold green")
    else:
        congrats.append("SORTED!", style="bold green")
    congrats.append(f"  {game.state.mistakes} mistakes  ", style="green")
    congrats.append("★\n", style="bold yellow")

    panel = Panel(
        Group(
            Align.center(_render_snake(game.level, game.state.tiles)),
            Align.center(congrats),
            Align.center(Text(_format_time(game.state.elapsed_ms), style="bold yellow")),
        ),
        title=f"[bold green]{game.level.identifier}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))


# -- game loop ----------------------------------------------------------------


def _parse_swap(raw: str) -> tuple[int, int] | None:
    parts = raw.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def _play_level(
    identifier: str,
    files: FileManager,
    registry: AlgorithmRegistry,
    tiles: list[Tile],
    record: PlayerRecord,
) -> None:
    level = files.load_level(identifier)
    if level is None:
        console.input("  Press Enter to go back. ")
        return

    game = GamePlay.deal(level, registry.get(level.algorithm, tiles))
    record.record_game(identifier, level.algorithm.value)
    status = ""

    while not game.is_won:
        _draw_game(game, status)
        raw = console.input("  Swap: ").strip()
        if raw.lower() == "q":
            files.save_record(record)
            return

        move = _parse_swap(raw)
        if move is None:
            status = "[yellow]Type two positions, e.g. 0 3[/yellow]"
        elif game.swap(*move):
            status = "[green]Correct![/green]"
        else:
            status = "[red]That is not what the algorithm does next.[/red]"

    _draw_win(game)
    record.record_win(
        identifier, level.algorithm.value, game.state.elapsed_ms, game.is_perfect
    )
    files.save_record(record)
    console.input("\n  Press Enter to go back. ")


def _menu_loop(settings: Settings) -> None:
    files = FileManager(settings, ConsoleErrorReporter(), Viewport())
    registry = AlgorithmRegistry()
    # The generators stay bound to this list; each level refills it.
    tiles: list[Tile] = []
    record = files.load_record()

    while True:
        _draw_menu(settings, record)
        choice = console.input("  Select: ").strip().lower()

        if choice == "q":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        if choice.isdigit() and 1 <= int(choice) <= len(settings.level_options):
            identifier = settings.level_options[int(choice) - 1]
            _play_level(identifier, files, registry, tiles, record)


# -- public entry point -------------------------------------------------------


def run(data_dir: Path) -> None:
    """Launch the Rich CLI with interactive menu."""
    _menu_loop(load_settings(data_dir))
