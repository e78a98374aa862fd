#!/usr/bin/env python3
"""Liquid sort level tooling.

Usage::

    python main.py show 12              # draw the bottles of level 12
    python main.py solve 12             # print a shortest solution
    python main.py verify -a 1 -z 40    # check a range of generated levels
    python main.py progress             # view saved progress
"""

import logging
import sys
from pathlib import Path

import rich.box
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

ROOT = Path(__file__).resolve().parent  # python/
PROJECT_ROOT = ROOT.parent
DATA_DIR = PROJECT_ROOT / "data"

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from liquidsort.engine.gamegenerator import GameGenerator  # noqa: E402
from liquidsort.engine.gamesolver import MAX_MOVES, Solver  # noqa: E402
from liquidsort.models import (  # noqa: E402
    CAPACITY,
    MAX_LEVEL,
    ProgressStore,
    Puzzle,
    level_config,
)
from liquidsort.models.palette import hex_for  # noqa: E402

console = Console()
app = typer.Typer(add_completion=False, help="Liquid sort level tooling.")


# -- helpers ------------------------------------------------------------------


def _render_puzzle(puzzle: Puzzle) -> Table:
    """Return a Rich Table with one column per bottle, top slot first."""
    table = Table(
        show_header=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for bottle in puzzle:
        table.add_column(bottle.id.removeprefix("bottle-"), justify="center")

    for slot in range(CAPACITY - 1, -1, -1):
        cells: list[Text] = []
        for bottle in puzzle:
            color = bottle.layers[slot]
            if color is None:
                cells.append(Text("·", style="dim"))
            else:
                cells.append(Text("██", style=hex_for(color)))
        table.add_row(*cells)

    return table


def _level_title(level: int) -> str:
    config = level_config(level)
    return (
        f"Level {level}: {config.colors} colors, "
        f"{config.bottles} bottles ({config.empty_bottles} empty)"
    )


# -- commands -----------------------------------------------------------------


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log generator and solver activity.",
    ),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


@app.command()
def show(level: int = typer.Argument(..., min=1, help="Level number.")) -> None:
    """Draw the bottles of a generated level."""
    puzzle = GameGenerator.generate_for_level(level)
    console.print(f"[bold cyan]{_level_title(level)}[/bold cyan]")
    console.print(_render_puzzle(puzzle))


@app.command()
def solve(
    level: int = typer.Argument(..., min=1, help="Level number."),
    max_moves: int = typer.Option(MAX_MOVES, "--max-moves", min=1),
) -> None:
    """Print a shortest solution for a generated level."""
    puzzle = GameGenerator.generate_for_level(level)
    moves = Solver.solve(puzzle, max_moves)

    console.print(f"[bold cyan]{_level_title(level)}[/bold cyan]")
    console.print(_render_puzzle(puzzle))
    if moves is None:
        console.print(f"[red]No solution within {max_moves} moves.[/red]")
        raise typer.Exit(code=1)

    for i, move in enumerate(moves, 1):
        color = puzzle[move.source].top_info()
        puzzle = puzzle.pour(move.source, move.target)
        label = color.color if color else "?"
        console.print(
            f"  {i:>3}. bottle-{move.source} → bottle-{move.target}  "
            f"[{hex_for(label)}]{label}[/]"
        )
    console.print(f"[bold green]Solved in {len(moves)} moves.[/bold green]")


@app.command()
def verify(
    first: int = typer.Option(1, "-a", "--first", min=1),
    last: int = typer.Option(MAX_LEVEL, "-z", "--last", min=1),
    max_moves: int = typer.Option(MAX_MOVES, "--max-moves", min=1),
) -> None:
    """Generate a range of levels and check that each one is playable."""
    table = Table(box=rich.box.ROUNDED, border_style="dim")
    table.add_column("Level", justify="right")
    table.add_column("Colors", justify="right")
    table.add_column("Bottles", justify="right")
    table.add_column("Shortest", justify="right", style="yellow")
    table.add_column("Status")

    failures = 0
    for level in range(first, last + 1):
        config = level_config(level)
        puzzle = GameGenerator.generate_for_level(level)
        counts = puzzle.color_counts()
        moves = Solver.solve(puzzle, max_moves)

        problems: list[str] = []
        if puzzle.is_solved():
            problems.append("already solved")
        if moves is None:
            problems.append("unsolvable")
        if len(counts) != config.colors or any(n != CAPACITY for n in counts.values()):
            problems.append("bad color counts")

        if problems:
            failures += 1
        table.add_row(
            str(level),
            str(config.colors),
            str(config.bottles),
            "-" if moves is None else str(len(moves)),
            "[red]" + ", ".join(problems) + "[/red]" if problems else "[green]ok[/green]",
        )

    console.print(table)
    if failures:
        console.print(f"[bold red]{failures} level(s) failed.[/bold red]")
        raise typer.Exit(code=1)


@app.command()
def progress(
    data_dir: Path = typer.Option(DATA_DIR, "--data-dir", help="Where progress.json lives."),
) -> None:
    """Show saved progress."""
    saved = ProgressStore(data_dir / "progress.json").load()
    console.print(f"  Highest unlocked level: [bold yellow]{saved.highest_unlocked}[/bold yellow]")
    console.print(f"  Sound: [bold]{'on' if saved.sound_enabled else 'off'}[/bold]")


if __name__ == "__main__":
    app()
