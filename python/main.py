#!/usr/bin/env python3
"""Shoe Puzzle.

Usage::

    python main.py show                          # canonical layout
    python main.py show -l "1,1 1,1 1,2 2,2"     # custom layout
    python main.py replay right down left        # apply legal moves
    python main.py --log-level INFO replay up    # log rejected moves
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamestate import PuzzleState  # noqa: E402
from backend.models.direction import Direction  # noqa: E402
from backend.models.errors import InvalidLayout  # noqa: E402
from backend.models.position import Position  # noqa: E402
from frontend.cli.rich import app as rich_app  # noqa: E402

LOG_LEVEL_ENVVAR = "SHOE_PUZZLE_LOG_LEVEL"

err_console = Console(stderr=True)


# -- helpers ------------------------------------------------------------------


def _parse_layout(text: Optional[str]) -> tuple[Position, ...]:
    """Parse ``"r,c r,c r,c r,c"`` (block, red, blue, black)."""
    if text is None:
        return ()
    try:
        parts = text.split()
        if not parts:
            raise ValueError("Expected four 'row,col' positions, got an empty layout.")
        return tuple(Position.parse(part) for part in parts)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--layout") from e


def _build_state(layout: Optional[str]) -> PuzzleState:
    positions = _parse_layout(layout)
    try:
        return PuzzleState(*positions)
    except InvalidLayout as e:
        err_console.print(f"[bold red]Invalid layout:[/bold red] {e}")
        raise typer.Exit(code=1)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)

LAYOUT_OPTION = typer.Option(
    None, "-l", "--layout",
    help='Piece positions as "r,c r,c r,c r,c" (block, red, blue, black).',
)


@app.callback()
def main(
    log_level: str = typer.Option(
        "WARNING", "--log-level",
        envvar=LOG_LEVEL_ENVVAR,
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    ),
) -> None:
    """Shoe Puzzle."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.command()
def show(layout: Optional[str] = LAYOUT_OPTION) -> None:
    """Print the board and the block's legal moves."""
    rich_app.show(_build_state(layout))


@app.command()
def replay(
    moves: Optional[List[Direction]] = typer.Argument(
        None, help="Directions to apply in order.",
    ),
    layout: Optional[str] = LAYOUT_OPTION,
    unchecked: bool = typer.Option(
        False, "--unchecked",
        help="Apply every move without checking whether it is legal.",
    ),
) -> None:
    """Apply a sequence of moves and print the resulting board."""
    rich_app.replay(_build_state(layout), moves or [], unchecked=unchecked)


if __name__ == "__main__":
    app()
