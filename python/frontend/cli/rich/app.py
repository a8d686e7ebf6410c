"""Rich terminal frontend: prints the board, legal moves and replay results.

Output only: the puzzle is driven by the commands in ``main.py``, not by
keypresses.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import GamePlay
from backend.engine.gamestate import PuzzleState
from backend.models.board import BOARD_SIZE, is_on_board
from backend.models.direction import Direction
from backend.models.piece import Piece
from backend.models.position import Position

console = Console()

_GLYPHS: dict[Piece, tuple[str, str]] = {
    Piece.BLOCK: ("B", "bold yellow"),
    Piece.RED_SHOE: ("r", "bold red"),
    Piece.BLUE_SHOE: ("b", "bold blue"),
    Piece.BLACK_SHOE: ("k", "bold white"),
}


# -- board rendering ----------------------------------------------------------


def _render_square(state: PuzzleState, square: Position) -> Text:
    cell = Text()
    for piece in Piece:
        if state.get_position(piece) == square:
            glyph, style = _GLYPHS[piece]
            cell.append(glyph, style=style)
    if not cell:
        cell.append("·", style="dim")
    return cell


def render_board(state: PuzzleState) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(BOARD_SIZE):
        table.add_column(width=4, justify="center")

    for r in range(BOARD_SIZE):
        table.add_row(*(_render_square(state, Position(r, c)) for c in range(BOARD_SIZE)))

    return table


def _legend() -> Text:
    legend = Text()
    for piece in Piece:
        glyph, style = _GLYPHS[piece]
        if piece is not Piece.BLOCK:
            legend.append("  ")
        legend.append(glyph, style=style)
        legend.append(f" {piece.label}", style="dim")
    return legend


def _format_moves(directions: list[Direction]) -> str:
    return ", ".join(d.value for d in directions) if directions else "none"


def _draw(game: GamePlay, title: str, status: Text | None = None) -> None:
    state = game.state
    off_board = [piece for piece in Piece if not is_on_board(state.get_position(piece))]

    stats = Text()
    stats.append("Moves: ", style="dim")
    stats.append(str(game.moves), style="bold yellow")
    stats.append("    Legal: ", style="dim")
    if off_board:
        # rules are only defined for pieces on the board
        stats.append("n/a", style="dim")
    else:
        stats.append(_format_moves(game.legal_moves), style="bold cyan")

    parts = [Align.center(render_board(state)), Align.center(_legend()), Align.center(stats)]
    for piece in off_board:
        note = f"The {piece.label} is off the board at {state.get_position(piece)}"
        parts.append(Align.center(Text(note, style="bold red")))
    if status is not None:
        parts.append(Align.center(status))

    border = "bold green" if state.is_solved() else "bright_blue"
    panel = Panel(
        Group(*parts),
        title=f"[bold]{title}[/bold]",
        border_style=border,
        padding=(1, 2),
    )
    console.print(panel)


# -- public entry points ------------------------------------------------------


def show(state: PuzzleState) -> None:
    """Print *state* with its legal moves."""
    _draw(GamePlay(state, auto_reset=False), "Shoe Puzzle")


def replay(state: PuzzleState, moves: list[Direction], unchecked: bool = False) -> GamePlay:
    """Apply *moves* to *state* and print the final board.

    Illegal moves are skipped unless *unchecked* is set, in which case every
    move is applied without consulting the legality rules.
    """
    game = GamePlay(state, auto_reset=False)
    skipped: list[str] = []

    for i, direction in enumerate(moves, 1):
        if unchecked:
            game.state.move(direction)
            game.moves += 1
        elif not game.perform_move(direction):
            skipped.append(f"{i}:{direction.value}")

    status = Text()
    if game.is_won:
        status.append("★ Solved! ★", style="bold green")
    else:
        status.append("Not solved", style="dim")
    if skipped:
        status.append(f"    Skipped illegal moves: {' '.join(skipped)}", style="yellow")

    _draw(game, "Replay (unchecked)" if unchecked else "Replay", status)
    return game
