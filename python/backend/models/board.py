"""Board geometry and the puzzle's starting layout."""

from __future__ import annotations

from backend.models.piece import Piece
from backend.models.position import Position

BOARD_SIZE = 3

INITIAL_LAYOUT: dict[Piece, Position] = {
    Piece.BLOCK: Position(0, 0),
    Piece.RED_SHOE: Position(2, 0),
    Piece.BLUE_SHOE: Position(1, 1),
    Piece.BLACK_SHOE: Position(0, 2),
}


def is_on_board(position: Position) -> bool:
    return 0 <= position.row < BOARD_SIZE and 0 <= position.col < BOARD_SIZE


def squares() -> list[Position]:
    """All squares of the board in row-major order."""
    return [Position(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]
