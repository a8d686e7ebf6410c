from backend.models.board import BOARD_SIZE, INITIAL_LAYOUT, is_on_board
from backend.models.direction import Direction
from backend.models.errors import InvalidDelta, InvalidLayout
from backend.models.piece import Piece
from backend.models.position import Position

__all__ = [
    "BOARD_SIZE",
    "INITIAL_LAYOUT",
    "Direction",
    "InvalidDelta",
    "InvalidLayout",
    "Piece",
    "Position",
    "is_on_board",
]
