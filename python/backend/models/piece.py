"""The four pieces of the puzzle."""

from __future__ import annotations

from enum import IntEnum


class Piece(IntEnum):
    """Piece slots, in the order positions are supplied to ``PuzzleState``."""

    BLOCK = 0
    RED_SHOE = 1
    BLUE_SHOE = 2
    BLACK_SHOE = 3

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").lower()


SHOES: tuple[Piece, ...] = (Piece.RED_SHOE, Piece.BLUE_SHOE, Piece.BLACK_SHOE)
