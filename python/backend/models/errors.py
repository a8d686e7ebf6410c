"""Exceptions raised by the puzzle models and engine."""

from __future__ import annotations


class InvalidLayout(ValueError):
    """Piece positions do not describe a valid puzzle state."""


class InvalidDelta(ValueError):
    """A coordinate change does not correspond to any direction."""

    def __init__(self, d_row: int, d_col: int) -> None:
        super().__init__(f"No direction for delta ({d_row},{d_col})")
        self.d_row = d_row
        self.d_col = d_col
