"""Immutable board coordinates."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.direction import Direction


@dataclass(frozen=True)
class Position:
    """A ``(row, col)`` square.

    Positions are not bounds-checked: stepping off the board simply yields a
    coordinate outside ``[0, BOARD_SIZE)``.
    """

    row: int
    col: int

    # -- construction helpers -------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> Position:
        """Create a position from ``"row,col"`` text.

        Example::

            Position.parse("2,0")  # Position(row=2, col=0)
        """
        parts = text.split(",")
        if len(parts) != 2:
            raise ValueError(f"Expected 'row,col', got {text!r}.")
        try:
            return cls(int(parts[0]), int(parts[1]))
        except ValueError:
            raise ValueError(f"Expected integer coordinates, got {text!r}.") from None

    # -- neighbours -----------------------------------------------------------

    def at(self, direction: Direction) -> Position:
        """Return the position one step away in *direction*."""
        return Position(self.row + direction.row_change, self.col + direction.col_change)

    def up(self) -> Position:
        return self.at(Direction.UP)

    def right(self) -> Position:
        return self.at(Direction.RIGHT)

    def down(self) -> Position:
        return self.at(Direction.DOWN)

    def left(self) -> Position:
        return self.at(Direction.LEFT)

    def __str__(self) -> str:
        return f"({self.row},{self.col})"
