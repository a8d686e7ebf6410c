"""Compass directions the block can be moved in."""

from __future__ import annotations

from enum import StrEnum

from backend.models.errors import InvalidDelta


class Direction(StrEnum):
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"

    @property
    def delta(self) -> tuple[int, int]:
        """The ``(row, col)`` change of a single step in this direction."""
        return _DELTAS[self]

    @property
    def row_change(self) -> int:
        return _DELTAS[self][0]

    @property
    def col_change(self) -> int:
        return _DELTAS[self][1]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @classmethod
    def from_delta(cls, d_row: int, d_col: int) -> Direction:
        """Return the direction whose step is ``(d_row, d_col)``.

        Raises ``InvalidDelta`` for anything other than a single orthogonal
        step, e.g. ``(0, 0)``, diagonals, or jumps of more than one square.
        """
        for direction, delta in _DELTAS.items():
            if delta == (d_row, d_col):
                return direction
        raise InvalidDelta(d_row, d_col)


_DELTAS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
}

_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.RIGHT: Direction.LEFT,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
}
