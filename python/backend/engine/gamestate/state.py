"""Positions of the four pieces and the rules that move them."""

from __future__ import annotations

import logging
from typing import Callable

from backend.models.board import BOARD_SIZE, INITIAL_LAYOUT, is_on_board
from backend.models.direction import Direction
from backend.models.errors import InvalidLayout
from backend.models.piece import SHOES, Piece
from backend.models.position import Position

logger = logging.getLogger(__name__)

PositionListener = Callable[[Piece, Position, Position], None]
SolvedListener = Callable[[bool, bool], None]


class PuzzleState:
    """Holds the current position of every piece.

    The block is the only piece moved directly; shoes stacked with the block
    are carried along according to the direction of the move.

    ``move`` does not check legality. Callers are expected to consult
    ``can_move`` (or ``get_legal_moves``) first; an unchecked illegal move is
    carried out with the same mechanics as a legal one.
    """

    def __init__(self, *positions: Position) -> None:
        if not positions:
            positions = tuple(INITIAL_LAYOUT[piece] for piece in Piece)
        self._check_positions(positions)
        self._positions: dict[Piece, Position] = dict(zip(Piece, positions))
        self._position_listeners: list[PositionListener] = []
        self._solved_listeners: list[SolvedListener] = []

    @staticmethod
    def _check_positions(positions: tuple[Position, ...]) -> None:
        if len(positions) != len(Piece):
            raise InvalidLayout(
                f"Expected {len(Piece)} positions, got {len(positions)}."
            )
        for piece, position in zip(Piece, positions):
            if not is_on_board(position):
                raise InvalidLayout(
                    f"The {piece.label} at {position} is outside the "
                    f"{BOARD_SIZE}×{BOARD_SIZE} board."
                )
        if positions[Piece.BLUE_SHOE] == positions[Piece.BLACK_SHOE]:
            raise InvalidLayout(
                f"The blue and black shoes cannot share {positions[Piece.BLUE_SHOE]}."
            )

    # -- queries --------------------------------------------------------------

    def get_position(self, piece: Piece | int) -> Position:
        return self._positions[Piece(piece)]

    @property
    def positions(self) -> tuple[Position, ...]:
        """All piece positions in ``Piece`` order."""
        return tuple(self._positions[piece] for piece in Piece)

    def is_solved(self) -> bool:
        return self._positions[Piece.RED_SHOE] == self._positions[Piece.BLUE_SHOE]

    def can_move(self, direction: Direction) -> bool:
        """Return whether the block can be moved in *direction*."""
        checks = {
            Direction.UP: self._can_move_up,
            Direction.RIGHT: self._can_move_right,
            Direction.DOWN: self._can_move_down,
            Direction.LEFT: self._can_move_left,
        }
        return checks[direction]()

    def get_legal_moves(self) -> set[Direction]:
        return {direction for direction in Direction if self.can_move(direction)}

    def copy(self) -> PuzzleState:
        """Return an independent state with the same positions and no listeners."""
        return PuzzleState(*self.positions)

    # -- legality rules -------------------------------------------------------

    def _can_move_up(self) -> bool:
        block = self._positions[Piece.BLOCK]
        return block.row > 0 and self._is_empty(block.up())

    def _can_move_right(self) -> bool:
        block = self._positions[Piece.BLOCK]
        if block.col == BOARD_SIZE - 1:
            return False
        right = block.right()
        return self._is_empty(right) or (
            self._positions[Piece.BLACK_SHOE] == right
            and not self._are_stacked(Piece.BLOCK, Piece.BLUE_SHOE)
        )

    def _can_move_down(self) -> bool:
        block = self._positions[Piece.BLOCK]
        if block.row == BOARD_SIZE - 1:
            return False
        down = block.down()
        if self._is_empty(down):
            return True
        if (
            self._are_stacked(Piece.BLACK_SHOE, Piece.BLOCK)
            or self._positions[Piece.BLACK_SHOE] == down
        ):
            return False
        return self._positions[Piece.BLUE_SHOE] == down or (
            self._positions[Piece.RED_SHOE] == down
            and not self._are_stacked(Piece.BLUE_SHOE, Piece.BLOCK)
        )

    def _can_move_left(self) -> bool:
        block = self._positions[Piece.BLOCK]
        return block.col > 0 and self._is_empty(block.left())

    # -- moves ----------------------------------------------------------------

    def move(self, direction: Direction) -> None:
        """Move the block in *direction*, carrying any shoes stacked with it.

        Listeners are notified once the whole move has been applied.
        """
        before = dict(self._positions)
        was_solved = self.is_solved()

        if direction == Direction.UP:
            self._move_up()
        elif direction == Direction.LEFT:
            # The black shoe is never carried left.
            self._carry(direction, Piece.RED_SHOE, Piece.BLUE_SHOE)
        else:
            self._carry(direction, *SHOES)

        logger.debug("Moved %s: %s", direction, self)
        self._notify(before, was_solved)

    def _move_up(self) -> None:
        if self._are_stacked(Piece.BLACK_SHOE, Piece.BLOCK):
            if self._are_stacked(Piece.RED_SHOE, Piece.BLOCK):
                self._step(Piece.RED_SHOE, Direction.UP)
            self._step(Piece.BLACK_SHOE, Direction.UP)
        self._step(Piece.BLOCK, Direction.UP)

    def _carry(self, direction: Direction, *shoes: Piece) -> None:
        for shoe in shoes:
            if self._are_stacked(shoe, Piece.BLOCK):
                self._step(shoe, direction)
        self._step(Piece.BLOCK, direction)

    def _step(self, piece: Piece, direction: Direction) -> None:
        self._positions[piece] = self._positions[piece].at(direction)

    # -- change notification --------------------------------------------------

    def add_position_listener(self, listener: PositionListener) -> Callable[[], None]:
        """Call ``listener(piece, old, new)`` whenever a piece changes square.

        Returns a function that unregisters the listener.
        """
        self._position_listeners.append(listener)
        return lambda: self._position_listeners.remove(listener)

    def add_solved_listener(self, listener: SolvedListener) -> Callable[[], None]:
        """Call ``listener(old, new)`` whenever the solved status flips."""
        self._solved_listeners.append(listener)
        return lambda: self._solved_listeners.remove(listener)

    def _notify(self, before: dict[Piece, Position], was_solved: bool) -> None:
        for piece in Piece:
            old, new = before[piece], self._positions[piece]
            if old != new:
                for listener in list(self._position_listeners):
                    listener(piece, old, new)
        solved = self.is_solved()
        if solved != was_solved:
            for listener in list(self._solved_listeners):
                listener(was_solved, solved)

    # -- helpers --------------------------------------------------------------

    def _are_stacked(self, a: Piece, b: Piece) -> bool:
        return self._positions[a] == self._positions[b]

    def _is_empty(self, position: Position) -> bool:
        return position not in self._positions.values()

    def __str__(self) -> str:
        return "[" + ",".join(str(p) for p in self.positions) + "]"

    def __repr__(self) -> str:
        return f"PuzzleState{self.positions!r}"
