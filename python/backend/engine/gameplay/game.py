"""Core gameplay logic: guarded moves, move counting, and the win hook."""

from __future__ import annotations

import logging
from typing import Callable

from backend.engine.gamestate import PuzzleState
from backend.engine.gamestate.state import PositionListener, SolvedListener
from backend.models.direction import Direction
from backend.models.errors import InvalidDelta
from backend.models.piece import Piece
from backend.models.position import Position

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single game session on top of a ``PuzzleState``.

    When the puzzle becomes solved, *on_solved* is called with the session
    (a host would show its confirmation here) and, if *auto_reset* is set,
    the session starts over from its starting layout.

    Listeners registered on the session follow it across resets: they are
    attached to every state the session creates, and a reset reports each
    piece that jumps back to its starting square.
    """

    def __init__(
        self,
        state: PuzzleState | None = None,
        *,
        on_solved: Callable[[GamePlay], None] | None = None,
        auto_reset: bool = True,
    ) -> None:
        start = state if state is not None else PuzzleState()
        self._start_positions = start.positions
        self.on_solved = on_solved
        self.auto_reset = auto_reset
        self.moves: int = 0
        self._position_listeners: list[PositionListener] = []
        self._solved_listeners: list[SolvedListener] = []
        self.state = start
        self._attach(start)

    # -- movement -------------------------------------------------------------

    def perform_move(self, direction: Direction) -> bool:
        """Apply *direction* if it is legal.

        Returns True if the move was applied. Illegal moves are logged and
        leave both the state and the move counter untouched.
        """
        if not self.state.can_move(direction):
            logger.warning("Invalid move: %s", direction)
            return False
        logger.info("Move: %s", direction)
        self.moves += 1
        # a winning move may reset the session before returning
        state = self.state
        state.move(direction)
        logger.debug("New state: %s", state)
        return True

    def direction_for_square(self, row: int, col: int) -> Direction | None:
        """Translate a square next to the block into a direction.

        Returns None for any square that is not orthogonally adjacent.
        """
        block = self.state.get_position(Piece.BLOCK)
        try:
            return Direction.from_delta(row - block.row, col - block.col)
        except InvalidDelta:
            logger.warning("Square (%d,%d) does not correspond to any direction", row, col)
            return None

    def click(self, row: int, col: int) -> bool:
        """Move the block towards the square at (row, col)."""
        logger.debug("Click on square (%d,%d)", row, col)
        direction = self.direction_for_square(row, col)
        if direction is None:
            return False
        return self.perform_move(direction)

    def reset(self) -> None:
        logger.debug("Restarting game...")
        old = self.state
        self.state = PuzzleState(*self._start_positions)
        self.moves = 0
        self._attach(self.state)

        for piece in Piece:
            before, after = old.get_position(piece), self.state.get_position(piece)
            if before != after:
                self._forward_position(piece, before, after)
        if old.is_solved() != self.state.is_solved():
            self._forward_solved(old.is_solved(), self.state.is_solved())

    # -- change notification --------------------------------------------------

    def add_position_listener(self, listener: PositionListener) -> Callable[[], None]:
        """Call ``listener(piece, old, new)`` for every piece that changes square.

        Unlike listening on ``state`` directly, this survives resets.
        """
        self._position_listeners.append(listener)
        return lambda: self._position_listeners.remove(listener)

    def add_solved_listener(self, listener: SolvedListener) -> Callable[[], None]:
        self._solved_listeners.append(listener)
        return lambda: self._solved_listeners.remove(listener)

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_solved()

    @property
    def legal_moves(self) -> list[Direction]:
        """Legal directions in ``Direction`` declaration order."""
        legal = self.state.get_legal_moves()
        return [direction for direction in Direction if direction in legal]

    # -- helpers --------------------------------------------------------------

    def _attach(self, state: PuzzleState) -> None:
        state.add_position_listener(self._forward_position)
        state.add_solved_listener(self._forward_solved)
        state.add_solved_listener(self._handle_solved_change)

    def _forward_position(self, piece: Piece, old: Position, new: Position) -> None:
        for listener in list(self._position_listeners):
            listener(piece, old, new)

    def _forward_solved(self, old: bool, new: bool) -> None:
        for listener in list(self._solved_listeners):
            listener(old, new)

    def _handle_solved_change(self, old: bool, new: bool) -> None:
        if not new:
            return
        logger.info("Puzzle solved in %d moves", self.moves)
        if self.on_solved is not None:
            self.on_solved(self)
        if self.auto_reset:
            self.reset()
