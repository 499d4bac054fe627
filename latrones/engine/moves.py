"""
Latrones - Move Generation

Legal actions for the acting player.

Placement: every Empty square is a target.
Movement: a piece slides orthogonally through consecutive Empty squares,
stopping before the first occupied square or the board edge. It never
jumps and never lands on an occupied square.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from latrones.engine.base import Phase, Player, SelectedAt, Square
from latrones.engine.board import DIRECTIONS, BoardState

if TYPE_CHECKING:
    from latrones.engine.state import GameState


class MoveGenerator:
    """
    Stateless move generator.

    All methods are class methods; the board or game state is passed in
    and never stored.
    """

    @classmethod
    def placement_targets(cls, board: BoardState) -> frozenset[int]:
        """Every Empty square."""
        return frozenset(board.indices_of(Square.EMPTY))

    @classmethod
    def destinations(cls, board: BoardState, origin: int) -> frozenset[int]:
        """
        Squares the piece at `origin` can slide to.

        Args:
            board: Current board
            origin: Index of an occupied square

        Returns:
            Reachable Empty squares along the four orthogonal lines.
            Empty if `origin` holds no piece.
        """
        if board.read(origin) == Square.EMPTY:
            return frozenset()

        reachable: set[int] = set()
        for drow, dcol in DIRECTIONS:
            step = board.neighbor(origin, drow, dcol)
            while step is not None and board.read(step) == Square.EMPTY:
                reachable.add(step)
                step = board.neighbor(step, drow, dcol)
        return frozenset(reachable)

    @classmethod
    def can_move(cls, board: BoardState, origin: int) -> bool:
        """True if the piece at `origin` has at least one Empty orthogonal neighbour."""
        if board.read(origin) == Square.EMPTY:
            return False
        for drow, dcol in DIRECTIONS:
            step = board.neighbor(origin, drow, dcol)
            if step is not None and board.read(step) == Square.EMPTY:
                return True
        return False

    @classmethod
    def movable_pieces(cls, board: BoardState, player: Player) -> frozenset[int]:
        """Squares holding `player`'s pieces that have at least one legal destination."""
        return frozenset(
            index for index in board.indices_of(player.piece)
            if cls.can_move(board, index)
        )

    @classmethod
    def has_legal_action(cls, board: BoardState, player: Player, phase: Phase) -> bool:
        """Whether `player` could act on this board in `phase`."""
        if phase is Phase.PLACEMENT:
            return board.count(Square.EMPTY) > 0
        return any(cls.can_move(board, index) for index in board.indices_of(player.piece))

    @classmethod
    def valid_moves(cls, state: GameState) -> frozenset[int]:
        """
        Context-sensitive legal squares for the UI.

        - Game over: nothing.
        - Placement: every Empty square.
        - Movement, nothing selected: current player's movable pieces.
        - Movement, a piece selected: that piece's destinations.
        """
        if state.game_over:
            return frozenset()
        if state.phase is Phase.PLACEMENT:
            return cls.placement_targets(state.board)

        selection = state.selection
        if isinstance(selection, SelectedAt):
            return cls.destinations(state.board, selection.index)
        return cls.movable_pieces(state.board, state.current_player)
