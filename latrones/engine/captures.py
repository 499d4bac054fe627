"""
Latrones - Custodian Capture Resolution

After a move, every enemy piece that the moved piece now flanks is removed:
the enemy sits directly next to the destination and a piece of the mover's
colour sits directly beyond it on the same line. The moved piece itself is
never captured by moving between two enemies.
"""

from latrones.engine.base import Player, Square
from latrones.engine.board import DIRECTIONS, BoardState


class CaptureResolver:
    """Stateless custodian capture logic."""

    @classmethod
    def find_captures(
        cls,
        board: BoardState,
        destination: int,
        mover: Player,
        edge_captures: bool = False
    ) -> tuple[int, ...]:
        """
        Enemy pieces flanked by the piece at `destination`.

        Each of the four directions is checked independently.

        Args:
            board: Board after the moving piece has landed
            destination: Square the mover's piece just moved to
            mover: Player who made the move
            edge_captures: Treat the board edge beyond an adjacent enemy as a wall

        Returns:
            Indices of captured squares, ascending
        """
        enemy = mover.opponent().piece
        friend = mover.piece
        captured = []

        for drow, dcol in DIRECTIONS:
            adjacent = board.neighbor(destination, drow, dcol)
            if adjacent is None or board.read(adjacent) != enemy:
                continue
            beyond = board.neighbor(adjacent, drow, dcol)
            if beyond is None:
                if edge_captures:
                    captured.append(adjacent)
            elif board.read(beyond) == friend:
                captured.append(adjacent)

        return tuple(sorted(captured))

    @classmethod
    def resolve(
        cls,
        board: BoardState,
        destination: int,
        mover: Player,
        edge_captures: bool = False
    ) -> tuple[int, ...]:
        """Find and remove the pieces captured by the move to `destination`."""
        captured = cls.find_captures(board, destination, mover, edge_captures)
        for index in captured:
            board.write(index, Square.EMPTY)
        return captured
