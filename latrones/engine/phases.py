"""
Latrones - Phase Control

Placement -> Movement is the only transition and it never reverses. It fires
when both placement quotas reach zero, or immediately when the canonical
starting position is installed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from latrones.engine.base import BOARD_SIZE, Phase, Player

if TYPE_CHECKING:
    from latrones.engine.state import GameState

# Files filled in order by each side's starting layout (column indices).
_STARTING_FILES = {
    Player.DARK: (0, 1, 2),
    Player.LIGHT: (7, 6, 5),
}


class PhaseController:
    """Stateless phase transition rules."""

    @classmethod
    def placement_complete(cls, state: GameState) -> bool:
        return all(quota == 0 for quota in state.remaining_placements_by_player.values())

    @classmethod
    def advance(cls, state: GameState) -> bool:
        """
        Move to the Movement phase if Placement is finished.

        Returns:
            True if the phase changed on this call
        """
        if state.phase is Phase.PLACEMENT and cls.placement_complete(state):
            state.phase = Phase.MOVEMENT
            return True
        return False

    @classmethod
    def starting_layout(cls, player: Player, quota: int) -> tuple[int, ...]:
        """
        Squares a player's pieces occupy in the canonical starting position.

        Dark fills file A from rank 1 upward, then B, then C. Light mirrors
        this from file H. The default quota of 8 gives one full file each.
        """
        squares = []
        for col in _STARTING_FILES[player]:
            for row in range(BOARD_SIZE):
                if len(squares) == quota:
                    return tuple(squares)
                squares.append(row * BOARD_SIZE + col)
        return tuple(squares)

    @classmethod
    def install_starting_position(cls, state: GameState) -> None:
        """Clear the board, place both layouts, and enter Movement."""
        quota = state.rules.placement_quota
        state.board.clear()
        for player in Player:
            for index in cls.starting_layout(player, quota):
                state.board.write(index, player.piece)
            state.remaining_placements_by_player[player] = 0
        state.phase = Phase.MOVEMENT
