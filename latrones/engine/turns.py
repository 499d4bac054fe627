"""
Latrones - Turn Management

Runs after every completed placement or move (captures included):

1. Movement only: the non-mover has no pieces left -> mover wins.
2. The non-mover has no legal action (no movable piece in Movement, no
   Empty square in Placement) -> mover wins by immobilization.
3. Otherwise the turn passes to the non-mover.

Piece-count elimination is skipped during Placement, where the second
player legitimately has no pieces before their first placement.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from latrones.engine.base import Phase, Player
from latrones.engine.events import EventPayload, GameEvent
from latrones.engine.moves import MoveGenerator

if TYPE_CHECKING:
    from latrones.engine.state import GameState

logger = logging.getLogger(__name__)


class TurnManager:
    """Stateless termination check and turn alternation."""

    @classmethod
    def win_reason(cls, state: GameState, mover: Player) -> str | None:
        """
        Why `mover` has won on the current board, or None if play continues.

        Returns:
            "eliminated", "immobilized", or None
        """
        defender = mover.opponent()
        if state.phase is Phase.MOVEMENT and state.board.count(defender.piece) == 0:
            return "eliminated"
        if not MoveGenerator.has_legal_action(state.board, defender, state.phase):
            return "immobilized"
        return None

    @classmethod
    def finish_action(cls, state: GameState, mover: Player) -> EventPayload:
        """
        Close out `mover`'s action: end the game or hand over the turn.

        Returns:
            GAME_WON or TURN_ADVANCED payload
        """
        reason = cls.win_reason(state, mover)
        if reason is not None:
            state.game_over = True
            state.winner = mover
            logger.info("%s wins (%s)", mover.name, reason)
            return EventPayload(GameEvent.GAME_WON, player=mover, data={"reason": reason})

        state.current_player = mover.opponent()
        return EventPayload(GameEvent.TURN_ADVANCED, player=state.current_player)
