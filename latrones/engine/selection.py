"""
Latrones - Selection Protocol

The click-driven entry point. In Placement a click on an Empty square places
a piece. In Movement the first click selects one of the current player's
movable pieces and the second click either moves it, reselects another
piece, or toggles the selection off.

Every rejected click returns False without touching the state. All checks
run before the first write, so a call either completes fully or changes
nothing.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from latrones.engine.base import NO_SELECTION, Phase, Player, SelectedAt, Square
from latrones.engine.captures import CaptureResolver
from latrones.engine.events import EventPayload, GameEvent
from latrones.engine.moves import MoveGenerator
from latrones.engine.phases import PhaseController
from latrones.engine.turns import TurnManager
from latrones.engine.validators import is_valid_square_index, square_name

if TYPE_CHECKING:
    from latrones.engine.state import GameState

logger = logging.getLogger(__name__)


class SelectionProtocol:
    """Sequences the engine components for each user action."""

    @classmethod
    def select_square(cls, state: GameState, index: int) -> bool:
        """
        Handle a click on square `index`.

        Returns:
            True if the click was accepted (state may have changed),
            False if it was rejected (state unchanged)
        """
        if state.game_over:
            logger.debug("Rejected click on %r: game is over", index)
            return False
        if not is_valid_square_index(index):
            logger.debug("Rejected click on %r: not a board square", index)
            return False

        if state.phase is Phase.PLACEMENT:
            return cls._place(state, index)

        selection = state.selection
        if isinstance(selection, SelectedAt):
            return cls._act_on_selection(state, selection.index, index)
        return cls._select(state, index)

    @classmethod
    def _place(cls, state: GameState, index: int) -> bool:
        if state.board.read(index) != Square.EMPTY:
            logger.debug("Rejected placement on %s: occupied", square_name(index))
            return False

        mover = state.current_player
        state.board.write(index, mover.piece)
        state.remaining_placements_by_player[mover] -= 1
        logger.info("%s placed on %s", mover.name, square_name(index))

        events = [EventPayload(GameEvent.PIECE_PLACED, player=mover, squares=(index,))]
        if PhaseController.advance(state):
            logger.info("All pieces placed; entering movement phase")
            events.append(EventPayload(GameEvent.PHASE_CHANGED, data={"phase": state.phase.value}))
        events.append(TurnManager.finish_action(state, mover))
        state.last_events = tuple(events)
        return True

    @classmethod
    def _select(cls, state: GameState, index: int) -> bool:
        if not cls._is_selectable(state, index):
            logger.debug("Rejected selection of %s", square_name(index))
            return False
        state.selection = SelectedAt(index)
        state.last_events = (
            EventPayload(GameEvent.PIECE_SELECTED, player=state.current_player, squares=(index,)),
        )
        return True

    @classmethod
    def _act_on_selection(cls, state: GameState, selected: int, index: int) -> bool:
        if index == selected:
            state.selection = NO_SELECTION
            state.last_events = (
                EventPayload(GameEvent.SELECTION_CLEARED, player=state.current_player,
                             squares=(selected,)),
            )
            return True

        if index in MoveGenerator.destinations(state.board, selected):
            cls._move(state, selected, index)
            return True

        if cls._is_selectable(state, index):
            state.selection = SelectedAt(index)
            state.last_events = (
                EventPayload(GameEvent.PIECE_SELECTED, player=state.current_player,
                             squares=(index,)),
            )
            return True

        logger.debug(
            "Rejected click on %s with %s selected", square_name(index), square_name(selected)
        )
        return False

    @classmethod
    def _move(cls, state: GameState, origin: int, destination: int) -> None:
        mover = state.current_player
        state.board.write(destination, mover.piece)
        state.board.write(origin, Square.EMPTY)
        state.selection = NO_SELECTION
        logger.info("%s moved %s-%s", mover.name, square_name(origin), square_name(destination))

        events = [EventPayload(GameEvent.PIECE_MOVED, player=mover, squares=(origin, destination))]
        captured = CaptureResolver.resolve(
            state.board, destination, mover, edge_captures=state.rules.edge_captures
        )
        if captured:
            logger.info(
                "%s captured %s", mover.name, ", ".join(square_name(i) for i in captured)
            )
            events.append(EventPayload(GameEvent.PIECES_CAPTURED, player=mover, squares=captured))
        events.append(TurnManager.finish_action(state, mover))
        state.last_events = tuple(events)

    @staticmethod
    def _is_selectable(state: GameState, index: int) -> bool:
        return (
            state.board.read(index) == state.current_player.piece
            and MoveGenerator.can_move(state.board, index)
        )

    @classmethod
    def set_starting_pieces(cls, state: GameState) -> None:
        """Install the canonical starting position and begin Movement with Light to move."""
        cls._clear_progress(state)
        PhaseController.install_starting_position(state)
        logger.info("Starting position set (%d pieces each)", state.rules.placement_quota)
        state.last_events = (
            EventPayload(GameEvent.STARTING_POSITION_SET, player=state.current_player,
                         data={"phase": state.phase.value}),
        )

    @classmethod
    def reset(cls, state: GameState) -> None:
        """Empty board, Placement phase, full quotas, Light to place."""
        cls._clear_progress(state)
        state.board.clear()
        state.phase = Phase.PLACEMENT
        for player in Player:
            state.remaining_placements_by_player[player] = state.rules.placement_quota
        logger.info("Game reset")
        state.last_events = (EventPayload(GameEvent.GAME_RESET, player=state.current_player),)

    @staticmethod
    def _clear_progress(state: GameState) -> None:
        state.current_player = Player.LIGHT
        state.selection = NO_SELECTION
        state.game_over = False
        state.winner = None
