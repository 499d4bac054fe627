"""
Latrones - Test Configuration and Fixtures

Common fixtures and position builders for all test modules.
"""

from typing import Callable, Iterable

import pytest

from latrones.engine.base import GameRules, Phase, Player, Square
from latrones.engine.state import GameState


# =============================================================================
# GAME FIXTURES
# =============================================================================

@pytest.fixture
def game() -> GameState:
    """Fresh game in the Placement phase with default rules."""
    return GameState()


@pytest.fixture
def started_game() -> GameState:
    """Game in the canonical starting position (Dark on file A, Light on file H)."""
    state = GameState()
    state.set_starting_pieces()
    return state


@pytest.fixture
def position() -> Callable[..., GameState]:
    """
    Build an arbitrary Movement-phase position.

    Usage:
        state = position(light=[1, 24], dark=[0], to_move=Player.LIGHT)
    """
    def _build(
        light: Iterable[int] = (),
        dark: Iterable[int] = (),
        to_move: Player = Player.LIGHT,
        rules: GameRules | None = None,
    ) -> GameState:
        state = GameState(rules)
        state.set_starting_pieces()
        state.board.clear()
        for index in light:
            state.board.write(index, Square.LIGHT)
        for index in dark:
            state.board.write(index, Square.DARK)
        state.current_player = to_move
        state.phase = Phase.MOVEMENT
        return state

    return _build


# =============================================================================
# STATE HELPERS
# =============================================================================

@pytest.fixture
def observe() -> Callable[[GameState], tuple]:
    """Everything a UI could observe, for strict no-op comparisons."""
    def _observe(state: GameState) -> tuple:
        return (
            tuple(state.get_board()),
            state.current_player,
            state.phase,
            state.selected_square,
            state.game_over,
            state.winner,
            dict(state.remaining_placements_by_player),
        )

    return _observe
