"""
Latrones - Session Models

Pydantic view of a GameState, carrying every read accessor the UI polls.
"""

from typing import Literal

from pydantic import BaseModel, Field

from latrones.engine.base import Player
from latrones.engine.state import GameState


class GameSnapshot(BaseModel):
    """Read-only copy of the state after a call."""

    board: list[int] = Field(min_length=64, max_length=64)
    valid_moves: list[int] = Field(default_factory=list)
    phase: Literal["placement", "movement"]
    current_player: Literal["light", "dark"]
    selected_square: int | None = None
    game_over: bool = False
    winner: Literal["light", "dark"] | None = None
    light_pieces: int = 0
    dark_pieces: int = 0
    light_to_place: int = 0
    dark_to_place: int = 0

    model_config = {"frozen": True}

    @classmethod
    def from_state(cls, state: GameState) -> "GameSnapshot":
        return cls(
            board=state.get_board(),
            valid_moves=sorted(state.get_valid_moves()),
            phase=state.phase.value,
            current_player=state.current_player.name.lower(),
            selected_square=state.selected_square,
            game_over=state.game_over,
            winner=state.winner.name.lower() if state.winner is not None else None,
            light_pieces=state.piece_count(Player.LIGHT),
            dark_pieces=state.piece_count(Player.DARK),
            light_to_place=state.remaining_placements(Player.LIGHT),
            dark_to_place=state.remaining_placements(Player.DARK),
        )
