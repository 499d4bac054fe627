"""
Latrones - Action Events

Event types recorded by each mutating engine call, so a UI can react
(sounds, highlights) without diffing board snapshots.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from latrones.engine.base import Player


class GameEvent(Enum):
    """Events that can occur during a game."""

    PIECE_PLACED = auto()
    PIECE_SELECTED = auto()
    SELECTION_CLEARED = auto()
    PIECE_MOVED = auto()
    PIECES_CAPTURED = auto()
    PHASE_CHANGED = auto()
    TURN_ADVANCED = auto()
    GAME_WON = auto()
    GAME_RESET = auto()
    STARTING_POSITION_SET = auto()


@dataclass(frozen=True)
class EventPayload:
    """
    One recorded event.

    Attributes:
        event: What happened
        player: Player the event concerns (acting player, new player, or winner)
        squares: Square indices involved, in a per-event order
            (PIECE_MOVED: origin then destination)
        data: Extra details, e.g. {"phase": "movement"} or {"reason": "immobilized"}
    """

    event: GameEvent
    player: Player | None = None
    squares: tuple[int, ...] = ()
    data: dict[str, Any] = field(default_factory=dict, hash=False)


def events_of(payloads: tuple[EventPayload, ...], event: GameEvent) -> tuple[EventPayload, ...]:
    """Filter recorded payloads down to one event type."""
    return tuple(p for p in payloads if p.event is event)
