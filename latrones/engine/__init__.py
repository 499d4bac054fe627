"""
Latrones Game Engine.

Pure Python game logic with zero UI dependencies.
Handles placement, sliding moves, custodian captures, phase changes,
turn alternation, and win detection.
"""

from latrones.engine.base import (
    BOARD_SIZE,
    NO_SELECTION,
    SQUARE_COUNT,
    GameRules,
    NoSelection,
    Phase,
    Player,
    SelectedAt,
    Selection,
    Square,
)
from latrones.engine.board import BoardState
from latrones.engine.captures import CaptureResolver
from latrones.engine.events import EventPayload, GameEvent
from latrones.engine.moves import MoveGenerator
from latrones.engine.phases import PhaseController
from latrones.engine.selection import SelectionProtocol
from latrones.engine.state import GameState
from latrones.engine.turns import TurnManager
from latrones.engine.validators import parse_square, square_name

__all__ = [
    # Constants
    "BOARD_SIZE",
    "SQUARE_COUNT",
    "NO_SELECTION",
    # Data Classes
    "GameRules",
    "NoSelection",
    "SelectedAt",
    "Selection",
    "EventPayload",
    # Enums
    "Square",
    "Player",
    "Phase",
    "GameEvent",
    # Components
    "BoardState",
    "MoveGenerator",
    "CaptureResolver",
    "PhaseController",
    "TurnManager",
    "SelectionProtocol",
    "GameState",
    # Notation
    "square_name",
    "parse_square",
]
