"""
Latrones - Game Engine Base Classes

This module defines the foundational enums and data structures shared by
every engine component: square contents, players, phases, the configurable
rule set, and the tagged selection variant used by the click protocol.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import ClassVar, Union


BOARD_SIZE = 8
SQUARE_COUNT = BOARD_SIZE * BOARD_SIZE


class Square(IntEnum):
    """Contents of a single board square. Values match the UI board encoding."""
    EMPTY = 0
    LIGHT = 1
    DARK = 2

    @property
    def owner(self) -> "Player | None":
        """The player whose piece occupies this square, if any."""
        if self is Square.EMPTY:
            return None
        return Player(self.value)


class Player(Enum):
    """The two sides. Light always moves first."""
    LIGHT = 1
    DARK = 2

    def opponent(self) -> "Player":
        return Player.DARK if self is Player.LIGHT else Player.LIGHT

    @property
    def piece(self) -> Square:
        """The square value representing one of this player's pieces."""
        return Square(self.value)


class Phase(str, Enum):
    """Game phases. Placement only ever advances to Movement."""
    PLACEMENT = "placement"
    MOVEMENT = "movement"


@dataclass(frozen=True)
class GameRules:
    """
    Rule parameters that the classical reconstruction leaves open.

    Attributes:
        placement_quota: Pieces each player places before Movement begins
        edge_captures: Whether the board edge counts as a flanking wall
    """
    placement_quota: int = 8
    edge_captures: bool = False

    MAX_PLACEMENT_QUOTA: ClassVar[int] = 24

    def __post_init__(self) -> None:
        """Validate rule parameters."""
        if isinstance(self.placement_quota, bool) or not isinstance(self.placement_quota, int):
            raise ValueError(
                f"Placement quota must be an integer, got {type(self.placement_quota).__name__}."
            )
        if not 1 <= self.placement_quota <= self.MAX_PLACEMENT_QUOTA:
            raise ValueError(
                f"Placement quota must be between 1 and {self.MAX_PLACEMENT_QUOTA}, "
                f"got {self.placement_quota}."
            )
        if not isinstance(self.edge_captures, bool):
            raise ValueError(
                f"Edge captures must be a boolean, got {type(self.edge_captures).__name__}."
            )

    @property
    def total_pieces(self) -> int:
        """Pieces on the board once both players have placed their full quota."""
        return 2 * self.placement_quota


@dataclass(frozen=True)
class NoSelection:
    """No piece is selected."""

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class SelectedAt:
    """A piece of the current player is selected at `index`."""
    index: int


Selection = Union[NoSelection, SelectedAt]

NO_SELECTION = NoSelection()
