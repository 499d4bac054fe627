"""
Latrones - Game State

The single owned aggregate for one local session. The UI layer calls the
three mutating operations (`select_square`, `set_starting_pieces`, `reset`)
and polls the read accessors; it never writes to the fields directly.
"""

from __future__ import annotations

from latrones.engine.base import (
    NO_SELECTION,
    GameRules,
    Phase,
    Player,
    SelectedAt,
    Selection,
)
from latrones.engine.board import BoardState
from latrones.engine.events import EventPayload
from latrones.engine.moves import MoveGenerator
from latrones.engine.selection import SelectionProtocol


class GameState:
    """
    Mutable state of one game of Latrones.

    Construction is equivalent to `reset()`.

    Attributes:
        rules: Rule parameters fixed for the lifetime of this state
        board: The 64-square grid
        current_player: Player whose action is awaited
        phase: Placement or Movement
        selection: NoSelection or SelectedAt(index)
        remaining_placements_by_player: Pieces each player must still place
        game_over: Set once a player wins; cleared only by reset()
        winner: The winning player once game_over is set
        last_events: Events produced by the most recent accepted call
    """

    def __init__(self, rules: GameRules | None = None) -> None:
        self.rules = rules if rules is not None else GameRules()
        self.board = BoardState()
        self.current_player = Player.LIGHT
        self.phase = Phase.PLACEMENT
        self.selection: Selection = NO_SELECTION
        self.remaining_placements_by_player: dict[Player, int] = {}
        self.game_over = False
        self.winner: Player | None = None
        self.last_events: tuple[EventPayload, ...] = ()
        self.reset()

    # Mutating operations

    def select_square(self, index: int) -> bool:
        return SelectionProtocol.select_square(self, index)

    def set_starting_pieces(self) -> None:
        SelectionProtocol.set_starting_pieces(self)

    def reset(self) -> None:
        SelectionProtocol.reset(self)

    # Read accessors

    def get_board(self) -> list[int]:
        """Board as 64 integers (0=Empty, 1=Light, 2=Dark), row-major."""
        return self.board.to_list()

    def get_valid_moves(self) -> frozenset[int]:
        """Placement targets, selectable pieces, or the selected piece's destinations."""
        return MoveGenerator.valid_moves(self)

    @property
    def selected_square(self) -> int | None:
        if isinstance(self.selection, SelectedAt):
            return self.selection.index
        return None

    def piece_count(self, player: Player) -> int:
        return self.board.count(player.piece)

    def remaining_placements(self, player: Player) -> int:
        return self.remaining_placements_by_player[player]

    def __str__(self) -> str:
        status = f"{self.phase.value}, {self.current_player.name} to act"
        if self.game_over and self.winner is not None:
            status = f"game over, {self.winner.name} wins"
        return f"{self.board}\n{status}"
