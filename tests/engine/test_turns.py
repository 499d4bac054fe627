"""
Tests for TurnManager: termination checks and turn alternation.
"""

from latrones.engine.base import Phase, Player, Square
from latrones.engine.events import GameEvent
from latrones.engine.turns import TurnManager


class TestWinReason:
    """Tests for termination detection."""

    def test_play_continues(self, started_game):
        assert TurnManager.win_reason(started_game, Player.LIGHT) is None

    def test_elimination(self, position):
        state = position(light=[0, 63])
        assert TurnManager.win_reason(state, Player.LIGHT) == "eliminated"

    def test_immobilization(self, position):
        state = position(light=[1, 8, 63], dark=[0])
        assert TurnManager.win_reason(state, Player.LIGHT) == "immobilized"

    def test_mover_being_stuck_does_not_matter(self, position):
        """Test only the non-mover's mobility is checked."""
        state = position(light=[0], dark=[1, 8])
        assert TurnManager.win_reason(state, Player.LIGHT) is None

    def test_no_elimination_during_placement(self, game):
        """Test Dark having no pieces yet after Light's first placement is not a loss."""
        game.board.write(0, Square.LIGHT)
        assert TurnManager.win_reason(game, Player.LIGHT) is None

    def test_full_board_during_placement(self, game):
        for index in range(64):
            game.board.write(index, Square.LIGHT if index % 2 else Square.DARK)
        assert game.phase is Phase.PLACEMENT
        assert TurnManager.win_reason(game, Player.LIGHT) == "immobilized"


class TestFinishAction:
    """Tests for the post-action step."""

    def test_alternates_player(self, started_game):
        payload = TurnManager.finish_action(started_game, Player.LIGHT)
        assert payload.event is GameEvent.TURN_ADVANCED
        assert payload.player is Player.DARK
        assert started_game.current_player is Player.DARK
        assert not started_game.game_over

    def test_win_keeps_current_player(self, position):
        state = position(light=[1, 8, 63], dark=[0])
        payload = TurnManager.finish_action(state, Player.LIGHT)
        assert payload.event is GameEvent.GAME_WON
        assert payload.data == {"reason": "immobilized"}
        assert state.game_over
        assert state.winner is Player.LIGHT
        assert state.current_player is Player.LIGHT
