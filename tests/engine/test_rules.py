"""
Tests for engine base types: squares, players, phases, rules, selection.
"""

import pytest

from latrones.engine.base import (
    NO_SELECTION,
    GameRules,
    NoSelection,
    Phase,
    Player,
    SelectedAt,
    Square,
)


class TestSquare:
    """Tests for the Square enum."""

    def test_board_encoding(self):
        """Test square values match the 0/1/2 board encoding."""
        assert int(Square.EMPTY) == 0
        assert int(Square.LIGHT) == 1
        assert int(Square.DARK) == 2

    def test_owner(self):
        assert Square.EMPTY.owner is None
        assert Square.LIGHT.owner is Player.LIGHT
        assert Square.DARK.owner is Player.DARK


class TestPlayer:
    """Tests for the Player enum."""

    def test_opponent(self):
        assert Player.LIGHT.opponent() is Player.DARK
        assert Player.DARK.opponent() is Player.LIGHT

    def test_piece(self):
        assert Player.LIGHT.piece is Square.LIGHT
        assert Player.DARK.piece is Square.DARK


class TestPhase:
    """Tests for the Phase enum."""

    def test_phase_compares_to_ui_names(self):
        """Test phases compare equal to the names the UI expects."""
        assert Phase.PLACEMENT == "placement"
        assert Phase.MOVEMENT == "movement"


class TestGameRules:
    """Tests for GameRules validation."""

    def test_defaults(self):
        """Test default rules: 8 pieces each, edge is not a wall."""
        rules = GameRules()
        assert rules.placement_quota == 8
        assert rules.edge_captures is False
        assert rules.total_pieces == 16

    @pytest.mark.parametrize("quota", [1, 12, 24])
    def test_valid_quota(self, quota):
        assert GameRules(placement_quota=quota).total_pieces == 2 * quota

    @pytest.mark.parametrize("quota", [0, -1, 25, 64])
    def test_quota_out_of_range(self, quota):
        with pytest.raises(ValueError, match="between 1 and 24"):
            GameRules(placement_quota=quota)

    @pytest.mark.parametrize("quota", [True, 8.0, "8"])
    def test_quota_must_be_integer(self, quota):
        with pytest.raises(ValueError, match="must be an integer"):
            GameRules(placement_quota=quota)

    @pytest.mark.parametrize("edge_captures", ["no", 1, None])
    def test_edge_captures_must_be_boolean(self, edge_captures):
        with pytest.raises(ValueError, match="must be a boolean"):
            GameRules(edge_captures=edge_captures)

    def test_rules_are_immutable(self):
        rules = GameRules()
        with pytest.raises(AttributeError):
            rules.placement_quota = 4  # type: ignore[misc]


class TestSelection:
    """Tests for the selection variant."""

    def test_no_selection_is_falsy(self):
        assert not NO_SELECTION
        assert isinstance(NO_SELECTION, NoSelection)

    def test_square_zero_is_a_real_selection(self):
        """Test selecting square 0 is distinguishable from no selection."""
        selection = SelectedAt(0)
        assert selection
        assert selection != NO_SELECTION
        assert selection.index == 0
