"""
Latrones - Game Session

Owns the one GameState of a local session: construct, operate, discard.
The UI talks to the session instead of holding a global game instance.
"""

import logging

from latrones.config.settings import Settings, configure_logging, get_settings
from latrones.engine.events import EventPayload
from latrones.engine.state import GameState
from latrones.session.models import GameSnapshot

logger = logging.getLogger(__name__)


class GameSession:
    """A single local game, built from application settings."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.state = GameState(self.settings.game_rules())
        logger.info(
            "Session started (quota=%d, edge_captures=%s)",
            self.settings.placement_quota,
            self.settings.edge_captures,
        )

    def select_square(self, index: int) -> bool:
        return self.state.select_square(index)

    def set_starting_pieces(self) -> None:
        self.state.set_starting_pieces()

    def reset(self) -> None:
        self.state.reset()

    @property
    def last_events(self) -> tuple[EventPayload, ...]:
        return self.state.last_events

    def snapshot(self) -> GameSnapshot:
        """Everything the UI needs to redraw."""
        return GameSnapshot.from_state(self.state)


def create_session(settings: Settings | None = None) -> GameSession:
    """Configure logging and start a new session."""
    settings = settings or get_settings()
    configure_logging(settings)
    return GameSession(settings)
