"""
Latrones Session Layer.

Session lifecycle and the snapshot model consumed by the UI.
"""

from latrones.session.manager import GameSession, create_session
from latrones.session.models import GameSnapshot

__all__ = ["GameSession", "GameSnapshot", "create_session"]
