"""
Latrones - Application Settings

Loads configuration from environment variables using Pydantic Settings.
Every variable is prefixed with LATRONES_, e.g. LATRONES_PLACEMENT_QUOTA=10.
"""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from latrones.engine.base import GameRules


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Rules
    placement_quota: int = Field(default=8, ge=1, le=GameRules.MAX_PLACEMENT_QUOTA)
    edge_captures: bool = False

    # Application
    debug: bool = False
    log_level: str = "INFO"

    model_config = {
        "env_prefix": "LATRONES_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def game_rules(self) -> GameRules:
        """Engine rule set described by these settings."""
        return GameRules(
            placement_quota=self.placement_quota,
            edge_captures=self.edge_captures,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured log level to the root logger."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level)
