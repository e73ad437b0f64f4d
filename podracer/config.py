"""
PodRacer Configuration

This file contains all configurable settings for the racing agent.
Modify these values to tune the agent's behaviour.
"""

from dataclasses import dataclass
import os

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class PodConfig:
    """Pod physics constants, as enforced by the race referee."""
    RADIUS: int = 400  # Collision radius (units), unused by the current strategy
    DRAG_FACTOR: float = 0.85  # Fraction of speed kept between turns
    MAX_THRUST: int = 100  # Highest numeric thrust accepted by the referee


@dataclass
class CheckpointConfig:
    """Checkpoint constants."""
    RADIUS: int = 600  # Capture radius (units)


@dataclass
class StrategyConfig:
    """Decision rule settings."""
    NAME: str = "drift_compensation"  # Registered strategy to play with
    VELOCITY_PROJECTION: float = 3.0  # Turns of drift to compensate for
    # Request BOOST every turn instead of spending it once.
    # Only useful to replay the original bot turn for turn.
    ALWAYS_BOOST: bool = False


@dataclass
class Settings:
    """Main settings container."""
    pod: PodConfig = None
    checkpoint: CheckpointConfig = None
    strategy: StrategyConfig = None

    # Application info
    APP_NAME: str = "PodRacer"
    VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    def __post_init__(self):
        self.pod = self.pod or PodConfig()
        self.checkpoint = self.checkpoint or CheckpointConfig()
        self.strategy = self.strategy or StrategyConfig()
        self.LOG_LEVEL = os.environ.get("PODRACER_LOG_LEVEL", self.LOG_LEVEL).upper()
        if self.LOG_LEVEL not in LOG_LEVELS:
            self.LOG_LEVEL = "INFO"
        if self.DEBUG:
            self.LOG_LEVEL = "DEBUG"


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings
