"""
Player API type definitions for PodRacer.

This module defines the data structures that players interact with:
- RaceState: Everything the referee told us this turn
- PodState: One pod as seen this turn
- TurnCommand: The instruction a player returns

Snapshot types are immutable (frozen dataclasses) so a player cannot modify
the game's own pod tracking while deciding.
"""

from dataclasses import dataclass, field

from podracer.config import get_settings
from podracer.core.geometry import Checkpoint, Point, Vector

BOOST = "BOOST"  # Thrust token for the one-shot boost


@dataclass(frozen=True)
class PodState:
    """
    One pod at the start of a turn.

    Velocity is derived from the last two observed positions.
    """
    position: Point  # (x, y) position on the map
    velocity: Vector  # Displacement per turn after drag
    boost_available: bool  # Whether the boost has not been spent yet


@dataclass(frozen=True)
class RaceState:
    """
    Complete state provided to a player's on_turn() method.

    Rebuilt every turn; nothing from earlier turns is kept besides the
    velocity folded into each PodState.
    """
    player: PodState  # Our pod
    opponent: PodState  # The other pod
    next_checkpoint: Checkpoint  # Checkpoint we are heading for
    checkpoint_vector: Vector  # Direction to the checkpoint, as reported


@dataclass
class TurnCommand:
    """
    Instruction returned by a player's on_turn() method.

    thrust is either an integer literal ("0".."100") or BOOST.
    """
    target: Point = field(default_factory=Point)
    thrust: str = "0"

    @classmethod
    def with_thrust(cls, target: Point, thrust: int) -> 'TurnCommand':
        """Create a command from a numeric thrust, clamped to the legal range."""
        max_thrust = get_settings().pod.MAX_THRUST
        return cls(target=target, thrust=str(min(max_thrust, max(0, thrust))))

    @property
    def is_boost(self) -> bool:
        return self.thrust == BOOST

    def to_line(self) -> str:
        """Render the command the way the referee expects it."""
        return f"{self.target} {self.thrust}"

    def __str__(self) -> str:
        return self.to_line()
