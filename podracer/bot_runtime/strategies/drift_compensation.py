"""
Drift Compensation - aim off the checkpoint to cancel our own drift.

Pods keep most of their speed between turns, so steering straight at a
checkpoint overshoots it. This strategy aims at the checkpoint minus a few
turns of current drift so the drift carries the pod onto the checkpoint.
"""

from podracer.bot_runtime.base_bot import BasePlayer
from podracer.bot_runtime.types import BOOST, RaceState, TurnCommand
from podracer.config import get_settings


class DriftCompensation(BasePlayer):
    """
    Strategy:
    1. Project our velocity a few turns ahead
    2. Aim at the checkpoint shifted back by that projection
    3. Always ask for BOOST (the game spends it once, then uses max thrust)
    """

    name = "Drift Compensation"

    def __init__(self, projection: float = None):
        self.projection = projection if projection is not None else get_settings().strategy.VELOCITY_PROJECTION

    def on_turn(self, state: RaceState) -> TurnCommand:
        return TurnCommand(target=self.target(state), thrust=BOOST)

    def target(self, state: RaceState):
        """Point to steer at this turn."""
        return state.next_checkpoint - self.projected_velocity(state)

    def projected_velocity(self, state: RaceState):
        """Drift accumulated over the projection window."""
        return state.player.velocity.to_point() * self.projection
