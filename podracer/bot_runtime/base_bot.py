"""
Base player class defining the player interface.

All strategies should inherit from BasePlayer or implement its interface.
"""

from podracer.bot_runtime.types import RaceState, TurnCommand


class BasePlayer:
    """
    Base class for all racing strategies.

    Strategies should inherit from this class and override on_turn().

    Example:
        class StraightLine(BasePlayer):
            name = "Straight Line"

            def on_turn(self, state: RaceState) -> TurnCommand:
                return TurnCommand.with_thrust(state.next_checkpoint.point, 100)
    """

    name: str = "Unnamed Player"

    def on_turn(self, state: RaceState) -> TurnCommand:
        """
        Called once per turn with a fresh snapshot of the race.

        Asking for BOOST is a request: the game spends the pod's single boost
        and falls back to maximum thrust once it is gone.

        Args:
            state: Complete race state for this turn

        Returns:
            TurnCommand with the target point and thrust
        """
        # Default: coast toward the checkpoint
        return TurnCommand(target=state.next_checkpoint.point)
