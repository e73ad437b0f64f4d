"""
Turn loop for PodRacer.

This module reads referee turns, keeps both pods tracked, hands the player an
immutable snapshot of the race and writes back its command, until the referee
stops sending input.
"""

import logging
from typing import Optional, TextIO

from podracer.api.protocol import InputExhausted, TurnInput, TurnReader, write_command
from podracer.bot_runtime.base_bot import BasePlayer
from podracer.bot_runtime.strategies import get_strategy
from podracer.bot_runtime.types import BOOST, PodState, RaceState, TurnCommand
from podracer.config import get_settings
from podracer.core.pod import Pod

logger = logging.getLogger(__name__)


class Game:
    """
    Single player, single race game loop.

    Owns the two tracked pods for the whole session. The player never sees
    them directly, only the RaceState built from them each turn.
    """

    def __init__(self, player: Optional[BasePlayer] = None):
        """
        Initialize the game.

        Args:
            player: Strategy to race with; the configured one if omitted
        """
        self.settings = get_settings()
        self.player = player or get_strategy(self.settings.strategy.NAME)
        self.player_pod = Pod()
        self.opponent_pod = Pod()
        self.turn = 0

    def update(self, turn_input: TurnInput) -> RaceState:
        """
        Apply one turn of referee input and snapshot the result.

        Args:
            turn_input: Parsed referee input

        Returns:
            RaceState for this turn
        """
        self.player_pod.observe(turn_input.player_position())
        self.opponent_pod.observe(turn_input.opponent_position())

        state = RaceState(
            player=self._pod_state(self.player_pod),
            opponent=self._pod_state(self.opponent_pod),
            next_checkpoint=turn_input.checkpoint(),
            checkpoint_vector=turn_input.checkpoint_vector(),
        )
        logger.info(
            f"Turn {self.turn}: player {self.player_pod}, opponent {self.opponent_pod}, "
            f"checkpoint {state.next_checkpoint} ({state.checkpoint_vector})"
        )
        if state.next_checkpoint.contains(state.player.position):
            logger.debug(f"Turn {self.turn}: inside checkpoint {state.next_checkpoint}")
        return state

    def play_turn(self, turn_input: TurnInput) -> TurnCommand:
        """
        Play one turn.

        Args:
            turn_input: Parsed referee input

        Returns:
            Command to send back for this turn
        """
        self.turn += 1
        state = self.update(turn_input)
        command = self.player.on_turn(state)
        return self._settle_thrust(command)

    def play(self, reader: TurnReader, output: TextIO) -> None:
        """
        Run turns until the input ends.

        Raises:
            InputExhausted: When the referee stops sending input
        """
        while True:
            command = self.play_turn(reader.read_turn())
            write_command(output, command)

    def _settle_thrust(self, command: TurnCommand) -> TurnCommand:
        """Turn a BOOST request into what the pod can actually do."""
        if not command.is_boost or self.settings.strategy.ALWAYS_BOOST:
            return command
        thrust = self.player_pod.consume_boost()
        if thrust == BOOST:
            logger.info(f"Turn {self.turn}: boosting")
        return TurnCommand(target=command.target, thrust=thrust)

    @staticmethod
    def _pod_state(pod: Pod) -> PodState:
        return PodState(
            position=pod.location,
            velocity=pod.velocity,
            boost_available=pod.boost_available,
        )


def run(stdin: TextIO, stdout: TextIO, player: Optional[BasePlayer] = None) -> int:
    """
    Play a whole session.

    Args:
        stdin: Referee input stream
        stdout: Referee output stream
        player: Strategy override

    Returns:
        Process exit code (0, the only way a session ends)
    """
    game = Game(player)
    logger.info(f"Racing with {game.player.name}")
    try:
        game.play(TurnReader(stdin), stdout)
    except InputExhausted:
        logger.info("No more input")
    logger.info(f"Session over after {game.turn} turns")
    return 0
