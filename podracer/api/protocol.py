"""
Referee protocol for PodRacer.

The referee writes whitespace separated tokens on stdin, one turn after the
other, and expects one "<x> <y> <thrust>" line per turn on stdout.
"""

import logging
import re
from typing import Iterator, List, Optional, TextIO

from pydantic import BaseModel, Field, field_validator

from podracer.bot_runtime.types import TurnCommand
from podracer.core.geometry import Checkpoint, Point, Vector

logger = logging.getLogger(__name__)

TOKENS_PER_TURN = 8

# Optional sign and decimal digits only, no fractions or separators
INTEGER_TOKEN = re.compile(r"[-+]?[0-9]+")


class InputExhausted(Exception):
    """Raised when the referee input ends, including in the middle of a turn."""
    pass


class TurnInput(BaseModel):
    """One turn of referee input, in the order it is sent."""
    player_x: int = Field(..., description="Our pod X")
    player_y: int = Field(..., description="Our pod Y")
    checkpoint_x: int = Field(..., description="Next checkpoint X")
    checkpoint_y: int = Field(..., description="Next checkpoint Y")
    checkpoint_magnitude: float = Field(..., allow_inf_nan=False, description="Distance to the next checkpoint")
    checkpoint_angle: float = Field(..., allow_inf_nan=False, description="Direction to the next checkpoint (degrees)")
    opponent_x: int = Field(..., description="Opponent pod X")
    opponent_y: int = Field(..., description="Opponent pod Y")

    @field_validator(
        "player_x", "player_y", "checkpoint_x", "checkpoint_y", "opponent_x", "opponent_y",
        mode="before",
    )
    @classmethod
    def integer_token(cls, value):
        """Positions must be plain integer literals."""
        if isinstance(value, str) and not INTEGER_TOKEN.fullmatch(value):
            raise ValueError(f"'{value}' is not an integer")
        return value

    @classmethod
    def from_tokens(cls, tokens: List[str]) -> 'TurnInput':
        """
        Build a turn from raw tokens.

        Raises:
            pydantic.ValidationError: If a token has the wrong type
        """
        return cls.model_validate(dict(zip(cls.model_fields, tokens)))

    def player_position(self) -> Point:
        return Point(self.player_x, self.player_y)

    def checkpoint(self) -> Checkpoint:
        return Checkpoint(Point(self.checkpoint_x, self.checkpoint_y))

    def checkpoint_vector(self) -> Vector:
        return Vector.from_polar(self.checkpoint_magnitude, self.checkpoint_angle)

    def opponent_position(self) -> Point:
        return Point(self.opponent_x, self.opponent_y)


class TurnReader:
    """
    Reads referee turns from a text stream.

    Tokens may be spread over lines in any way; only their order matters.
    """

    def __init__(self, stream: TextIO):
        self.stream = stream
        self._tokens: Iterator[str] = self._iter_tokens()

    def _iter_tokens(self) -> Iterator[str]:
        for line in self.stream:
            yield from line.split()

    def next_token(self) -> str:
        """
        Get the next token.

        Raises:
            InputExhausted: If the stream has ended
        """
        token: Optional[str] = next(self._tokens, None)
        if token is None:
            raise InputExhausted("No more input")
        return token

    def read_turn(self) -> TurnInput:
        """
        Read one full turn.

        Raises:
            InputExhausted: If the stream ends before the turn is complete
            pydantic.ValidationError: If a token is malformed
        """
        tokens = [self.next_token() for _ in range(TOKENS_PER_TURN)]
        return TurnInput.from_tokens(tokens)


def write_command(stream: TextIO, command: TurnCommand) -> None:
    """Write one command line and flush it so the referee sees it this turn."""
    line = command.to_line()
    logger.debug(f"Sending '{line}'")
    stream.write(line + "\n")
    stream.flush()
