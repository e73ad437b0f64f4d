#!/usr/bin/env python3
"""
Walk the drift compensation strategy through a short straight-line race.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from podracer.api.protocol import TurnInput
from podracer.core.game import Game


# Our pod accelerates along the X axis toward a checkpoint at (4000, 0)
POSITIONS = [(0, 0), (100, 0), (285, 0), (540, 0), (850, 0)]
CHECKPOINT = (4000, 0)
OPPONENT = (5000, 5000)


def main():
    game = Game()
    print(f"\n{'='*70}")
    print(f"Strategy: {game.player.name}")
    print(f"{'='*70}")

    for x, y in POSITIONS:
        distance = float(CHECKPOINT[0] - x)
        turn = TurnInput.from_tokens([
            str(x), str(y),
            str(CHECKPOINT[0]), str(CHECKPOINT[1]),
            str(distance), "0",
            str(OPPONENT[0]), str(OPPONENT[1]),
        ])
        command = game.play_turn(turn)
        print(f"Turn {game.turn}: pod {game.player_pod} -> '{command.to_line()}'")


if __name__ == "__main__":
    main()
