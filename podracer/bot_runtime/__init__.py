"""
Player runtime for PodRacer.

This package provides:
- Type definitions for the player API (types.py)
- Base player class interface (base_bot.py)
- Registered racing strategies (strategies/)
"""

from podracer.bot_runtime.types import (
    BOOST,
    PodState,
    RaceState,
    TurnCommand,
)
from podracer.bot_runtime.base_bot import BasePlayer
from podracer.bot_runtime.strategies import get_strategy, get_strategy_list

__all__ = [
    # Type definitions
    "BOOST",
    "PodState",
    "RaceState",
    "TurnCommand",
    # Base classes
    "BasePlayer",
    # Strategies
    "get_strategy",
    "get_strategy_list",
]
