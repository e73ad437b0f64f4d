"""
Racing strategies for PodRacer.

Each strategy is a BasePlayer subclass registered here by id so the game can
pick one from configuration.
"""

from podracer.bot_runtime.strategies.drift_compensation import DriftCompensation

# Strategy metadata
STRATEGIES = [
    {
        "id": "drift_compensation",
        "name": "Drift Compensation",
        "description": "Aims at the next checkpoint minus three turns of drift and boosts on the first turn.",
        "class": DriftCompensation,
    },
]


def get_strategy_list():
    """
    Get list of available strategies.

    Returns:
        list: Strategy metadata dictionaries
    """
    return STRATEGIES


def get_strategy(strategy_id: str):
    """
    Create a player for a registered strategy.

    Args:
        strategy_id: Strategy identifier (e.g., "drift_compensation")

    Returns:
        BasePlayer: New player instance

    Raises:
        ValueError: If strategy_id is not found
    """
    strategy = next((s for s in STRATEGIES if s["id"] == strategy_id), None)
    if not strategy:
        raise ValueError(f"Strategy '{strategy_id}' not found")
    return strategy["class"]()
