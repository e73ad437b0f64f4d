"""
Pod model for PodRacer.

The referee only reports positions, so a pod derives its own velocity from
the distance travelled since the previous turn, scaled by the drag factor.
"""

from typing import ClassVar, Optional

from podracer.config import get_settings
from podracer.bot_runtime.types import BOOST
from podracer.core.geometry import Point, Vector

_pod_config = get_settings().pod


class Pod:
    """
    A racer tracked across turns.

    A pod starts unseen (no position). The first observation places it with
    zero velocity; every later one derives velocity from the displacement.
    The boost can be spent once for the lifetime of the pod.
    """

    RADIUS: ClassVar[int] = _pod_config.RADIUS
    DRAG_FACTOR: ClassVar[float] = _pod_config.DRAG_FACTOR
    MAX_THRUST: ClassVar[int] = _pod_config.MAX_THRUST

    def __init__(self, position: Optional[Point] = None):
        self.position: Optional[Point] = position
        self.velocity: Vector = Vector()
        self.boost_available: bool = True

    @property
    def is_tracked(self) -> bool:
        """Whether the pod has been observed at least once."""
        return self.position is not None

    @property
    def location(self) -> Point:
        """Current position, or the origin while the pod is unseen."""
        return self.position if self.position is not None else Point()

    def observe(self, new_position: Point) -> 'Pod':
        """
        Record the position reported for this turn.

        Args:
            new_position: Position read from the referee

        Returns:
            self, for chaining
        """
        old_position = self.position if self.position is not None else new_position
        self.velocity = Vector((new_position - old_position) * self.DRAG_FACTOR)
        self.position = new_position
        return self

    def consume_boost(self) -> str:
        """
        Spend the boost if it is still available.

        Returns:
            "BOOST" the first time, the maximum thrust afterwards
        """
        if self.boost_available:
            action = BOOST
        else:
            action = str(self.MAX_THRUST)
        self.boost_available = False
        return action

    def __str__(self) -> str:
        return f"at {self.position} heading {self.velocity}"
