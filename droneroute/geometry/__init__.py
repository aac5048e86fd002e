"""Mini README: Geometry primitives for drone route planning.

Exports the ``Position`` and ``Region`` value types, the movement constants,
and the pure predicates the planner relies on.
"""

from .positions import (
    CLOSE_THRESHOLD,
    HEADING_COUNT,
    HOVER,
    MOVE_DISTANCE,
    Position,
    Region,
)
from .service import distance, goal_is_sealed, headings, is_close, is_in_region, project

__all__ = [
    "CLOSE_THRESHOLD",
    "HEADING_COUNT",
    "HOVER",
    "MOVE_DISTANCE",
    "Position",
    "Region",
    "distance",
    "goal_is_sealed",
    "headings",
    "is_close",
    "is_in_region",
    "project",
]
