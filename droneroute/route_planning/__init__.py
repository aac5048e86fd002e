"""Mini README: Route planning subsystem for delivery flights.

Exports the best-first ``RoutePlanner``, the ``FlightPath`` and ``Waypoint``
records it produces, and the ``RouteCache`` used by batch delivery runs.
"""

from .cache import RouteCache
from .planner import FrontierEntry, RoutePlanner
from .reconstruction import FlightPath, PathReconstructor, Waypoint
from .search_tree import SearchNode, SearchTree

__all__ = [
    "FlightPath",
    "FrontierEntry",
    "PathReconstructor",
    "RouteCache",
    "RoutePlanner",
    "SearchNode",
    "SearchTree",
    "Waypoint",
]
