"""Mini README: Read-only cache of planned routes.

Structure:
    * RouteCache - plans each (start, destination) pair once and hands the
      same immutable ``FlightPath`` to every later caller, together with the
      out-and-back flight assembled from it.

The planner itself keeps no state between calls; caching lives here so that
batch callers decide when to reuse a route.
"""

from __future__ import annotations

from typing import Dict, Tuple

from ..geometry import Position
from ..logging_utils import get_logger
from .planner import RoutePlanner
from .reconstruction import FlightPath

LOGGER = get_logger(__name__)

_CacheKey = Tuple[Tuple[float, float], Tuple[float, float]]


class RouteCache:
    """Memoise planned routes keyed by their end points."""

    def __init__(self) -> None:
        self._routes: Dict[_CacheKey, FlightPath] = {}
        self._round_trips: Dict[_CacheKey, FlightPath] = {}

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        start, destination = key
        return (start.key(), destination.key()) in self._routes

    def get_or_plan(
        self, start: Position, destination: Position, planner: RoutePlanner
    ) -> FlightPath:
        """Return the cached route, planning and storing it on first use."""

        key = (start.key(), destination.key())
        route = self._routes.get(key)
        if route is None:
            route = planner.plan(start, destination)
            self._routes[key] = route
            LOGGER.info(
                "Planned route %s -> %s with %s steps", start, destination, route.step_count
            )
        else:
            LOGGER.debug("Reusing cached route %s -> %s", start, destination)
        return route

    def round_trip(
        self, start: Position, destination: Position, planner: RoutePlanner
    ) -> FlightPath:
        """Return the cached flight to ``destination`` and back along the same moves."""

        key = (start.key(), destination.key())
        flight = self._round_trips.get(key)
        if flight is None:
            outbound = self.get_or_plan(start, destination, planner)
            flight = outbound.followed_by(outbound.reversed())
            self._round_trips[key] = flight
        return flight
