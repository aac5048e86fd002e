"""Mini README: Pure geometric predicates used by the route planner.

Structure:
    * distance - Euclidean distance in degree space.
    * is_close - goal proximity test against ``CLOSE_THRESHOLD``.
    * is_in_region - closed point-in-polygon test.
    * goal_is_sealed - detects destinations walled off by no-fly zones.
    * project - move one ``MOVE_DISTANCE`` step along a heading.
    * headings - the discrete compass headings available to the drone.

Headings are compass bearings: 0 degrees points north (increasing latitude)
and angles grow clockwise, so 90 degrees points east (increasing longitude).

Points lying exactly on a region edge or vertex are reported as inside the
region. For no-fly zones this means touching the boundary is forbidden, and
for the central area a waypoint on the boundary still counts as inside.
"""

from __future__ import annotations

import math
from typing import List, Sequence

from shapely.geometry import Point
from shapely.ops import unary_union

from .positions import (
    CLOSE_THRESHOLD,
    HEADING_COUNT,
    HOVER,
    MOVE_DISTANCE,
    Position,
    Region,
)

# Buffers are polygons inscribed in the true circle; widen them slightly so
# the reachable area is never underestimated.
_REACH_SLACK = 1.01
_AREA_TOLERANCE = (MOVE_DISTANCE ** 2) * 1e-6


def distance(a: Position, b: Position) -> float:
    """Return the straight-line distance between two positions in degrees."""

    return math.hypot(a.longitude - b.longitude, a.latitude - b.latitude)


def is_close(a: Position, b: Position) -> bool:
    """Return True when the positions are within ``CLOSE_THRESHOLD`` of each other."""

    return distance(a, b) < CLOSE_THRESHOLD


def is_in_region(point: Position, region: Region) -> bool:
    """Return True when ``point`` lies inside or on the boundary of ``region``."""

    return region.polygon.covers(Point(point.longitude, point.latitude))


def goal_is_sealed(start: Position, destination: Position, zones: Sequence[Region]) -> bool:
    """Return True when no sequence of moves from ``start`` can end close to ``destination``.

    Starting from the free space around the destination, the area from which
    a goal node could be reached is grown one move at a time through space not
    covered by ``zones``. The destination is sealed when that area stops
    growing before it reaches ``start`` or spreads beyond the zones' extent.
    The estimate errs towards reachable, so a False result only means the
    search has to find out.
    """

    if not zones:
        return False
    blocked = unary_union([zone.polygon for zone in zones])
    goal = Point(destination.longitude, destination.latitude)
    reach = goal.buffer(CLOSE_THRESHOLD * _REACH_SLACK).difference(blocked)
    if reach.is_empty:
        return True

    step = MOVE_DISTANCE * _REACH_SLACK
    extent = blocked.envelope.buffer(step)
    origin = Point(start.longitude, start.latitude)
    min_x, min_y, max_x, max_y = blocked.bounds
    rounds = math.ceil(math.hypot(max_x - min_x, max_y - min_y) / MOVE_DISTANCE) + 2
    for _ in range(rounds):
        if not extent.contains(reach):
            return False
        widened = reach.buffer(step)
        if widened.covers(origin):
            return False
        grown = widened.difference(blocked).simplify(MOVE_DISTANCE * 1e-3)
        if grown.area - reach.area <= _AREA_TOLERANCE:
            return True
        reach = grown
    return False


def project(position: Position, heading: float) -> Position:
    """Return ``position`` moved one step along the compass ``heading``."""

    if heading == HOVER:
        return position
    radians = math.radians(heading)
    return Position(
        longitude=position.longitude + MOVE_DISTANCE * math.sin(radians),
        latitude=position.latitude + MOVE_DISTANCE * math.cos(radians),
    )


def headings(count: int = HEADING_COUNT) -> List[float]:
    """Return ``count`` equally spaced headings starting at north."""

    if count <= 0:
        raise ValueError("Heading count must be positive")
    return [index * 360.0 / count for index in range(count)]
