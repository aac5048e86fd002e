"""Mini README: Heading-constrained best-first route planner.

Structure:
    * FrontierEntry - heap entry ranking a node by estimated total cost.
    * SearchFrontier - priority queue that counts only entries still worth
      expanding.
    * RoutePlanner - plans a path between two positions around no-fly zones.

The drone moves in ``MOVE_DISTANCE`` steps along one of ``HEADING_COUNT``
compass headings. The planner ranks nodes by ``f = g + h`` where ``g`` is the
distance flown so far and ``h`` the straight-line distance to the
destination. With discrete headings ``h`` is not guaranteed admissible, so the
returned path is good rather than optimal.

Two rules shape the search beyond plain A*:
    * Central area: once a node is inside the central area, successors that
      leave it are discarded. Nodes outside are free to enter it.
    * Frontier throttle: when adding every successor of an expansion would
      grow the live frontier past ``HEADING_COUNT`` entries, only the best
      successor is kept. Removing this changes both runtime and the path.

Destinations walled off by no-fly zones are rejected before searching, since
the search would otherwise circle the walls until its budget runs out.
"""

from __future__ import annotations

import heapq
import itertools
from collections import Counter
from typing import Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple

from ..configuration import get_settings
from ..exceptions import InvalidRegion, NoRouteFound, SearchBudgetExceeded
from ..geometry import (
    HEADING_COUNT,
    HOVER,
    MOVE_DISTANCE,
    Position,
    Region,
    distance,
    goal_is_sealed,
    headings,
    is_close,
    is_in_region,
    project,
)
from ..logging_utils import get_logger
from .reconstruction import FlightPath, PathReconstructor
from .search_tree import SearchNode, SearchTree

LOGGER = get_logger(__name__)

PositionKey = Tuple[float, float]


class FrontierEntry(NamedTuple):
    """Frontier heap entry; tuple ordering gives the deterministic tie-break."""

    f_score: float
    heading_index: int
    sequence: int
    node_id: int


class SearchFrontier:
    """Min-heap of ``FrontierEntry`` items keyed by position.

    Several entries may reach the same position. Once one of them is popped
    the others are stale: they stay in the heap but no longer count towards
    ``len()`` and are skipped by ``pop()``.
    """

    def __init__(self) -> None:
        self._heap: List[FrontierEntry] = []
        self._keys: Dict[int, PositionKey] = {}
        self._pending: Counter = Counter()
        self._sequence = itertools.count()
        self._live = 0

    def __len__(self) -> int:
        return self._live

    def push(self, f_score: float, heading_index: int, node_id: int, key: PositionKey) -> None:
        heapq.heappush(
            self._heap, FrontierEntry(f_score, heading_index, next(self._sequence), node_id)
        )
        self._keys[node_id] = key
        self._pending[key] += 1
        self._live += 1

    def pop(self) -> Optional[FrontierEntry]:
        """Return the best live entry and retire every entry for its position."""

        while self._heap:
            entry = heapq.heappop(self._heap)
            key = self._keys.pop(entry.node_id)
            if key not in self._pending:
                continue
            self._live -= self._pending.pop(key)
            return entry
        return None


class _Candidate(NamedTuple):
    f_score: float
    heading_index: int
    heading: float
    position: Position


class RoutePlanner:
    """Plan drone routes that avoid no-fly zones and respect the central area."""

    def __init__(
        self,
        central_area: Optional[Region] = None,
        no_fly_zones: Iterable[Region] = (),
        *,
        heading_count: int = HEADING_COUNT,
        max_expansions: Optional[int] = None,
    ) -> None:
        self.central_area = _require_region(central_area) if central_area is not None else None
        self.no_fly_zones: Tuple[Region, ...] = tuple(_require_region(zone) for zone in no_fly_zones)
        self.headings: Sequence[float] = tuple(headings(heading_count))
        self.frontier_limit = heading_count
        if max_expansions is None:
            max_expansions = get_settings().max_expansions
        if max_expansions <= 0:
            raise ValueError("max_expansions must be positive")
        self.max_expansions = max_expansions
        self._reconstructor = PathReconstructor()
        LOGGER.debug(
            "Initialised RoutePlanner with central_area=%s no_fly_zones=%s max_expansions=%s",
            self.central_area.name if self.central_area else None,
            [zone.name for zone in self.no_fly_zones],
            max_expansions,
        )

    def plan(self, start: Position, destination: Position) -> FlightPath:
        """Return a path from ``start`` to a hover within reach of ``destination``.

        Raises ``NoRouteFound`` when the destination is walled off or every
        reachable node has been expanded, and ``SearchBudgetExceeded`` when the
        expansion limit is hit first.
        """

        tree = SearchTree()
        root = tree.add(start, None, HOVER, 0)
        if is_close(start, destination):
            LOGGER.debug("Start %s already close to destination %s", start, destination)
            return self._finish(tree, root, expansions=0)
        if goal_is_sealed(start, destination, self.no_fly_zones):
            LOGGER.debug("Destination %s is enclosed by no-fly zones", destination)
            raise NoRouteFound(f"Destination {destination} is enclosed by no-fly zones")

        frontier = SearchFrontier()
        visited: Dict[PositionKey, int] = {start.key(): root.node_id}

        for candidate in self._candidates(root, destination, visited):
            self._push(frontier, tree, root, candidate)
        expansions = 1

        while frontier:
            entry = frontier.pop()
            current = tree.node(entry.node_id)
            visited[current.position.key()] = current.node_id

            if is_close(current.position, destination):
                LOGGER.debug(
                    "Route to %s found after %s expansions (%s steps)",
                    destination,
                    expansions,
                    current.step_count,
                )
                return self._finish(tree, current, expansions=expansions)

            if expansions >= self.max_expansions:
                LOGGER.debug("Expansion budget of %s exhausted", self.max_expansions)
                raise SearchBudgetExceeded(expansions, self.max_expansions)
            expansions += 1

            candidates = self._candidates(current, destination, visited)
            if candidates and len(frontier) + len(candidates) > self.frontier_limit:
                candidates = [min(candidates)]
            for candidate in candidates:
                self._push(frontier, tree, current, candidate)

        LOGGER.debug("Frontier exhausted after %s expansions", expansions)
        raise NoRouteFound(f"No route from {start} to {destination}")

    def _candidates(
        self,
        node: SearchNode,
        destination: Position,
        visited: Dict[PositionKey, int],
    ) -> List[_Candidate]:
        """Return the successors of ``node`` that pass every flight rule."""

        inside_central = self.central_area is not None and is_in_region(
            node.position, self.central_area
        )
        g_score = (node.step_count + 1) * MOVE_DISTANCE
        candidates: List[_Candidate] = []
        for heading_index, heading in enumerate(self.headings):
            position = project(node.position, heading)
            if position.key() in visited:
                continue
            if inside_central and not is_in_region(position, self.central_area):
                continue
            if any(is_in_region(position, zone) for zone in self.no_fly_zones):
                continue
            f_score = g_score + distance(position, destination)
            candidates.append(_Candidate(f_score, heading_index, heading, position))
        return candidates

    @staticmethod
    def _push(
        frontier: SearchFrontier,
        tree: SearchTree,
        parent: SearchNode,
        candidate: _Candidate,
    ) -> None:
        node = tree.add(candidate.position, parent.node_id, candidate.heading, parent.step_count + 1)
        frontier.push(candidate.f_score, candidate.heading_index, node.node_id, candidate.position.key())

    def _finish(self, tree: SearchTree, goal: SearchNode, *, expansions: int) -> FlightPath:
        waypoints = self._reconstructor.reconstruct(tree, goal.node_id)
        return FlightPath(
            waypoints=waypoints,
            expansions=expansions,
            description=f"Route to ({goal.position.longitude:.6f}, {goal.position.latitude:.6f})",
        )


def _require_region(region: object) -> Region:
    if not isinstance(region, Region):
        raise InvalidRegion(f"Expected a Region, got {type(region).__name__}")
    return region
