"""Mini README: Convert a finished search into an ordered flight path.

Structure:
    * Waypoint - one move of the drone (from, to, heading, step index).
    * FlightPath - immutable sequence of waypoints ending in a hover.
    * PathReconstructor - walks ``came_from`` links back from the goal.

Flight paths are shared between orders by the route cache, so they are
frozen and every transformation returns a new path.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..geometry import HOVER, MOVE_DISTANCE, Position
from .search_tree import SearchNode, SearchTree


@dataclass(frozen=True, slots=True)
class Waypoint:
    """Single drone move; hover moves keep the drone in place."""

    previous_position: Position
    current_position: Position
    heading: float
    step_index: int

    @property
    def is_hover(self) -> bool:
        return self.heading == HOVER

    def as_record(self, order_no: str) -> Dict[str, object]:
        """Flat move-log record used by the flightpath writer."""

        return {
            "orderNo": order_no,
            "fromLongitude": self.previous_position.longitude,
            "fromLatitude": self.previous_position.latitude,
            "angle": self.heading,
            "toLongitude": self.current_position.longitude,
            "toLatitude": self.current_position.latitude,
        }


def _reverse_heading(heading: float) -> float:
    if heading == HOVER:
        return HOVER
    return (heading + 180.0) % 360.0


@dataclass(frozen=True, slots=True)
class FlightPath:
    """Ordered moves from a start position to a hover near the destination."""

    waypoints: Tuple[Waypoint, ...]
    expansions: int = 0
    description: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "waypoints", tuple(self.waypoints))
        if not self.waypoints:
            raise ValueError("A flight path needs at least one waypoint")

    @property
    def step_count(self) -> int:
        return self.waypoints[-1].step_index

    @property
    def start(self) -> Position:
        return self.waypoints[0].previous_position

    @property
    def end(self) -> Position:
        return self.waypoints[-1].current_position

    @property
    def cost(self) -> float:
        """Distance flown, excluding hover moves."""

        return sum(MOVE_DISTANCE for waypoint in self.waypoints if not waypoint.is_hover)

    def positions(self) -> List[Position]:
        """Current position after each move, in travel order."""

        return [waypoint.current_position for waypoint in self.waypoints]

    def reversed(self) -> "FlightPath":
        """Return the return leg: the same moves flown backwards, then a hover."""

        moves = [waypoint for waypoint in self.waypoints if not waypoint.is_hover]
        reversed_moves = [
            Waypoint(
                previous_position=waypoint.current_position,
                current_position=waypoint.previous_position,
                heading=_reverse_heading(waypoint.heading),
                step_index=index,
            )
            for index, waypoint in enumerate(reversed(moves), start=1)
        ]
        final_position = reversed_moves[-1].current_position if reversed_moves else self.end
        hover = Waypoint(
            previous_position=final_position,
            current_position=final_position,
            heading=HOVER,
            step_index=len(reversed_moves) + 1,
        )
        return FlightPath(
            waypoints=tuple(reversed_moves) + (hover,),
            expansions=self.expansions,
            description=f"Reverse of {self.description}".strip(),
        )

    def followed_by(self, other: "FlightPath") -> "FlightPath":
        """Concatenate another leg, renumbering its steps after this one."""

        offset = self.step_count
        shifted = tuple(
            Waypoint(
                previous_position=waypoint.previous_position,
                current_position=waypoint.current_position,
                heading=waypoint.heading,
                step_index=waypoint.step_index + offset,
            )
            for waypoint in other.waypoints
        )
        return FlightPath(
            waypoints=self.waypoints + shifted,
            expansions=self.expansions + other.expansions,
            description=self.description,
        )

    def as_records(self, order_no: str) -> List[Dict[str, object]]:
        return [waypoint.as_record(order_no) for waypoint in self.waypoints]


class PathReconstructor:
    """Turn the goal node of a search into travel-ordered waypoints."""

    def reconstruct(self, tree: SearchTree, goal_id: int) -> Tuple[Waypoint, ...]:
        goal = tree.node(goal_id)
        terminal = SearchNode(
            node_id=len(tree),
            position=goal.position,
            parent_id=goal.node_id,
            heading=HOVER,
            step_count=goal.step_count + 1,
        )
        chain = list(tree.lineage(goal_id))
        chain.reverse()
        chain.append(terminal)
        return tuple(
            Waypoint(
                previous_position=previous.position,
                current_position=current.position,
                heading=current.heading,
                step_index=current.step_count,
            )
            for previous, current in zip(chain, chain[1:])
        )
