"""Mini README: Node arena used by a single route search.

Structure:
    * SearchNode - immutable record of a position reached during search.
    * SearchTree - arena addressing nodes by integer id, plus the
      ``came_from`` map linking each node to its predecessor.

A tree lives only for the duration of one ``RoutePlanner.plan`` call.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional

from ..geometry import Position


@dataclass(frozen=True, slots=True)
class SearchNode:
    """Position reached by the search and how it was reached."""

    node_id: int
    position: Position
    parent_id: Optional[int]
    heading: float
    step_count: int


class SearchTree:
    """Append-only arena of search nodes."""

    def __init__(self) -> None:
        self._nodes: List[SearchNode] = []
        self._came_from: Dict[int, Optional[int]] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def came_from(self) -> Mapping[int, Optional[int]]:
        """Read-only view of node id to predecessor id."""

        return MappingProxyType(self._came_from)

    def add(
        self,
        position: Position,
        parent_id: Optional[int],
        heading: float,
        step_count: int,
    ) -> SearchNode:
        """Create a node and record its predecessor link."""

        if parent_id is not None and parent_id not in self._came_from:
            raise KeyError(f"Unknown parent node {parent_id}")
        node = SearchNode(
            node_id=len(self._nodes),
            position=position,
            parent_id=parent_id,
            heading=heading,
            step_count=step_count,
        )
        self._nodes.append(node)
        self._came_from[node.node_id] = parent_id
        return node

    def node(self, node_id: int) -> SearchNode:
        return self._nodes[node_id]

    def lineage(self, node_id: int) -> Iterator[SearchNode]:
        """Yield the node and its ancestors, ending with the root."""

        current: Optional[int] = node_id
        while current is not None:
            yield self._nodes[current]
            current = self._came_from[current]
