"""Mini README: Value types and constants for drone geometry.

Structure:
    * MOVE_DISTANCE, CLOSE_THRESHOLD, HEADING_COUNT, HOVER - movement constants.
    * Position - immutable (longitude, latitude) pair with tolerant equality.
    * Region - named simple polygon backed by a shapely ``Polygon``.

Coordinates are plain degrees and every calculation treats them as a flat
plane, which is accurate enough for the few square kilometres a delivery
drone covers. Shapely uses the same (x=longitude, y=latitude) order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Tuple

import shapely
from shapely.geometry import Polygon
from shapely.validation import explain_validity

from ..exceptions import InvalidRegion

MOVE_DISTANCE = 0.00015
CLOSE_THRESHOLD = 0.00015
HEADING_COUNT = 16
HOVER = 999.0

# Positions agreeing to 1e-12 degrees are the same position.
KEY_DIGITS = 12


@dataclass(frozen=True, slots=True, eq=False)
class Position:
    """A longitude/latitude pair in degrees.

    Two positions are equal when their coordinates round to the same
    ``KEY_DIGITS`` decimals, so equality and hashing both go through
    ``key()`` and positions reached along different paths still collapse
    into one dictionary entry.
    """

    longitude: float
    latitude: float

    def key(self) -> Tuple[float, float]:
        """Rounded coordinates used for equality, hashing and visited lookups."""

        return (round(self.longitude, KEY_DIGITS), round(self.latitude, KEY_DIGITS))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self) -> int:
        return hash(self.key())

    def as_dict(self) -> Dict[str, float]:
        return {"lng": self.longitude, "lat": self.latitude}

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Position":
        """Build a position from the ``{"lng": ..., "lat": ...}`` REST shape."""

        try:
            return cls(longitude=float(payload["lng"]), latitude=float(payload["lat"]))
        except (KeyError, TypeError, ValueError) as error:
            raise ValueError(f"Invalid position payload: {payload!r}") from error


@dataclass(frozen=True, slots=True)
class Region:
    """Named simple polygon; the last vertex implicitly joins the first."""

    name: str
    vertices: Tuple[Position, ...]
    polygon: Polygon = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        vertices = tuple(self.vertices)
        # The REST service repeats the first vertex to close the ring.
        if len(vertices) > 1 and vertices[-1] == vertices[0]:
            vertices = vertices[:-1]
        object.__setattr__(self, "vertices", vertices)
        if len(vertices) < 3:
            raise InvalidRegion(
                f"Region '{self.name}' needs at least 3 vertices, got {len(vertices)}"
            )
        polygon = Polygon([(vertex.longitude, vertex.latitude) for vertex in vertices])
        if not polygon.is_valid:
            raise InvalidRegion(
                f"Region '{self.name}' is not a simple polygon: {explain_validity(polygon)}"
            )
        # Containment is queried for every candidate move.
        shapely.prepare(polygon)
        object.__setattr__(self, "polygon", polygon)

    def rotated(self, offset: int) -> "Region":
        """Return the same polygon with its vertex list cyclically shifted."""

        offset %= len(self.vertices)
        return Region(self.name, self.vertices[offset:] + self.vertices[:offset])

    def as_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "vertices": [vertex.as_dict() for vertex in self.vertices]}

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Region":
        """Build a region from the ``{"name": ..., "vertices": [...]}`` REST shape."""

        vertices = payload.get("vertices")
        if not isinstance(vertices, list):
            raise InvalidRegion(f"Region payload has no vertex list: {payload!r}")
        return cls(
            name=str(payload.get("name", "")),
            vertices=tuple(Position.from_dict(vertex) for vertex in vertices),
        )
