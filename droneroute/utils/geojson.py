"""Mini README: GeoJSON helper utilities for droneroute.

This module converts between GeoJSON payloads and droneroute geometry:
polygons become ``Region`` objects for the planner, and flight paths become
``LineString`` features for map viewers. Keeping the logic isolated avoids
importing web framework dependencies when running unit tests.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, Optional, Union

from ..geometry import Position, Region


def region_from_geojson(area_geojson: Union[str, Dict[str, Any]], name: str = "") -> Region:
    """Validate a GeoJSON polygon (or Feature wrapping one) and return its outer ring as a Region."""

    if isinstance(area_geojson, str):
        try:
            geojson = json.loads(area_geojson)
        except json.JSONDecodeError as error:
            raise ValueError("GeoJSON payload is invalid JSON") from error
    else:
        geojson = area_geojson

    if not isinstance(geojson, dict):
        raise ValueError("GeoJSON payload must be an object")

    if geojson.get("type") == "Feature":
        geometry = geojson.get("geometry") or {}
        name = name or str((geojson.get("properties") or {}).get("name", ""))
    else:
        geometry = geojson

    if geometry.get("type") != "Polygon":
        raise ValueError("Only polygon GeoJSON payloads are supported")

    coordinates = geometry.get("coordinates")
    if not coordinates:
        raise ValueError("Polygon coordinates are required")

    outer_ring = coordinates[0]
    vertices = tuple(Position(longitude=float(point[0]), latitude=float(point[1])) for point in outer_ring)
    return Region(name=name, vertices=vertices)


def line_string_feature(
    positions: Iterable[Position], properties: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """Build a GeoJSON LineString Feature through ``positions``."""

    return {
        "type": "Feature",
        "geometry": {
            "type": "LineString",
            "coordinates": [[position.longitude, position.latitude] for position in positions],
        },
        "properties": dict(properties or {}),
    }


def feature_collection(features: Iterable[Dict[str, Any]]) -> Dict[str, Any]:
    return {"type": "FeatureCollection", "features": list(features)}
