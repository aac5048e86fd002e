"""Mini README: Utility helper functions for droneroute.

Currently exports the GeoJSON conversion helpers shared by the writers and
the web interface.
"""

from .geojson import feature_collection, line_string_feature, region_from_geojson

__all__ = ["feature_collection", "line_string_feature", "region_from_geojson"]
