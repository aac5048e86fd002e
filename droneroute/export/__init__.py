"""Mini README: Export helpers for delivery results.

Exposes ``OutputWriter`` which writes the deliveries, flightpath and GeoJSON
files for a delivery day.
"""

from .writers import OutputWriter

__all__ = ["OutputWriter"]
