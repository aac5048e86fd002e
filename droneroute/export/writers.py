"""Mini README: Persist the results of a delivery day to disk.

Structure:
    * OutputWriter - writes the deliveries summary, the per-move flightpath
      log and a GeoJSON view of every flight.

Files are named after the delivery day (``deliveries-YYYY-MM-DD.json``,
``flightpath-YYYY-MM-DD.json`` and ``drone-YYYY-MM-DD.geojson``). The writer
only depends on the ``Waypoint`` record shape, not on how routes were planned.
"""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

from ..configuration import get_settings
from ..logging_utils import get_logger
from ..orders import Order
from ..route_planning import FlightPath
from ..utils.geojson import feature_collection, line_string_feature

LOGGER = get_logger(__name__)


class OutputWriter:
    """Write delivery artefacts into the configured output directory."""

    def __init__(self, output_directory: Optional[Path] = None) -> None:
        self.output_directory = Path(output_directory or get_settings().output_directory)
        self.output_directory.mkdir(parents=True, exist_ok=True)
        LOGGER.debug("Output directory set to %s", self.output_directory)

    def _write_json(self, filename: str, payload: Any) -> Path:
        destination = self.output_directory / filename
        with destination.open("w", encoding="utf-8") as output_file:
            json.dump(payload, output_file, indent=2)
        LOGGER.info("File created: %s", destination)
        return destination

    def write_deliveries(self, day: date, orders: Iterable[Order]) -> Path:
        """Write the status, validation code and cost of every order."""

        records = [order.as_delivery_record() for order in orders]
        return self._write_json(f"deliveries-{day.isoformat()}.json", records)

    def write_flightpath(self, day: date, flights: Mapping[str, FlightPath]) -> Path:
        """Write one record per drone move, tagged with its order number."""

        records = [
            record
            for order_no, flight in flights.items()
            for record in flight.as_records(order_no)
        ]
        return self._write_json(f"flightpath-{day.isoformat()}.json", records)

    def write_geojson(self, day: date, flights: Mapping[str, FlightPath]) -> Path:
        """Write each flight as a LineString feature through its positions."""

        features = [
            line_string_feature(flight.positions(), {"orderNo": order_no})
            for order_no, flight in flights.items()
        ]
        return self._write_json(f"drone-{day.isoformat()}.geojson", feature_collection(features))
