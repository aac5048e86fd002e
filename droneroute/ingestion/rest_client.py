"""Mini README: Client for the restaurant, order and region REST service.

Structure:
    * RestClient - thin wrapper around ``requests.Session`` returning parsed
      droneroute records.

Every call checks the ``isAlive`` endpoint first. Transport failures,
non-200 responses and malformed payloads raise ``RestServiceError`` so the
batch run stops instead of planning against partial data.
"""

from __future__ import annotations

from datetime import date
from typing import Any, List, Optional
from urllib.parse import urljoin

import requests

from ..configuration import get_settings
from ..exceptions import RestServiceError
from ..geometry import Region
from ..logging_utils import get_logger
from ..orders import Order, Restaurant

LOGGER = get_logger(__name__)


class RestClient:
    """Fetch delivery inputs from the REST service."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        settings = get_settings()
        base_url = base_url or settings.rest_base_url
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.timeout = timeout or settings.request_timeout_seconds
        self.session = session or requests.Session()
        LOGGER.debug("RestClient using %s (timeout %ss)", self.base_url, self.timeout)

    def _get(self, endpoint: str) -> requests.Response:
        url = urljoin(self.base_url, endpoint)
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as error:
            raise RestServiceError(f"Request to {url} failed: {error}") from error
        return response

    def _get_json(self, endpoint: str) -> Any:
        self._require_alive()
        response = self._get(endpoint)
        try:
            return response.json()
        except ValueError as error:
            raise RestServiceError(f"Endpoint {endpoint} returned invalid JSON") from error

    def _require_alive(self) -> None:
        if not self.is_alive():
            raise RestServiceError(f"REST service at {self.base_url} is not alive")

    def is_alive(self) -> bool:
        """Return True when the service answers ``true`` on its health endpoint."""

        try:
            response = self._get("isAlive")
        except RestServiceError as error:
            LOGGER.warning("Health check failed: %s", error)
            return False
        return response.text.strip().lower() == "true"

    def restaurants(self) -> List[Restaurant]:
        payload = self._get_json("restaurants")
        try:
            restaurants = [Restaurant.from_dict(item) for item in payload]
        except (KeyError, TypeError, ValueError) as error:
            raise RestServiceError(f"Malformed restaurant payload: {error}") from error
        LOGGER.info("Fetched %s restaurants", len(restaurants))
        return restaurants

    def open_restaurants(self, day: date) -> List[Restaurant]:
        """Return the restaurants open on ``day``."""

        return [restaurant for restaurant in self.restaurants() if restaurant.is_open_on(day)]

    def orders_for(self, day: date) -> List[Order]:
        payload = self._get_json(f"orders/{day.isoformat()}")
        try:
            orders = [Order.from_dict(item) for item in payload]
        except (TypeError, ValueError) as error:
            raise RestServiceError(f"Malformed order payload: {error}") from error
        LOGGER.info("Fetched %s orders for %s", len(orders), day.isoformat())
        return orders

    def central_area(self) -> Region:
        payload = self._get_json("centralArea")
        try:
            return Region.from_dict(payload)
        except (AttributeError, ValueError) as error:
            raise RestServiceError(f"Malformed central area payload: {error}") from error

    def no_fly_zones(self) -> List[Region]:
        payload = self._get_json("noFlyZones")
        try:
            zones = [Region.from_dict(item) for item in payload]
        except (AttributeError, TypeError, ValueError) as error:
            raise RestServiceError(f"Malformed no-fly zone payload: {error}") from error
        LOGGER.info("Fetched %s no-fly zones", len(zones))
        return zones
