"""Mini README: Plan every deliverable order of a day.

Structure:
    * DeliveryReport - orders after validation plus the flight of each
      delivered order.
    * DeliveryScheduler - validates orders and takes each restaurant's
      out-and-back flight from a ``RouteCache``.

A delivery flight leaves the base, hovers at the restaurant to collect the
order, flies the same moves backwards and hovers at the base to drop it off.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ..configuration import get_settings
from ..exceptions import PlanningError
from ..geometry import Position
from ..logging_utils import get_logger
from ..orders import Order, OrderStatus, OrderValidator, Restaurant
from ..route_planning import FlightPath, RouteCache, RoutePlanner

LOGGER = get_logger(__name__)


@dataclass(slots=True)
class DeliveryReport:
    """Outcome of a delivery run."""

    orders: List[Order]
    flights: Dict[str, FlightPath] = field(default_factory=dict)
    failures: Dict[str, str] = field(default_factory=dict)

    @property
    def delivered(self) -> List[Order]:
        return [order for order in self.orders if order.order_status is OrderStatus.DELIVERED]


class DeliveryScheduler:
    """Turn a day's orders into validated, routed delivery flights."""

    def __init__(
        self,
        planner: RoutePlanner,
        *,
        validator: Optional[OrderValidator] = None,
        cache: Optional[RouteCache] = None,
        base: Optional[Position] = None,
    ) -> None:
        self.planner = planner
        self.validator = validator or OrderValidator()
        self.cache = cache if cache is not None else RouteCache()
        self.base = base or get_settings().base_position

    def flight_to(self, restaurant: Restaurant) -> FlightPath:
        """Return the full out-and-back flight for ``restaurant``."""

        return self.cache.round_trip(self.base, restaurant.location, self.planner)

    def plan_day(self, orders: Sequence[Order], restaurants: Sequence[Restaurant]) -> DeliveryReport:
        """Validate ``orders`` and plan a flight for every valid one."""

        report = DeliveryReport(orders=list(orders))
        for index, order in enumerate(report.orders, start=1):
            self.validator.validate(order, restaurants)
            if order.order_status is not OrderStatus.VALID_BUT_NOT_DELIVERED:
                continue
            restaurant = self.validator.restaurant_for(order, restaurants)
            if restaurant is None:
                continue
            try:
                flight = self.flight_to(restaurant)
            except PlanningError as error:
                LOGGER.warning(
                    "Could not plan route to %s for order %s: %s",
                    restaurant.name,
                    order.order_no,
                    error,
                )
                report.failures[order.order_no] = str(error)
                continue
            report.flights[order.order_no] = flight
            order.order_status = OrderStatus.DELIVERED
            LOGGER.info(
                "Route for order %s completed [%s/%s]", order.order_no, index, len(report.orders)
            )
        LOGGER.info(
            "Delivered %s of %s orders using %s planned routes",
            len(report.delivered),
            len(report.orders),
            len(self.cache),
        )
        return report
