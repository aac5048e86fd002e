"""Mini README: Rule chain deciding whether an order can be delivered.

Structure:
    * OrderValidator - applies each rule in turn and records the first failure.

Rules run in a fixed order (card, expiry, CVV, pizza count, menu lookup,
single restaurant, opening day, total) and the first failing rule sets the
validation code. Orders passing every rule become ``VALID_BUT_NOT_DELIVERED``.
"""

from __future__ import annotations

import re
from datetime import date
from typing import List, Optional, Sequence

from ..logging_utils import get_logger
from .models import (
    MAX_PIZZAS_PER_ORDER,
    ORDER_CHARGE_IN_PENCE,
    Order,
    OrderStatus,
    OrderValidationCode,
    Pizza,
    Restaurant,
)

LOGGER = get_logger(__name__)

_CARD_NUMBER = re.compile(r"^[0-9]{16}$")
_EXPIRY = re.compile(r"^(0[1-9]|1[0-2])/([0-9]{2})$")
_CVV = re.compile(r"^[0-9]{3}$")


def card_number_valid(number: str) -> bool:
    return bool(_CARD_NUMBER.match(number))


def card_expiry_valid(expiry: str, order_date: date) -> bool:
    """Cards stay valid until the last day of their ``MM/YY`` expiry month."""

    match = _EXPIRY.match(expiry)
    if not match:
        return False
    month = int(match.group(1))
    year = 2000 + int(match.group(2))
    first_invalid = date(year + 1, 1, 1) if month == 12 else date(year, month + 1, 1)
    return order_date < first_invalid


def cvv_valid(cvv: str) -> bool:
    return bool(_CVV.match(cvv))


def restaurants_serving(pizzas: Sequence[Pizza], restaurants: Sequence[Restaurant]) -> List[Restaurant]:
    """Return the restaurants whose menus contain at least one of ``pizzas``."""

    return [
        restaurant
        for restaurant in restaurants
        if any(restaurant.serves(pizza) for pizza in pizzas)
    ]


class OrderValidator:
    """Validate orders against the list of participating restaurants."""

    def validate(self, order: Order, restaurants: Sequence[Restaurant]) -> Order:
        """Set the order's validation code and status, returning the order."""

        code = self._first_failure(order, restaurants)
        order.order_validation_code = code
        if code is OrderValidationCode.NO_ERROR:
            order.order_status = OrderStatus.VALID_BUT_NOT_DELIVERED
        else:
            order.order_status = OrderStatus.INVALID
            LOGGER.debug("Order %s rejected: %s", order.order_no, code.value)
        return order

    def restaurant_for(self, order: Order, restaurants: Sequence[Restaurant]) -> Optional[Restaurant]:
        """Return the single restaurant a valid order was placed with."""

        serving = restaurants_serving(order.pizzas_in_order, restaurants)
        return serving[0] if len(serving) == 1 else None

    def _first_failure(self, order: Order, restaurants: Sequence[Restaurant]) -> OrderValidationCode:
        card = order.credit_card_information
        pizzas = order.pizzas_in_order
        if not card_number_valid(card.credit_card_number):
            return OrderValidationCode.CARD_NUMBER_INVALID
        if not card_expiry_valid(card.credit_card_expiry, order.order_date):
            return OrderValidationCode.EXPIRY_DATE_INVALID
        if not cvv_valid(card.cvv):
            return OrderValidationCode.CVV_INVALID
        if len(pizzas) > MAX_PIZZAS_PER_ORDER:
            return OrderValidationCode.MAX_PIZZA_COUNT_EXCEEDED
        if not pizzas or not all(
            any(restaurant.serves(pizza) for restaurant in restaurants) for pizza in pizzas
        ):
            return OrderValidationCode.PIZZA_NOT_DEFINED
        serving = restaurants_serving(pizzas, restaurants)
        if len(serving) != 1 or not all(serving[0].serves(pizza) for pizza in pizzas):
            return OrderValidationCode.PIZZA_FROM_MULTIPLE_RESTAURANTS
        if not serving[0].is_open_on(order.order_date):
            return OrderValidationCode.RESTAURANT_CLOSED
        expected_total = sum(pizza.price_in_pence for pizza in pizzas) + ORDER_CHARGE_IN_PENCE
        if order.price_total_in_pence != expected_total:
            return OrderValidationCode.TOTAL_INCORRECT
        return OrderValidationCode.NO_ERROR
