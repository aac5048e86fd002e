"""Mini README: Order and restaurant records served by the REST service.

Structure:
    * OrderStatus / OrderValidationCode - enums mirroring the service values.
    * Pizza, Restaurant, CreditCardInformation, Order - dataclasses with
      ``from_dict`` constructors for the service's JSON payloads.

Orders are mutable because validation and delivery update their status in
place; everything else is frozen.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Mapping, Tuple

from ..geometry import Position

ORDER_CHARGE_IN_PENCE = 100
MAX_PIZZAS_PER_ORDER = 4

_WEEKDAYS = ("MONDAY", "TUESDAY", "WEDNESDAY", "THURSDAY", "FRIDAY", "SATURDAY", "SUNDAY")


class OrderStatus(str, Enum):
    """Lifecycle of an order."""

    UNDEFINED = "UNDEFINED"
    VALID_BUT_NOT_DELIVERED = "VALID_BUT_NOT_DELIVERED"
    DELIVERED = "DELIVERED"
    INVALID = "INVALID"


class OrderValidationCode(str, Enum):
    """Outcome of order validation."""

    UNDEFINED = "UNDEFINED"
    NO_ERROR = "NO_ERROR"
    CARD_NUMBER_INVALID = "CARD_NUMBER_INVALID"
    EXPIRY_DATE_INVALID = "EXPIRY_DATE_INVALID"
    CVV_INVALID = "CVV_INVALID"
    TOTAL_INCORRECT = "TOTAL_INCORRECT"
    PIZZA_NOT_DEFINED = "PIZZA_NOT_DEFINED"
    MAX_PIZZA_COUNT_EXCEEDED = "MAX_PIZZA_COUNT_EXCEEDED"
    PIZZA_FROM_MULTIPLE_RESTAURANTS = "PIZZA_FROM_MULTIPLE_RESTAURANTS"
    RESTAURANT_CLOSED = "RESTAURANT_CLOSED"


def weekday_name(day: date) -> str:
    """Return the service's upper-case weekday name for ``day``."""

    return _WEEKDAYS[day.weekday()]


@dataclass(frozen=True, slots=True)
class Pizza:
    name: str
    price_in_pence: int

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Pizza":
        return cls(name=str(payload["name"]), price_in_pence=int(payload["priceInPence"]))


@dataclass(frozen=True, slots=True)
class Restaurant:
    """Participating restaurant and the days it opens."""

    name: str
    location: Position
    opening_days: FrozenSet[str]
    menu: Tuple[Pizza, ...]

    def is_open_on(self, day: date) -> bool:
        return weekday_name(day) in self.opening_days

    def serves(self, pizza: Pizza) -> bool:
        return pizza in self.menu

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Restaurant":
        return cls(
            name=str(payload["name"]),
            location=Position.from_dict(payload["location"]),
            opening_days=frozenset(str(day).upper() for day in payload.get("openingDays", [])),
            menu=tuple(Pizza.from_dict(pizza) for pizza in payload.get("menu", [])),
        )


@dataclass(frozen=True, slots=True)
class CreditCardInformation:
    credit_card_number: str
    credit_card_expiry: str
    cvv: str

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "CreditCardInformation":
        return cls(
            credit_card_number=str(payload.get("creditCardNumber", "")),
            credit_card_expiry=str(payload.get("creditCardExpiry", "")),
            cvv=str(payload.get("cvv", "")),
        )


@dataclass(slots=True)
class Order:
    """Customer order; status fields are updated by validation and delivery."""

    order_no: str
    order_date: date
    price_total_in_pence: int
    pizzas_in_order: List[Pizza]
    credit_card_information: CreditCardInformation
    order_status: OrderStatus = OrderStatus.UNDEFINED
    order_validation_code: OrderValidationCode = OrderValidationCode.UNDEFINED
    metadata: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Order":
        try:
            return cls(
                order_no=str(payload["orderNo"]),
                order_date=date.fromisoformat(str(payload["orderDate"])),
                price_total_in_pence=int(payload["priceTotalInPence"]),
                pizzas_in_order=[Pizza.from_dict(pizza) for pizza in payload.get("pizzasInOrder", [])],
                credit_card_information=CreditCardInformation.from_dict(
                    payload.get("creditCardInformation") or {}
                ),
                order_status=OrderStatus(payload.get("orderStatus", OrderStatus.UNDEFINED.value)),
                order_validation_code=OrderValidationCode(
                    payload.get("orderValidationCode", OrderValidationCode.UNDEFINED.value)
                ),
            )
        except (KeyError, TypeError, ValueError) as error:
            raise ValueError(f"Invalid order payload: {error}") from error

    def as_delivery_record(self) -> Dict[str, object]:
        """Export the summary written to the deliveries file."""

        return {
            "orderNo": self.order_no,
            "orderStatus": self.order_status.value,
            "orderValidationCode": self.order_validation_code.value,
            "costInPence": self.price_total_in_pence,
        }
