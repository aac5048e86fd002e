"""Mini README: Order records and validation for delivery runs.

The ``models`` module parses the REST service payloads and ``validator``
decides which orders can be flown.
"""

from .models import (
    CreditCardInformation,
    Order,
    OrderStatus,
    OrderValidationCode,
    Pizza,
    Restaurant,
)
from .validator import OrderValidator

__all__ = [
    "CreditCardInformation",
    "Order",
    "OrderStatus",
    "OrderValidationCode",
    "OrderValidator",
    "Pizza",
    "Restaurant",
]
