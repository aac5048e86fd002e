"""Mini README: Delivery batch orchestration.

Exports ``DeliveryScheduler`` and the ``DeliveryReport`` it returns.
"""

from .scheduler import DeliveryReport, DeliveryScheduler

__all__ = ["DeliveryReport", "DeliveryScheduler"]
