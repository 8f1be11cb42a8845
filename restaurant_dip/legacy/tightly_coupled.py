"""
Tightly coupled restaurant service.

Kept only as the "before" picture for the demo and for comparison tests:
the service builds its own MySQL database and email notifier, so neither
can be swapped or mocked. Do not add backends here; new code goes through
the service interfaces instead.
"""

from typing import Optional

import structlog

from restaurant_dip.core.domain.entities import Order
from restaurant_dip.shared.exceptions import ServiceClosedError

logger = structlog.get_logger(__name__)


class MySQLDatabaseBad:
    """Concrete MySQL access with no interface above it."""

    def save(self, order: Order) -> None:
        logger.info("Saving order", backend="MySQL", order_id=order.id, order=str(order))


class EmailNotificationBad:
    """Concrete email sender with no interface above it."""

    def send(self, message: str) -> None:
        logger.info("Sending email", channel="Email", message=message)


class BadRestaurantService:
    """
    Restaurant service that creates and owns its dependencies.

    Ownership is exclusive: ``close()`` (or leaving a ``with`` block)
    releases both dependencies, after which the service refuses work.
    """

    def __init__(self):
        self._database: Optional[MySQLDatabaseBad] = MySQLDatabaseBad()
        self._notification: Optional[EmailNotificationBad] = EmailNotificationBad()
        logger.info("Bad restaurant service created with tight coupling")

    @property
    def closed(self) -> bool:
        return self._database is None

    def process_order(self, order: Order) -> None:
        if self._database is None or self._notification is None:
            raise ServiceClosedError(type(self).__name__)

        self._database.save(order)
        self._notification.send(f"Order {order.id} processed!")
        logger.warning("Order processed with tight coupling", order_id=order.id)

    def close(self) -> None:
        self._database = None
        self._notification = None

    def __enter__(self) -> "BadRestaurantService":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
