"""
Recording test doubles for the service interfaces.

Each double appends ``(name, args)`` tuples to a call log. Doubles can share
one log so the relative order of calls across services is observable.
"""

from decimal import Decimal
from typing import Any, List, Optional, Tuple

import structlog

from restaurant_dip.core.domain.entities import Order
from restaurant_dip.core.domain.services import DatabaseService, NotificationService, PaymentStrategy
from restaurant_dip.shared.types import OrderID

logger = structlog.get_logger(__name__)

Call = Tuple[str, Any]


class RecordingDatabase(DatabaseService):
    """Database double that records saved orders and lookups."""

    def __init__(self, calls: Optional[List[Call]] = None):
        self.calls: List[Call] = calls if calls is not None else []
        self.saved_orders: List[Order] = []

    def save(self, order: Order) -> None:
        logger.info("Mock database save called", order_id=order.id)
        self.saved_orders.append(order)
        self.calls.append(("save", order))

    def find_by_id(self, order_id: OrderID) -> Order:
        self.calls.append(("find_by_id", order_id))
        return Order(order_id, "Mock Order", Decimal("0"))

    def get_type(self) -> str:
        return "Mock Database"


class RecordingNotification(NotificationService):
    """Notification double that records sent messages."""

    def __init__(self, calls: Optional[List[Call]] = None):
        self.calls: List[Call] = calls if calls is not None else []
        self.messages: List[str] = []

    def send(self, message: str) -> None:
        logger.info("Mock notification sent", message=message)
        self.messages.append(message)
        self.calls.append(("send", message))

    def get_type(self) -> str:
        return "Mock Notification"


class RecordingPaymentStrategy(PaymentStrategy):
    """Payment double with a fixed validation outcome."""

    def __init__(self, accept: bool = True, calls: Optional[List[Call]] = None):
        self.accept = accept
        self.calls: List[Call] = calls if calls is not None else []
        self.charged: List[Decimal] = []

    def validate_payment(self, payment_info: str) -> bool:
        self.calls.append(("validate_payment", payment_info))
        return self.accept

    def process_payment(self, amount: Decimal) -> None:
        self.charged.append(amount)
        self.calls.append(("process_payment", amount))

    def get_payment_type(self) -> str:
        return "Mock Payment"
