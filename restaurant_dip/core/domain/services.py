"""
Service interfaces for the restaurant domain.

These abstract interfaces are what the high-level order and payment logic
depends on. Concrete databases, notification channels and payment methods
live in the infrastructure layer and are handed in from outside.
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from restaurant_dip.core.domain.entities import Order
from restaurant_dip.shared.types import OrderID


class DatabaseService(ABC):
    """Storage interface for orders."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist an order."""
        pass

    @abstractmethod
    def find_by_id(self, order_id: OrderID) -> Order:
        """Retrieve an order by its ID."""
        pass

    @abstractmethod
    def get_type(self) -> str:
        """Human readable name of the storage backend."""
        pass


class NotificationService(ABC):
    """Outbound message channel."""

    @abstractmethod
    def send(self, message: str) -> None:
        """Deliver a message."""
        pass

    @abstractmethod
    def get_type(self) -> str:
        """Human readable name of the channel."""
        pass


class PaymentStrategy(ABC):
    """Interchangeable payment method."""

    @abstractmethod
    def validate_payment(self, payment_info: str) -> bool:
        """Check whether the payment details are acceptable for this method."""
        pass

    @abstractmethod
    def process_payment(self, amount: Decimal) -> None:
        """Charge the given amount."""
        pass

    @abstractmethod
    def get_payment_type(self) -> str:
        """Human readable name of the payment method."""
        pass
