"""
Order processing use cases.

The restaurant service stores an order and announces it. It only knows the
DatabaseService and NotificationService interfaces; which backend and which
channel are used is decided by whoever constructs it.
"""

from typing import Optional, Type

import structlog

from restaurant_dip.core.domain.entities import Order
from restaurant_dip.core.domain.services import DatabaseService, NotificationService
from restaurant_dip.shared.types import OrderID

logger = structlog.get_logger(__name__)

NOT_INITIALIZED = "Not initialized"


class GoodRestaurantService:
    """Order service with its dependencies injected through the constructor."""

    def __init__(
        self,
        database: DatabaseService,
        notification: NotificationService
    ):
        self.database = database
        self.notification = notification
        logger.info(
            "Restaurant service created",
            database=database.get_type(),
            notification=notification.get_type()
        )

    def process_order(self, order: Order) -> None:
        """
        Save an order, then send its confirmation.

        Args:
            order: Order to process
        """
        self.database.save(order)
        self.notification.send(f"Order {order.id} processed successfully!")
        logger.info("Order processed", order_id=order.id, configuration=self.get_configuration())

    def get_order(self, order_id: OrderID) -> Order:
        """Look an order up through the injected database."""
        return self.database.find_by_id(order_id)

    def get_configuration(self) -> str:
        """Diagnostic label such as ``"MySQL + Email"``."""
        return f"{self.database.get_type()} + {self.notification.get_type()}"


class RestaurantManager:
    """
    Builds a restaurant service from configuration keys.

    The factories are injected too, defaulting to the database and
    notification factories of the infrastructure layer.
    """

    def __init__(self, database_factory: Optional[Type] = None, notification_factory: Optional[Type] = None):
        if database_factory is None or notification_factory is None:
            from restaurant_dip.infrastructure.database.factory import DatabaseFactory
            from restaurant_dip.infrastructure.notifications.factory import NotificationFactory
            database_factory = database_factory or DatabaseFactory
            notification_factory = notification_factory or NotificationFactory

        self.database_factory = database_factory
        self.notification_factory = notification_factory
        self.restaurant_service: Optional[GoodRestaurantService] = None

    @property
    def is_initialized(self) -> bool:
        return self.restaurant_service is not None

    def initialize(self, database_type: str, notification_type: str) -> GoodRestaurantService:
        """
        Create the database and notification services and wire a new restaurant service.

        Any previously held service is replaced. If a factory rejects its key
        the error propagates and the previous service stays in place.

        Args:
            database_type: Database key, e.g. ``"mysql"``
            notification_type: Notification key, e.g. ``"email"``

        Returns:
            The newly wired restaurant service

        Raises:
            UnknownServiceTypeError: If either key is unknown
        """
        logger.info(
            "Initializing restaurant",
            database_type=database_type,
            notification_type=notification_type
        )

        database = self.database_factory.create_database(database_type)
        notification = self.notification_factory.create_notification(notification_type)

        self.restaurant_service = GoodRestaurantService(database, notification)
        return self.restaurant_service

    def process_order(self, order: Order) -> bool:
        """
        Process an order through the current restaurant service.

        Returns:
            True if the order was processed, False if the manager has not
            been initialized yet
        """
        if self.restaurant_service is None:
            logger.warning("Restaurant not initialized", order_id=order.id)
            return False

        self.restaurant_service.process_order(order)
        return True

    def get_configuration(self) -> str:
        if self.restaurant_service is None:
            return NOT_INITIALIZED
        return self.restaurant_service.get_configuration()
