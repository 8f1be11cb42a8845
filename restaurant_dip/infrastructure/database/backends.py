"""
Simulated database backends.

None of these talk to a real server: saving an order emits a log line and
lookups fabricate a deterministic order priced per backend.
"""

from decimal import Decimal

import structlog

from restaurant_dip.core.domain.entities import Order
from restaurant_dip.core.domain.services import DatabaseService
from restaurant_dip.shared.contracts import require, ensure, non_negative
from restaurant_dip.shared.types import OrderID

logger = structlog.get_logger(__name__)


class SimulatedDatabase(DatabaseService):
    """
    Base class for the simulated backends.

    Subclasses only set their label and the fixed price of the orders
    they fabricate.
    """

    type_name: str = ""
    order_price: Decimal = Decimal("0")

    def save(self, order: Order) -> None:
        logger.info(
            "Saving order",
            backend=self.type_name,
            order_id=order.id,
            order=str(order)
        )

    @require(lambda self, order_id: non_negative(order_id), "Order ID must not be negative")
    @ensure(lambda result, self, order_id: result.id == order_id, "Fetched order must carry the requested ID")
    def find_by_id(self, order_id: OrderID) -> Order:
        logger.debug("Fetching order", backend=self.type_name, order_id=order_id)
        return Order(order_id, f"{self.type_name} Order #{order_id}", self.order_price)

    def get_type(self) -> str:
        return self.type_name

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class MySQLDatabase(SimulatedDatabase):
    type_name = "MySQL"
    order_price = Decimal("25.99")


class PostgreSQLDatabase(SimulatedDatabase):
    type_name = "PostgreSQL"
    order_price = Decimal("29.99")


class MongoDatabase(SimulatedDatabase):
    type_name = "MongoDB"
    order_price = Decimal("27.50")
