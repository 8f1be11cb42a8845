"""
Payment processing use case.

The processor charges orders through whichever PaymentStrategy it currently
holds; the strategy can be swapped at any time.
"""

import structlog

from restaurant_dip.core.domain.entities import Order
from restaurant_dip.core.domain.services import PaymentStrategy

logger = structlog.get_logger(__name__)


class PaymentProcessor:
    """Validates and charges order payments with a replaceable strategy."""

    def __init__(self, strategy: PaymentStrategy):
        self.strategy = strategy
        logger.info("Payment processor initialized", strategy=strategy.get_payment_type())

    def set_strategy(self, strategy: PaymentStrategy) -> None:
        """Replace the active payment strategy."""
        self.strategy = strategy
        logger.info("Payment strategy changed", strategy=strategy.get_payment_type())

    def process_order_payment(self, order: Order) -> bool:
        """
        Validate the order's payment details and charge its total.

        A failed validation is a normal outcome, not an error: nothing is
        charged and False is returned.

        Args:
            order: Order carrying payment info and total amount

        Returns:
            True if the payment was charged, False if validation failed
        """
        logger.info(
            "Processing payment for order",
            order_id=order.id,
            strategy=self.strategy.get_payment_type()
        )

        if not self.strategy.validate_payment(order.payment_info or ""):
            logger.warning(
                "Payment validation failed",
                order_id=order.id,
                strategy=self.strategy.get_payment_type()
            )
            return False

        self.strategy.process_payment(order.total_amount)
        logger.info("Payment successful", order_id=order.id, amount=str(order.total_amount))
        return True

    def get_current_strategy(self) -> str:
        return self.strategy.get_payment_type()
