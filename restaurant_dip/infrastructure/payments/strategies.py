"""
Payment strategies.

Each strategy validates payment details its own way and simulates the
charge with a log line. Validation rules are deliberately simple.
"""

from decimal import Decimal

import structlog

from restaurant_dip.core.domain.services import PaymentStrategy

logger = structlog.get_logger(__name__)

CARD_NUMBER_LENGTH = 16


class CreditCardStrategy(PaymentStrategy):
    """Card payment; the card number must be exactly 16 characters."""

    def validate_payment(self, payment_info: str) -> bool:
        return len(payment_info) == CARD_NUMBER_LENGTH

    def process_payment(self, amount: Decimal) -> None:
        logger.info("Processing credit card payment", amount=f"${amount:.2f}")

    def get_payment_type(self) -> str:
        return "Credit Card"


class DigitalWalletStrategy(PaymentStrategy):
    """Wallet payment; any non-empty wallet identifier is accepted."""

    def validate_payment(self, payment_info: str) -> bool:
        return bool(payment_info)

    def process_payment(self, amount: Decimal) -> None:
        logger.info("Processing digital wallet payment", amount=f"${amount:.2f}")

    def get_payment_type(self) -> str:
        return "Digital Wallet"


class CashStrategy(PaymentStrategy):
    """Cash payment; always valid."""

    def validate_payment(self, payment_info: str) -> bool:
        return True

    def process_payment(self, amount: Decimal) -> None:
        logger.info("Processing cash payment", amount=f"${amount:.2f}")

    def get_payment_type(self) -> str:
        return "Cash"
