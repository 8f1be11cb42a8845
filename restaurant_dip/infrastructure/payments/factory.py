"""Payment strategy factory: payment type key to strategy."""

from enum import Enum
from typing import Dict, Type, Union

from restaurant_dip.core.domain.services import PaymentStrategy
from restaurant_dip.infrastructure.payments.strategies import (
    CreditCardStrategy,
    DigitalWalletStrategy,
    CashStrategy
)
from restaurant_dip.infrastructure.registry import ServiceRegistry
from restaurant_dip.shared.types import PaymentType


class PaymentStrategyFactory(ServiceRegistry[PaymentStrategy]):
    """Creates payment strategies from the payment type stored on an order."""

    service_kind = "payment"
    _registry: Dict[str, Type[PaymentStrategy]] = {
        PaymentType.CREDIT_CARD.value: CreditCardStrategy,
        PaymentType.WALLET.value: DigitalWalletStrategy,
        "digital_wallet": DigitalWalletStrategy,
        PaymentType.CASH.value: CashStrategy,
    }

    @classmethod
    def create_strategy(cls, payment_type: Union[str, Enum]) -> PaymentStrategy:
        return cls.create(payment_type)
