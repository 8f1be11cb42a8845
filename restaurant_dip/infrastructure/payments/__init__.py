"""
Payment strategies and their factory.
"""

from .strategies import CreditCardStrategy, DigitalWalletStrategy, CashStrategy
from .factory import PaymentStrategyFactory

__all__ = [
    "CreditCardStrategy",
    "DigitalWalletStrategy",
    "CashStrategy",
    "PaymentStrategyFactory",
]
