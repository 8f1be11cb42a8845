"""
Application business logic and use cases.

These orchestrators depend only on the service interfaces of the domain
layer; concrete implementations are supplied from outside.
"""

# Order processing use cases
from .order_processing import (
    GoodRestaurantService,
    RestaurantManager,
    NOT_INITIALIZED
)

# Payment use cases
from .payment_processing import PaymentProcessor

__all__ = [
    # Order processing
    "GoodRestaurantService",
    "RestaurantManager",
    "NOT_INITIALIZED",

    # Payments
    "PaymentProcessor"
]
