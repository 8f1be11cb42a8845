"""
Type definitions for the restaurant DIP demo.

Domain-specific aliases and the enumerations of configuration keys
understood by the service factories.
"""

from typing import NewType
from enum import Enum

# Domain-specific type aliases
OrderID = NewType('OrderID', int)


class DatabaseType(str, Enum):
    """Database backends known to the database factory."""
    MYSQL = "mysql"
    POSTGRESQL = "postgresql"
    MONGODB = "mongodb"


class NotificationType(str, Enum):
    """Notification channels known to the notification factory."""
    EMAIL = "email"
    SMS = "sms"
    SLACK = "slack"


class PaymentType(str, Enum):
    """Payment methods known to the payment strategy factory."""
    CREDIT_CARD = "credit_card"
    WALLET = "wallet"
    CASH = "cash"
