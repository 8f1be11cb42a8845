"""
Domain entities for the restaurant.

The order is the only business object; everything else in the package
either stores it, announces it or charges for it.
"""

from decimal import Decimal
from typing import Optional, Union
from dataclasses import dataclass

from restaurant_dip.shared.types import OrderID


@dataclass
class Order:
    """A customer order with optional payment metadata."""
    id: OrderID
    description: str
    total_amount: Decimal
    payment_type: Optional[str] = None
    payment_info: Optional[str] = None

    def __post_init__(self):
        self.total_amount = to_amount(self.total_amount)

    def set_payment_info(self, payment_type: str, payment_info: str) -> 'Order':
        """Attach payment method and payment details to the order."""
        self.payment_type = payment_type
        self.payment_info = payment_info
        return self

    def __str__(self) -> str:
        return f"Order(id={self.id}, description='{self.description}', amount=${self.total_amount:.2f})"


def to_amount(value: Union[Decimal, float, int, str]) -> Decimal:
    """Convert a currency value to Decimal through its string form, so 25.99 stays 25.99."""
    return value if isinstance(value, Decimal) else Decimal(str(value))
