from .base import Order, OrderType, PaymentMethod
from .order_outcome import OrderOutcome

__all__ = [
    "Order",
    "OrderType",
    "PaymentMethod",
    "OrderOutcome",
]
