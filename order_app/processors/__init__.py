from .order_processors import (
    ORDER_PROCESSORS,
    ExpressOrderProcessor,
    OrderProcessor,
    StandardOrderProcessor,
    order_processor_for,
)
from .payment_processors import (
    PAYMENT_PROCESSORS,
    CashOnDeliveryPaymentProcessor,
    CreditCardPaymentProcessor,
    PaymentProcessor,
    PayPalPaymentProcessor,
    payment_processor_for,
)

__all__ = [
    "ORDER_PROCESSORS",
    "OrderProcessor",
    "StandardOrderProcessor",
    "ExpressOrderProcessor",
    "order_processor_for",
    "PAYMENT_PROCESSORS",
    "PaymentProcessor",
    "CreditCardPaymentProcessor",
    "PayPalPaymentProcessor",
    "CashOnDeliveryPaymentProcessor",
    "payment_processor_for",
]
