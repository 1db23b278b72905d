# order_app/processors/payment_processors.py

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Dict, Type

from order_app.config import DEFAULT_CURRENCY_SYMBOL, format_money
from order_app.errors import InvalidPaymentOptionError
from order_app.models.base import PaymentMethod

logger = logging.getLogger(__name__)


class PaymentProcessor(ABC):
    """
    Simulated payment handling for one payment method.

    Amounts are printed exactly as given (Decimal keeps the user's digits,
    so 100.00 stays 100.00). Positivity is checked by the caller.
    """

    method: PaymentMethod

    def __init__(self, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> None:
        self.currency_symbol = currency_symbol

    def _money(self, amount: Decimal) -> str:
        return format_money(amount, self.currency_symbol)

    @abstractmethod
    def describe(self, amount: Decimal, order_id: int) -> str:
        ...

    def process(self, amount: Decimal, order_id: int) -> None:
        logger.info("Processing payment for order %s via %s: %s", order_id, self.method.value, amount)
        print(self.describe(amount, order_id))


class CreditCardPaymentProcessor(PaymentProcessor):
    method = PaymentMethod.CREDIT_CARD

    def describe(self, amount: Decimal, order_id: int) -> str:
        return f"[Order {order_id}] Processing credit card payment of {self._money(amount)}"


class PayPalPaymentProcessor(PaymentProcessor):
    method = PaymentMethod.PAYPAL

    def describe(self, amount: Decimal, order_id: int) -> str:
        return f"[Order {order_id}] Processing PayPal payment of {self._money(amount)}"


class CashOnDeliveryPaymentProcessor(PaymentProcessor):
    method = PaymentMethod.CASH_ON_DELIVERY

    def describe(self, amount: Decimal, order_id: int) -> str:
        return (
            f"[Order {order_id}] Cash on Delivery selected. "
            f"Payment of {self._money(amount)} will be collected on delivery."
        )


PAYMENT_PROCESSORS: Dict[PaymentMethod, Type[PaymentProcessor]] = {
    PaymentMethod.CREDIT_CARD: CreditCardPaymentProcessor,
    PaymentMethod.PAYPAL: PayPalPaymentProcessor,
    PaymentMethod.CASH_ON_DELIVERY: CashOnDeliveryPaymentProcessor,
}


def payment_processor_for(method: Any, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL) -> PaymentProcessor:
    """
    Build the processor registered for `method`.

    Menu input is validated before it gets here, so a miss means the
    wiring itself is broken and the run cannot continue.
    """
    processor_cls = PAYMENT_PROCESSORS.get(method)
    if processor_cls is None:
        raise InvalidPaymentOptionError(f"Invalid payment option: {method!r}")
    return processor_cls(currency_symbol=currency_symbol)
