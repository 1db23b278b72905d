# order_app/services/order_service.py

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from order_app.config import DEFAULT_CURRENCY_SYMBOL, DEFAULT_ORDER_ID_SEED, format_money
from order_app.console_input import Reader
from order_app.generator.order_counter import OrderCounter
from order_app.generator.order_factory import create_order
from order_app.models import OrderOutcome
from order_app.processors import OrderProcessor, PaymentProcessor

logger = logging.getLogger(__name__)

CONFIRMATION_WORD = "yes"


class OrderService:
    """
    Runs a single order through confirmation, fulfilment and payment.

    The service owns its id counter; pass one in to share ids between
    several services in the same run.
    """

    def __init__(
        self,
        order_processor: OrderProcessor,
        payment_processor: PaymentProcessor,
        *,
        counter: Optional[OrderCounter] = None,
        reader: Optional[Reader] = None,
        currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
    ) -> None:
        self.order_processor = order_processor
        self.payment_processor = payment_processor
        self.counter = counter if counter is not None else OrderCounter(DEFAULT_ORDER_ID_SEED)
        self.currency_symbol = currency_symbol
        self._reader = reader if reader is not None else input

    def _confirm(self) -> str:
        try:
            answer = self._reader("Confirm order? (yes/no): ")
        except EOFError:
            answer = ""
        return (answer or "").strip().lower()

    def complete_order(self, amount: Decimal) -> OrderOutcome:
        order = create_order(self.counter, amount)

        print("\n--- Order Summary ---")
        print(f"Order ID: {order.id}")
        print(f"Amount: {format_money(order.amount, self.currency_symbol)}")

        if self._confirm() != CONFIRMATION_WORD:
            print("Order canceled.")
            logger.info("Order %s canceled at confirmation", order.id)
            return OrderOutcome(order=order, status="canceled")

        self.order_processor.process(order.id)
        self.payment_processor.process(order.amount, order.id)
        print(f"[Order {order.id}] Order completed successfully!\n")

        logger.info("Order %s completed", order.id)
        return OrderOutcome(order=order, status="completed")
