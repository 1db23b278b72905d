# order_app/services/checkout.py

from __future__ import annotations

import logging
from typing import Dict, Optional

from order_app.config import Settings, configure_logging, get_settings
from order_app.console_input import Reader, parse_amount, parse_choice, prompt_until_valid
from order_app.generator.order_counter import OrderCounter
from order_app.models import OrderOutcome, OrderType, PaymentMethod
from order_app.processors import order_processor_for, payment_processor_for
from order_app.services.order_service import OrderService

logger = logging.getLogger(__name__)

ORDER_TYPE_CHOICES: Dict[int, OrderType] = {
    1: OrderType.STANDARD,
    2: OrderType.EXPRESS,
}

PAYMENT_METHOD_CHOICES: Dict[int, PaymentMethod] = {
    1: PaymentMethod.CREDIT_CARD,
    2: PaymentMethod.PAYPAL,
    3: PaymentMethod.CASH_ON_DELIVERY,
}


def read_order_type(reader: Optional[Reader] = None) -> OrderType:
    print("Choose order type:")
    print("1 - Standard Order")
    print("2 - Express Order")
    choice = prompt_until_valid(
        "Enter your choice: ",
        "Invalid choice. Please enter 1 or 2: ",
        lambda text: parse_choice(text, ORDER_TYPE_CHOICES),
        reader,
    )
    return ORDER_TYPE_CHOICES[choice]


def read_payment_method(reader: Optional[Reader] = None) -> PaymentMethod:
    print("\nChoose payment method:")
    print("1 - Credit Card")
    print("2 - PayPal")
    print("3 - Cash on Delivery")
    choice = prompt_until_valid(
        "Enter your choice: ",
        "Invalid choice. Please enter 1, 2, or 3: ",
        lambda text: parse_choice(text, PAYMENT_METHOD_CHOICES),
        reader,
    )
    return PAYMENT_METHOD_CHOICES[choice]


def run_checkout(
    reader: Optional[Reader] = None,
    settings: Optional[Settings] = None,
) -> OrderOutcome:
    """
    One interactive session: pick order type, payment method and amount,
    then hand a single order to OrderService.
    """
    if settings is None:
        settings = get_settings()

    print("Welcome to the Order Processing System!")

    order_type = read_order_type(reader)
    payment_method = read_payment_method(reader)
    amount = prompt_until_valid(
        "\nEnter payment amount: ",
        "Invalid amount. Please enter a valid positive number: ",
        parse_amount,
        reader,
    )
    logger.info("Selected order type=%s payment=%s amount=%s", order_type.value, payment_method.value, amount)

    service = OrderService(
        order_processor_for(order_type),
        payment_processor_for(payment_method, currency_symbol=settings.currency_symbol),
        counter=OrderCounter(settings.order_id_seed),
        reader=reader,
        currency_symbol=settings.currency_symbol,
    )
    return service.complete_order(amount)


def main() -> int:
    settings = get_settings()
    configure_logging(settings)
    logger.debug("Starting checkout with settings=%s", settings)

    try:
        outcome = run_checkout(settings=settings)
    except (EOFError, KeyboardInterrupt):
        print()
        logger.warning("Input closed before the order was placed, exiting.")
        return 1

    logger.info("Order %s finished with status=%s", outcome.order.id, outcome.status)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
