from __future__ import annotations

import logging
from decimal import Decimal

from order_app.generator.order_counter import OrderCounter
from order_app.models.base import Order

logger = logging.getLogger(__name__)


def create_order(counter: OrderCounter, amount: Decimal) -> Order:
    order = Order(id=counter.next_id(), amount=amount)
    logger.debug("Created order %s", order.model_dump_json())
    return order
