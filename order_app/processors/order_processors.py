# order_app/processors/order_processors.py

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, Type

from order_app.models.base import OrderType

logger = logging.getLogger(__name__)


class OrderProcessor(ABC):
    """Simulated fulfilment handling for one kind of order."""

    order_type: OrderType

    @abstractmethod
    def describe(self, order_id: int) -> str:
        ...

    def process(self, order_id: int) -> None:
        logger.info("Processing order %s as %s", order_id, self.order_type.value)
        print(self.describe(order_id))


class StandardOrderProcessor(OrderProcessor):
    order_type = OrderType.STANDARD

    def describe(self, order_id: int) -> str:
        return f"[Order {order_id}] Processing a standard order."


class ExpressOrderProcessor(OrderProcessor):
    order_type = OrderType.EXPRESS

    def describe(self, order_id: int) -> str:
        return f"[Order {order_id}] Processing an express order."


ORDER_PROCESSORS: Dict[OrderType, Type[OrderProcessor]] = {
    OrderType.STANDARD: StandardOrderProcessor,
    OrderType.EXPRESS: ExpressOrderProcessor,
}


def order_processor_for(order_type: OrderType) -> OrderProcessor:
    return ORDER_PROCESSORS[order_type]()
