from __future__ import annotations

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class OrderType(str, Enum):
    STANDARD = "standard"
    EXPRESS = "express"


class PaymentMethod(str, Enum):
    CREDIT_CARD = "credit_card"
    PAYPAL = "paypal"
    CASH_ON_DELIVERY = "cash_on_delivery"


class Order(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    amount: Decimal = Field(..., gt=0, description="Amount as typed by the user")
