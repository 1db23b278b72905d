from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from .base import Order


class OrderOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    order: Order
    status: Literal["completed", "canceled"]

    @property
    def confirmed(self) -> bool:
        return self.status == "completed"
