from __future__ import annotations

from order_app.config import DEFAULT_ORDER_ID_SEED


class OrderCounter:
    """
    Hands out order ids for one process run.

    The counter is incremented before each id is issued, so a counter seeded
    with 1000 yields 1001, 1002, ... Nothing is persisted; a fresh counter
    starts again from its seed.
    """

    def __init__(self, start: int = DEFAULT_ORDER_ID_SEED) -> None:
        self._current = start

    @property
    def current(self) -> int:
        return self._current

    def next_id(self) -> int:
        self._current += 1
        return self._current
