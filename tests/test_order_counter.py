"""Tests for order id generation."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from order_app.generator.order_counter import OrderCounter
from order_app.generator.order_factory import create_order


class TestOrderCounter:
    def test_first_id_is_seed_plus_one(self):
        counter = OrderCounter()
        assert counter.current == 1000
        assert counter.next_id() == 1001

    def test_ids_strictly_increase_by_one(self):
        counter = OrderCounter()
        ids = [counter.next_id() for _ in range(5)]
        assert ids == [1001, 1002, 1003, 1004, 1005]

    def test_custom_seed(self):
        assert OrderCounter(start=41).next_id() == 42

    def test_counters_are_independent(self):
        first = OrderCounter()
        first.next_id()
        first.next_id()
        assert OrderCounter().next_id() == 1001


class TestCreateOrder:
    def test_builds_order_from_counter(self):
        counter = OrderCounter()
        order = create_order(counter, Decimal("12.50"))
        assert order.id == 1001
        assert order.amount == Decimal("12.50")

    def test_rejects_non_positive_amount(self):
        with pytest.raises(ValidationError):
            create_order(OrderCounter(), Decimal("0"))
