"""Integration tests for the UpdateOrderStatus use case."""

import pytest

from marketplace.application.update_order_status import UpdateOrderStatusHandler
from marketplace.domain.exceptions import (
    ConcurrentUpdateError,
    EntityNotFoundError,
    ValidationError,
)
from marketplace.domain.model.order import Order, OrderLineItem, OrderStatus
from marketplace.domain.model.value_objects import Money, Quantity
from tests.fakes import FIXED_NOW, FakeOrderRepository, fixed_clock


def _pending_order() -> Order:
    order = Order.create(
        "buyer",
        [OrderLineItem("p1", "Lamp", Quantity(1), Money.of("100"), "s1")],
    )
    order.id = "o1"
    return order


def _setup() -> tuple[UpdateOrderStatusHandler, FakeOrderRepository]:
    repo = FakeOrderRepository([_pending_order()])
    return UpdateOrderStatusHandler(repo, clock=fixed_clock), repo


class TestUpdateOrderStatus:

    def test_pending_to_shipped(self):
        handler, repo = _setup()
        before = len(repo.get_by_id("o1").status_history)

        dto = handler.handle("o1", "SHIPPED", "seller")

        assert dto.status == "SHIPPED"
        assert len(dto.status_history) == before + 1
        last = dto.status_history[-1]
        assert last.status == "SHIPPED"
        assert last.updated_by == "seller"
        assert last.timestamp == FIXED_NOW.isoformat()

    def test_persists_status_and_history(self):
        handler, repo = _setup()
        handler.handle("o1", OrderStatus.DELIVERED, "seller")
        saved = repo.get_by_id("o1")
        assert saved.status == OrderStatus.DELIVERED
        assert saved.status_history[-1].status == OrderStatus.DELIVERED

    def test_not_idempotent(self):
        handler, repo = _setup()
        handler.handle("o1", "SHIPPED", "seller")
        handler.handle("o1", "SHIPPED", "seller")
        assert len(repo.get_by_id("o1").status_history) == 2

    def test_any_transition_allowed(self):
        handler, repo = _setup()
        handler.handle("o1", "CANCELLED", "buyer")
        handler.handle("o1", "PAID", "buyer")
        assert repo.get_by_id("o1").status == OrderStatus.PAID

    def test_total_unchanged(self):
        handler, repo = _setup()
        handler.handle("o1", "SHIPPED", "seller")
        assert repo.get_by_id("o1").total == Money.of("100")

    def test_unknown_order(self):
        handler, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Order not found"):
            handler.handle("o404", "SHIPPED", "seller")

    def test_unknown_status(self):
        handler, repo = _setup()
        with pytest.raises(ValidationError, match="Invalid order status"):
            handler.handle("o1", "LOST", "seller")
        assert repo.get_by_id("o1").status_history == []


class TestConditionalWrite:

    def test_stale_copy_cannot_overwrite(self):
        _, repo = _setup()
        first = repo.get_by_id("o1")
        second = repo.get_by_id("o1")

        first.record_status(OrderStatus.SHIPPED, "a", FIXED_NOW)
        repo.save(first)

        second.record_status(OrderStatus.CANCELLED, "b", FIXED_NOW)
        with pytest.raises(ConcurrentUpdateError):
            repo.save(second)

        saved = repo.get_by_id("o1")
        assert saved.status == OrderStatus.SHIPPED
        assert len(saved.status_history) == 1
