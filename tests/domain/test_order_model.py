"""Unit tests for the Order aggregate."""

from datetime import datetime, timezone

import pytest

from marketplace.domain.exceptions import EmptyOrderError, ValidationError
from marketplace.domain.model.order import (
    Order,
    OrderLineItem,
    OrderStatus,
    PaymentResult,
    ShippingAddress,
)
from marketplace.domain.model.value_objects import Money, Quantity

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)
T1 = datetime(2024, 1, 2, tzinfo=timezone.utc)


def _item(product_id: str = "p1", qty: int = 1, price: str = "10.00", store: str = "s1") -> OrderLineItem:
    return OrderLineItem(
        product_id=product_id,
        product_name=f"Product {product_id}",
        quantity=Quantity(qty),
        unit_price=Money.of(price),
        store_id=store,
    )


class TestOrderCreation:

    def test_total_is_sum_of_line_totals(self):
        order = Order.create("u1", [_item("p1", 2, "100"), _item("p2", 3, "5.50")])
        assert order.total == Money.of("216.50")

    def test_new_order_is_pending_without_history(self):
        order = Order.create("u1", [_item()])
        assert order.status == OrderStatus.PENDING
        assert order.status_history == []
        assert order.id is None

    def test_empty_items_rejected(self):
        with pytest.raises(EmptyOrderError, match="at least one item"):
            Order.create("u1", [])

    def test_empty_order_is_a_validation_error(self):
        with pytest.raises(ValidationError):
            Order.create("u1", [])

    def test_shipping_address_defaults_to_blank(self):
        order = Order.create("u1", [_item()])
        assert order.shipping_address == ShippingAddress()

    def test_created_at_can_be_pinned(self):
        order = Order.create("u1", [_item()], created_at=T0)
        assert order.created_at == T0


class TestOrderStatus:

    def test_record_status_appends_history(self):
        order = Order.create("u1", [_item()])
        order.record_status(OrderStatus.SHIPPED, "admin", T1)

        assert order.status == OrderStatus.SHIPPED
        assert len(order.status_history) == 1
        change = order.status_history[-1]
        assert change.status == OrderStatus.SHIPPED
        assert change.updated_by == "admin"
        assert change.timestamp == T1

    def test_same_status_twice_records_two_entries(self):
        order = Order.create("u1", [_item()])
        order.record_status(OrderStatus.SHIPPED, "u2", T0)
        order.record_status(OrderStatus.SHIPPED, "u2", T1)
        assert len(order.status_history) == 2

    def test_any_transition_is_accepted(self):
        order = Order.create("u1", [_item()])
        order.record_status(OrderStatus.CANCELLED, "u1", T0)
        order.record_status(OrderStatus.PENDING, "u1", T1)
        assert order.status == OrderStatus.PENDING

    def test_mark_paid_sets_payment_and_history(self):
        order = Order.create("u1", [_item()])
        payment = PaymentResult("mock_payment_1", "COMPLETED", T0.isoformat(), "mock@example.com")

        order.mark_paid(payment, T0)

        assert order.status == OrderStatus.PAID
        assert order.payment_result == payment
        assert order.status_history[0].updated_by == "u1"

    def test_total_not_recomputed_on_status_change(self):
        order = Order.create("u1", [_item(qty=2, price="100")])
        order.record_status(OrderStatus.DELIVERED, "u1", T0)
        assert order.total == Money.of("200")


class TestOrderStatusParse:

    def test_parse_string(self):
        assert OrderStatus.parse("shipped") == OrderStatus.SHIPPED

    def test_parse_enum_passthrough(self):
        assert OrderStatus.parse(OrderStatus.PAID) is OrderStatus.PAID

    def test_parse_unknown_rejected(self):
        with pytest.raises(ValidationError, match="Invalid order status"):
            OrderStatus.parse("CONFIRMED")


class TestLineItem:

    def test_line_total(self):
        assert _item(qty=4, price="2.50").line_total == Money.of("10.00")

    def test_line_items_are_immutable(self):
        item = _item()
        with pytest.raises(AttributeError):
            item.product_name = "Renamed"  # type: ignore[misc]

    def test_involves_store(self):
        order = Order.create("u1", [_item(store="s1"), _item("p2", store="s2")])
        assert order.involves_store("s2")
        assert not order.involves_store("s3")
