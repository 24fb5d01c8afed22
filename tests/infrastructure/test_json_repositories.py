"""Tests for the JSON-file repositories, against a temporary data directory."""

import json
from datetime import timedelta
from decimal import Decimal

import pytest

from marketplace.domain.exceptions import ConcurrentUpdateError
from marketplace.domain.model.cart import Cart, CartItem
from marketplace.domain.model.order import (
    Order,
    OrderLineItem,
    OrderStatus,
    PaymentResult,
    ShippingAddress,
)
from marketplace.domain.model.product import Product
from marketplace.domain.model.store import Store, StoreStatus
from marketplace.domain.model.user import User, UserRole
from marketplace.domain.model.value_objects import Money, Quantity
from marketplace.domain.repository.product_repository import ProductFilters
from marketplace.infrastructure.bootstrap import repositories
from tests.fakes import FIXED_NOW


@pytest.fixture
def repos(tmp_path):
    return repositories(tmp_path)


def _order(user_id: str = "u1", store_id: str = "s1", minutes: int = 0) -> Order:
    order = Order.create(
        user_id,
        [OrderLineItem("p1", "Lamp", Quantity(2), Money.of("12.50"), store_id)],
        shipping_address=ShippingAddress("Main St 1", "Lima", "15001", "PE"),
        created_at=FIXED_NOW + timedelta(minutes=minutes),
    )
    order.mark_paid(
        PaymentResult("mock_payment_1", "COMPLETED", FIXED_NOW.isoformat(), "mock@example.com"),
        FIXED_NOW,
    )
    return order


class TestDataDirectory:

    def test_collections_created_empty(self, tmp_path, repos):
        for name in ("users", "stores", "categories", "products", "carts", "orders"):
            assert json.loads((tmp_path / f"{name}.json").read_text()) == []

    def test_nested_data_dir_is_created(self, tmp_path):
        repositories(tmp_path / "a" / "b")
        assert (tmp_path / "a" / "b" / "orders.json").exists()


class TestOrderRepository:

    def test_save_assigns_sequential_ids(self, repos):
        first, second = _order(), _order()
        repos.orders.save(first)
        repos.orders.save(second)
        assert (first.id, second.id) == ("1", "2")

    def test_round_trip(self, repos):
        order = _order()
        repos.orders.save(order)

        loaded = repos.orders.get_by_id(order.id)

        assert loaded.total == Money.of("25.00")
        assert loaded.items[0].unit_price == Money.of("12.50")
        assert loaded.status == OrderStatus.PAID
        assert loaded.status_history[0].timestamp == FIXED_NOW
        assert loaded.payment_result.email_address == "mock@example.com"
        assert loaded.shipping_address.postal_code == "15001"
        assert loaded.created_at == FIXED_NOW

    def test_document_shape(self, tmp_path, repos):
        repos.orders.save(_order())
        raw = json.loads((tmp_path / "orders.json").read_text())[0]
        assert raw["user"] == "u1"
        assert raw["items"][0]["store"] == "s1"
        assert raw["total"] == "25.00"
        assert raw["shippingAddress"]["postalCode"] == "15001"
        assert raw["statusHistory"][0]["updatedBy"] == "u1"

    def test_missing(self, repos):
        assert repos.orders.get_by_id("42") is None

    def test_stale_write_rejected(self, repos):
        repos.orders.save(_order())
        first = repos.orders.get_by_id("1")
        second = repos.orders.get_by_id("1")

        first.record_status(OrderStatus.SHIPPED, "seller", FIXED_NOW)
        repos.orders.save(first)

        second.record_status(OrderStatus.CANCELLED, "buyer", FIXED_NOW)
        with pytest.raises(ConcurrentUpdateError):
            repos.orders.save(second)

        assert repos.orders.get_by_id("1").status == OrderStatus.SHIPPED

    def test_list_by_user_and_store_newest_first(self, repos):
        repos.orders.save(_order("u1", "s1", minutes=0))
        repos.orders.save(_order("u2", "s1", minutes=1))
        repos.orders.save(_order("u1", "s2", minutes=2))

        assert [o.id for o in repos.orders.list_by_user("u1")] == ["3", "1"]
        assert [o.id for o in repos.orders.list_by_store("s1")] == ["2", "1"]


class TestProductRepository:

    def _seed(self, repos):
        repos.products.save(Product("1", "Lamp", "Warm light", Money.of("25"), 4, "s1", "c1", ["a.png"]))
        repos.products.save(Product("2", "Desk", "Oak desk", Money.of("150"), 1, "s2"))

    def test_round_trip(self, repos):
        self._seed(repos)
        lamp = repos.products.get_by_id("1")
        assert lamp.price.amount == Decimal("25")
        assert lamp.images == ["a.png"]
        assert lamp.category_id == "c1"

    def test_next_id_follows_highest(self, repos):
        self._seed(repos)
        assert repos.products.next_id() == "3"

    def test_filters(self, repos):
        self._seed(repos)
        found = repos.products.list_all(ProductFilters(search="oak", max_price=Decimal("200")))
        assert [p.id for p in found] == ["2"]
        assert [p.id for p in repos.products.list_by_store("s1")] == ["1"]

    def test_update_and_delete(self, repos):
        self._seed(repos)
        lamp = repos.products.get_by_id("1")
        lamp.apply_changes(stock=0)
        repos.products.save(lamp)
        repos.products.delete("2")

        assert repos.products.get_by_id("1").stock == 0
        assert repos.products.get_by_id("2") is None
        repos.products.delete("2")


class TestCartRepository:

    def test_one_cart_per_user(self, repos):
        repos.carts.save(Cart(None, "u1", [CartItem("p1", Quantity(1), "s1")], FIXED_NOW))
        repos.carts.save(Cart(None, "u1", [CartItem("p2", Quantity(3), "s2")], FIXED_NOW))

        cart = repos.carts.get_by_user("u1")
        assert cart.id == "1"
        assert [(i.product_id, i.quantity.value) for i in cart.items] == [("p2", 3)]

    def test_unknown_user(self, repos):
        assert repos.carts.get_by_user("nobody") is None


class TestStoreAndUserRepositories:

    def test_store_lookups(self, repos):
        repos.stores.save(Store("1", "Corner Shop", "d", "owner1", StoreStatus.APPROVED, FIXED_NOW))
        assert repos.stores.get_by_owner("owner1").status == StoreStatus.APPROVED
        assert repos.stores.get_by_name(" corner SHOP ").id == "1"
        assert repos.stores.get_by_owner("owner2") is None

    def test_user_lookups(self, repos):
        repos.users.save(User("1", "ana@example.com", UserRole.ADMIN, FIXED_NOW))
        assert repos.users.get_by_email("ANA@example.com").role == UserRole.ADMIN
        assert repos.users.get_by_id("1").email == "ana@example.com"
