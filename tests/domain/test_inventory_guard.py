"""Unit tests for the Inventory Guard domain service."""

import pytest

from marketplace.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from marketplace.domain.model.product import Product
from marketplace.domain.model.value_objects import Money
from marketplace.domain.service.inventory_guard import InventoryGuard
from tests.fakes import FakeProductRepository


def _setup() -> tuple[InventoryGuard, FakeProductRepository]:
    repo = FakeProductRepository([
        Product(id="p1", name="Lamp", description="d", price=Money.of("100"), stock=50, store_id="s1"),
        Product(id="p2", name="Chair", description="d", price=Money.of("40"), stock=10, store_id="s2"),
    ])
    return InventoryGuard(repo), repo


class TestCheck:

    def test_returns_snapshot_and_remaining_stock(self):
        guard, _ = _setup()
        check = guard.check("p1", 2)
        assert check.product_name == "Lamp"
        assert check.unit_price == Money.of("100")
        assert check.store_id == "s1"
        assert check.quantity == 2
        assert check.remaining_stock == 48

    def test_exact_stock_is_enough(self):
        guard, _ = _setup()
        assert guard.check("p2", 10).remaining_stock == 0

    def test_unknown_product(self):
        guard, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            guard.check("nope", 1)

    def test_insufficient_stock_carries_context(self):
        guard, _ = _setup()
        with pytest.raises(InsufficientStockError, match="Insufficient stock for product: Chair") as info:
            guard.check("p2", 15)
        assert info.value.product_id == "p2"
        assert info.value.requested == 15
        assert info.value.available == 10

    def test_non_positive_quantity_rejected(self):
        guard, _ = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            guard.check("p1", 0)

    def test_check_has_no_side_effects(self):
        guard, repo = _setup()
        guard.check("p1", 5)
        assert repo.get_by_id("p1").stock == 50
        assert repo.saves == []


class TestCheckAll:

    def test_checks_every_item_in_order(self):
        guard, _ = _setup()
        checks = guard.check_all([("p1", 2), ("p2", 1)])
        assert [c.product_id for c in checks] == ["p1", "p2"]
        assert [c.remaining_stock for c in checks] == [48, 9]

    def test_repeated_product_quantities_accumulate(self):
        guard, _ = _setup()
        checks = guard.check_all([("p2", 6), ("p2", 4)])
        assert checks[-1].remaining_stock == 0

    def test_repeated_product_exceeding_stock_rejected(self):
        guard, _ = _setup()
        with pytest.raises(InsufficientStockError) as info:
            guard.check_all([("p2", 6), ("p2", 5)])
        assert info.value.requested == 11

    def test_stops_at_first_failure(self):
        guard, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            guard.check_all([("p1", 1), ("missing", 1), ("p2", 99)])
