"""Unit tests for Store review transitions and Product validation."""

import pytest

from marketplace.domain.exceptions import InsufficientStockError, ValidationError
from marketplace.domain.model.product import Product
from marketplace.domain.model.store import Store, StoreStatus
from marketplace.domain.model.value_objects import Money


def _store(status: StoreStatus = StoreStatus.PENDING) -> Store:
    return Store(id="s1", name="Shop", description="desc", owner_id="u1", status=status)


class TestStoreReview:

    def test_new_store_is_pending(self):
        assert _store().status == StoreStatus.PENDING

    def test_approve_from_pending(self):
        store = _store()
        store.approve()
        assert store.is_approved

    def test_reject_from_pending(self):
        store = _store()
        store.reject()
        assert store.status == StoreStatus.REJECTED

    def test_approve_rejected_store_refused(self):
        store = _store(StoreStatus.REJECTED)
        with pytest.raises(ValidationError, match="expected PENDING"):
            store.approve()

    def test_reject_approved_store_refused(self):
        store = _store(StoreStatus.APPROVED)
        with pytest.raises(ValidationError, match="expected PENDING"):
            store.reject()

    def test_blank_rename_refused(self):
        with pytest.raises(ValidationError, match="name is required"):
            _store().rename("   ")


class TestProduct:

    def _product(self) -> Product:
        return Product.create(
            id="p1",
            name=" Lamp ",
            description="A lamp",
            price=Money.of("20"),
            stock=5,
            store_id="s1",
        )

    def test_create_trims_name(self):
        assert self._product().name == "Lamp"

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Product.create("p1", "Lamp", "d", Money.of("1"), -1, "s1")

    def test_non_integer_stock_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Product.create("p1", "Lamp", "d", Money.of("1"), 2.5, "s1")  # type: ignore[arg-type]

    def test_blank_description_rejected(self):
        with pytest.raises(ValidationError, match="description is required"):
            Product.create("p1", "Lamp", "", Money.of("1"), 1, "s1")

    def test_apply_changes_only_touches_given_fields(self):
        product = self._product()
        product.apply_changes(price=Money.of("25"))
        assert product.price == Money.of("25")
        assert product.name == "Lamp"
        assert product.stock == 5

    def test_apply_changes_validates_stock(self):
        product = self._product()
        with pytest.raises(ValidationError):
            product.apply_changes(stock=-3)

    def test_decrement_stock(self):
        product = self._product()
        product.decrement_stock(3)
        assert product.stock == 2

    def test_decrement_to_zero(self):
        product = self._product()
        product.decrement_stock(5)
        assert product.stock == 0

    def test_decrement_below_zero_refused(self):
        product = self._product()
        with pytest.raises(InsufficientStockError, match="requested 6, available 5"):
            product.decrement_stock(6)
        assert product.stock == 5

    def test_decrement_requires_positive_quantity(self):
        with pytest.raises(ValidationError, match="must be positive"):
            self._product().decrement_stock(0)
