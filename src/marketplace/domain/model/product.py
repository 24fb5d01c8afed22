"""Product aggregate.

Products belong to exactly one store. Their owner edits them freely;
the only other mutation is the stock decrement made when an order is
placed. Orders keep their own name/price snapshots, so edits here never
reach existing orders.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from marketplace.domain.exceptions import InsufficientStockError, ValidationError
from marketplace.domain.model.value_objects import Money, Quantity


@dataclass
class Product:
    """A product listed by a store.

    Use ``Product.create()`` for new products; it validates input.
    ``__init__`` stays permissive so repositories can reconstitute
    persisted documents as they are.
    """

    id: str
    name: str
    description: str
    price: Money
    stock: int
    store_id: str
    category_id: str | None = None
    images: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        id: str,
        name: str,
        description: str,
        price: Money,
        stock: int,
        store_id: str,
        category_id: str | None = None,
        images: list[str] | None = None,
        created_at: datetime | None = None,
    ) -> Product:
        return Product(
            id=id,
            name=_require_text(name, "Product name"),
            description=_require_text(description, "Product description"),
            price=price,
            stock=_validate_stock(stock),
            store_id=store_id,
            category_id=category_id,
            images=list(images or []),
            created_at=created_at or datetime.now(timezone.utc),
        )

    def apply_changes(
        self,
        name: str | None = None,
        description: str | None = None,
        price: Money | None = None,
        stock: int | None = None,
        images: list[str] | None = None,
        category_id: str | None = None,
    ) -> None:
        """Owner edit. ``None`` leaves a field untouched; the store never moves."""
        if name is not None:
            self.name = _require_text(name, "Product name")
        if description is not None:
            self.description = _require_text(description, "Product description")
        if price is not None:
            self.price = price
        if stock is not None:
            self.stock = _validate_stock(stock)
        if images is not None:
            self.images = list(images)
        if category_id is not None:
            self.category_id = category_id

    def decrement_stock(self, quantity: int) -> None:
        """Take units out of stock for a placed order. Stock never goes below zero."""
        units = Quantity(quantity).value
        if units > self.stock:
            raise InsufficientStockError(
                product_id=self.id,
                product_name=self.name,
                requested=units,
                available=self.stock,
            )
        self.stock -= units


def _require_text(value: str, label: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{label} is required")
    return value.strip()


def _validate_stock(stock: int) -> int:
    if isinstance(stock, bool) or not isinstance(stock, int):
        raise ValidationError(f"Stock must be an integer, got {type(stock).__name__}")
    if stock < 0:
        raise ValidationError("Stock cannot be negative")
    return stock
