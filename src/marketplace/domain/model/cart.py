"""Cart aggregate.

One cart per user. Cart items carry no snapshots; they always point at
the live product. The item list is replaced as a whole on every write.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from marketplace.domain.model.value_objects import Quantity


@dataclass(frozen=True)
class CartItem:
    product_id: str
    quantity: Quantity
    store_id: str


@dataclass
class Cart:

    id: str | None
    user_id: str
    items: list[CartItem] = field(default_factory=list)
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def replace_items(self, items: list[CartItem], at: datetime | None = None) -> None:
        self.items = list(items)
        self.updated_at = at or datetime.now(timezone.utc)

    def merge(self, incoming: list[CartItem]) -> list[CartItem]:
        """Fold client-held items into the persisted ones.

        Quantities are summed when the product is already in the cart;
        unknown products are appended as they came. Does not mutate the
        cart. Applying the same ``incoming`` twice counts it twice.
        """
        merged = list(self.items)
        for item in incoming:
            for i, existing in enumerate(merged):
                if existing.product_id == item.product_id:
                    merged[i] = replace(
                        existing,
                        quantity=Quantity(existing.quantity.value + item.quantity.value),
                    )
                    break
            else:
                merged.append(item)
        return merged
