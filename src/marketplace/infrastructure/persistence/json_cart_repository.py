"""JSON-file-backed implementation of CartRepository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from marketplace.domain.model.cart import Cart, CartItem
from marketplace.domain.model.value_objects import Quantity
from marketplace.domain.repository.cart_repository import CartRepository
from marketplace.infrastructure.persistence.json_collection import JsonCollection


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._carts = JsonCollection(file_path)

    def get_by_user(self, user_id: str) -> Cart | None:
        raw = self._carts.find_first(user=user_id)
        return self._to_domain(raw) if raw is not None else None

    def save(self, cart: Cart) -> None:
        if cart.id is None:
            # one cart per user: reuse the existing document if there is one
            existing = self._carts.find_first(user=cart.user_id)
            cart.id = existing["id"] if existing is not None else self._carts.next_id()
        self._carts.upsert(
            {
                "id": cart.id,
                "user": cart.user_id,
                "items": [
                    {
                        "product": item.product_id,
                        "quantity": item.quantity.value,
                        "store": item.store_id,
                    }
                    for item in cart.items
                ],
                "updatedAt": cart.updated_at.isoformat(),
            }
        )

    @staticmethod
    def _to_domain(raw: dict) -> Cart:
        return Cart(
            id=raw["id"],
            user_id=raw["user"],
            items=[
                CartItem(
                    product_id=i["product"],
                    quantity=Quantity(i["quantity"]),
                    store_id=i["store"],
                )
                for i in raw.get("items", [])
            ],
            updated_at=datetime.fromisoformat(raw["updatedAt"]),
        )
