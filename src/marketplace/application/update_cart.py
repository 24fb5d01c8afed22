"""Application service: Update Cart use case.

The cart's item list is always replaced as a whole. Every referenced
product must still exist; the cart is created on first write.
"""

from __future__ import annotations

import structlog

from marketplace.application.clock import Clock, utc_now
from marketplace.application.dto import CartDTO, CartItemSpec
from marketplace.domain.exceptions import EntityNotFoundError
from marketplace.domain.model.cart import Cart, CartItem
from marketplace.domain.model.value_objects import Quantity
from marketplace.domain.repository.cart_repository import CartRepository
from marketplace.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo
        self._clock = clock

    def handle(self, user_id: str, item_specs: list[CartItemSpec]) -> CartDTO:
        items = [to_cart_item(spec) for spec in item_specs]
        cart = self._cart_repo.get_by_user(user_id) or Cart(id=None, user_id=user_id)
        return self.replace_items(cart, items)

    def replace_items(self, cart: Cart, items: list[CartItem]) -> CartDTO:
        for item in items:
            if self._product_repo.get_by_id(item.product_id) is None:
                logger.warning(
                    "cart.rejected",
                    user_id=cart.user_id,
                    product_id=item.product_id,
                    reason="product_not_found",
                )
                raise EntityNotFoundError("Product", item.product_id)

        cart.replace_items(items, self._clock())
        self._cart_repo.save(cart)
        return CartDTO.from_cart(cart)


def to_cart_item(spec: CartItemSpec) -> CartItem:
    return CartItem(
        product_id=spec.product_id,
        quantity=Quantity(spec.quantity),
        store_id=spec.store_id,
    )
