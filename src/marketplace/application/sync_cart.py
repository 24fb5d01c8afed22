"""Application service: Sync Cart use case.

Merges a client-held cart (typically kept on the device before login)
into the persisted one. Quantities of products present on both sides are
added together, so syncing the same local cart twice counts it twice.
"""

from __future__ import annotations

import structlog

from marketplace.application.clock import Clock, utc_now
from marketplace.application.dto import CartDTO, CartItemSpec
from marketplace.application.update_cart import UpdateCartHandler, to_cart_item
from marketplace.domain.model.cart import Cart
from marketplace.domain.repository.cart_repository import CartRepository
from marketplace.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class SyncCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        clock: Clock = utc_now,
    ) -> None:
        self._cart_repo = cart_repo
        self._writer = UpdateCartHandler(cart_repo, product_repo, clock)

    def handle(self, user_id: str, local_items: list[CartItemSpec] | None) -> CartDTO:
        incoming = [to_cart_item(spec) for spec in local_items or []]
        cart = self._cart_repo.get_by_user(user_id) or Cart(id=None, user_id=user_id)

        merged = cart.merge(incoming)
        dto = self._writer.replace_items(cart, merged)

        logger.info(
            "cart.synced",
            user_id=user_id,
            incoming=len(incoming),
            items=len(dto.items),
        )
        return dto
