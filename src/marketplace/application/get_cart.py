"""Application service: Get Cart use case (query)."""

from __future__ import annotations

from marketplace.application.dto import CartDTO
from marketplace.domain.repository.cart_repository import CartRepository


class GetCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, user_id: str) -> CartDTO:
        cart = self._cart_repo.get_by_user(user_id)
        if cart is None:
            return CartDTO(user_id=user_id)
        return CartDTO.from_cart(cart)
