"""Application service: order queries."""

from __future__ import annotations

from marketplace.application.dto import OrderDTO
from marketplace.domain.exceptions import EntityNotFoundError
from marketplace.domain.repository.order_repository import OrderRepository
from marketplace.domain.repository.store_repository import StoreRepository
from marketplace.domain.service.ownership_guard import StoreOwnershipGuard


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order", order_id)
        return OrderDTO.from_order(order)


class ListMyOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, user_id: str) -> list[OrderDTO]:
        return [OrderDTO.from_order(o) for o in self._order_repo.list_by_user(user_id)]


class ListStoreOrdersHandler:
    """Orders that contain at least one item sold by the caller's store."""

    def __init__(self, order_repo: OrderRepository, store_repo: StoreRepository) -> None:
        self._order_repo = order_repo
        self._store_repo = store_repo

    def handle(self, user_id: str) -> list[OrderDTO]:
        store = StoreOwnershipGuard(self._store_repo).store_of(user_id)
        return [OrderDTO.from_order(o) for o in self._order_repo.list_by_store(store.id)]
