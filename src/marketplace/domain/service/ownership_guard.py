"""Domain service: Store Ownership Guard.

Resolves the caller's store and makes sure store-scoped resources are
only mutated by the user who owns the store.
"""

from __future__ import annotations

import structlog

from marketplace.domain.exceptions import (
    NoStoreError,
    NotAuthorizedError,
    StoreNotApprovedError,
)
from marketplace.domain.model.product import Product
from marketplace.domain.model.store import Store
from marketplace.domain.repository.store_repository import StoreRepository

logger = structlog.get_logger(__name__)


class StoreOwnershipGuard:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def store_of(self, user_id: str) -> Store:
        store = self._store_repo.get_by_owner(user_id)
        if store is None:
            logger.warning("ownership.denied", user_id=user_id, reason="no_store")
            raise NoStoreError(user_id)
        return store

    def approved_store_of(self, user_id: str) -> Store:
        """The caller's store, provided an administrator has approved it."""
        store = self.store_of(user_id)
        if not store.is_approved:
            logger.warning(
                "ownership.denied",
                user_id=user_id,
                store_id=store.id,
                reason="store_not_approved",
            )
            raise StoreNotApprovedError(store.id, store.status.value)
        return store

    def authorize_product(self, user_id: str, product: Product) -> Store:
        store = self.store_of(user_id)
        if store.id != product.store_id:
            logger.warning(
                "ownership.denied",
                user_id=user_id,
                product_id=product.id,
                reason="not_owner",
            )
            raise NotAuthorizedError(
                f"Not authorized to modify product '{product.id}'"
            )
        return store

    def authorize_store(self, user_id: str, store_id: str) -> Store:
        store = self.store_of(user_id)
        if store.id != store_id:
            logger.warning(
                "ownership.denied",
                user_id=user_id,
                store_id=store_id,
                reason="not_owner",
            )
            raise NotAuthorizedError(f"Not authorized to modify store '{store_id}'")
        return store
