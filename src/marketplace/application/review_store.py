"""Application service: administrative store review.

Approval unlocks product listing for the store; rejection is final.
"""

from __future__ import annotations

import structlog

from marketplace.application.dto import StoreDTO
from marketplace.domain.exceptions import EntityNotFoundError
from marketplace.domain.repository.store_repository import StoreRepository

logger = structlog.get_logger(__name__)


class ReviewStoreHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def approve(self, store_id: str) -> StoreDTO:
        store = self._get(store_id)
        store.approve()
        self._store_repo.save(store)
        logger.info("store.reviewed", store_id=store_id, status=store.status.value)
        return StoreDTO.from_store(store)

    def reject(self, store_id: str) -> StoreDTO:
        store = self._get(store_id)
        store.reject()
        self._store_repo.save(store)
        logger.info("store.reviewed", store_id=store_id, status=store.status.value)
        return StoreDTO.from_store(store)

    def _get(self, store_id: str):
        store = self._store_repo.get_by_id(store_id)
        if store is None:
            raise EntityNotFoundError("Store", store_id)
        return store
