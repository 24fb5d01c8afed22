"""Application service: store queries."""

from __future__ import annotations

from marketplace.application.dto import StoreDTO
from marketplace.domain.exceptions import EntityNotFoundError
from marketplace.domain.repository.store_repository import StoreRepository
from marketplace.domain.service.ownership_guard import StoreOwnershipGuard


class ShowStoreHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def mine(self, user_id: str) -> StoreDTO:
        return StoreDTO.from_store(StoreOwnershipGuard(self._store_repo).store_of(user_id))

    def by_id(self, store_id: str) -> StoreDTO:
        store = self._store_repo.get_by_id(store_id)
        if store is None:
            raise EntityNotFoundError("Store", store_id)
        return StoreDTO.from_store(store)

    def list_all(self) -> list[StoreDTO]:
        return [StoreDTO.from_store(s) for s in self._store_repo.list_all()]
