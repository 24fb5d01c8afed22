"""Application service: Update Store use case."""

from __future__ import annotations

from marketplace.application.dto import StoreDTO
from marketplace.domain.exceptions import ValidationError
from marketplace.domain.repository.store_repository import StoreRepository
from marketplace.domain.service.ownership_guard import StoreOwnershipGuard


class UpdateStoreHandler:

    def __init__(self, store_repo: StoreRepository) -> None:
        self._store_repo = store_repo

    def handle(
        self,
        user_id: str,
        name: str | None = None,
        description: str | None = None,
        store_id: str | None = None,
    ) -> StoreDTO:
        """Edit the caller's store.

        ``store_id`` names the store the caller believes they are editing;
        when omitted the caller's own store is used.
        """
        guard = StoreOwnershipGuard(self._store_repo)
        if store_id is None:
            store = guard.store_of(user_id)
        else:
            store = guard.authorize_store(user_id, store_id)

        if name is not None:
            store.rename(name)
            clash = self._store_repo.get_by_name(store.name)
            if clash is not None and clash.id != store.id:
                raise ValidationError(f"Store name '{store.name}' is already taken")
        if description is not None:
            store.describe(description)

        self._store_repo.save(store)
        return StoreDTO.from_store(store)
