"""Application service: Create Store use case.

A user may own at most one store. New stores start PENDING and cannot
list products until an administrator approves them.
"""

from __future__ import annotations

import structlog

from marketplace.application.clock import Clock, utc_now
from marketplace.application.dto import StoreDTO
from marketplace.domain.exceptions import DuplicateStoreError, ValidationError
from marketplace.domain.model.store import Store
from marketplace.domain.repository.store_repository import StoreRepository

logger = structlog.get_logger(__name__)


class CreateStoreHandler:

    def __init__(self, store_repo: StoreRepository, clock: Clock = utc_now) -> None:
        self._store_repo = store_repo
        self._clock = clock

    def handle(self, user_id: str, name: str, description: str) -> StoreDTO:
        if self._store_repo.get_by_owner(user_id) is not None:
            logger.warning("store.rejected", user_id=user_id, reason="duplicate_store")
            raise DuplicateStoreError(user_id)

        store = Store(
            id=self._store_repo.next_id(),
            name="",
            description="",
            owner_id=user_id,
            created_at=self._clock(),
        )
        store.rename(name)
        store.describe(description)

        if self._store_repo.get_by_name(store.name) is not None:
            raise ValidationError(f"Store name '{store.name}' is already taken")

        self._store_repo.save(store)
        logger.info("store.created", store_id=store.id, owner_id=user_id)
        return StoreDTO.from_store(store)
