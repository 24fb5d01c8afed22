"""JSON-file-backed implementation of StoreRepository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from marketplace.domain.model.store import Store, StoreStatus
from marketplace.domain.repository.store_repository import StoreRepository
from marketplace.infrastructure.persistence.json_collection import JsonCollection


class JsonStoreRepository(StoreRepository):

    def __init__(self, file_path: Path) -> None:
        self._stores = JsonCollection(file_path)

    def next_id(self) -> str:
        return self._stores.next_id()

    def get_by_id(self, store_id: str) -> Store | None:
        raw = self._stores.find(store_id)
        return self._to_domain(raw) if raw is not None else None

    def get_by_owner(self, user_id: str) -> Store | None:
        raw = self._stores.find_first(owner=user_id)
        return self._to_domain(raw) if raw is not None else None

    def get_by_name(self, name: str) -> Store | None:
        for raw in self._stores.load():
            if raw["name"].lower() == name.strip().lower():
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Store]:
        return [self._to_domain(raw) for raw in self._stores.load()]

    def save(self, store: Store) -> None:
        self._stores.upsert(self._to_raw(store))

    @staticmethod
    def _to_raw(store: Store) -> dict:
        return {
            "id": store.id,
            "name": store.name,
            "description": store.description,
            "owner": store.owner_id,
            "status": store.status.value,
            "createdAt": store.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Store:
        return Store(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description", ""),
            owner_id=raw["owner"],
            status=StoreStatus(raw.get("status", StoreStatus.PENDING.value)),
            created_at=datetime.fromisoformat(raw["createdAt"]),
        )
