"""JSON-file-backed implementation of CategoryRepository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from marketplace.domain.model.category import Category
from marketplace.domain.repository.category_repository import CategoryRepository
from marketplace.infrastructure.persistence.json_collection import JsonCollection


class JsonCategoryRepository(CategoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._categories = JsonCollection(file_path)

    def next_id(self) -> str:
        return self._categories.next_id()

    def get_by_id(self, category_id: str) -> Category | None:
        raw = self._categories.find(category_id)
        return self._to_domain(raw) if raw is not None else None

    def get_by_name(self, name: str) -> Category | None:
        for raw in self._categories.load():
            if raw["name"].lower() == name.strip().lower():
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Category]:
        return [self._to_domain(raw) for raw in self._categories.load()]

    def save(self, category: Category) -> None:
        self._categories.upsert(
            {
                "id": category.id,
                "name": category.name,
                "description": category.description,
                "createdAt": category.created_at.isoformat(),
            }
        )

    def delete(self, category_id: str) -> None:
        self._categories.remove(category_id)

    @staticmethod
    def _to_domain(raw: dict) -> Category:
        return Category(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description", ""),
            created_at=datetime.fromisoformat(raw["createdAt"]),
        )
