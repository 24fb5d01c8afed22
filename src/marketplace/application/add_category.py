"""Application service: Add Category use case."""

from __future__ import annotations

from marketplace.application.clock import Clock, utc_now
from marketplace.application.dto import CategoryDTO
from marketplace.domain.exceptions import ValidationError
from marketplace.domain.model.category import Category
from marketplace.domain.repository.category_repository import CategoryRepository


class AddCategoryHandler:

    def __init__(self, category_repo: CategoryRepository, clock: Clock = utc_now) -> None:
        self._category_repo = category_repo
        self._clock = clock

    def handle(self, name: str, description: str) -> CategoryDTO:
        if not name or not name.strip():
            raise ValidationError("Category name is required")
        if not description or not description.strip():
            raise ValidationError("Category description is required")

        if self._category_repo.get_by_name(name.strip()) is not None:
            raise ValidationError(f"Category '{name.strip()}' already exists")

        category = Category(
            id=self._category_repo.next_id(),
            name=name.strip(),
            description=description,
            created_at=self._clock(),
        )
        self._category_repo.save(category)
        return CategoryDTO.from_category(category)
