"""Application service: Update / Delete Category use cases."""

from __future__ import annotations

from marketplace.application.dto import CategoryDTO
from marketplace.domain.exceptions import EntityNotFoundError, ValidationError
from marketplace.domain.model.category import Category
from marketplace.domain.repository.category_repository import CategoryRepository


class UpdateCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(
        self,
        category_id: str,
        name: str | None = None,
        description: str | None = None,
    ) -> CategoryDTO:
        category = _get(self._category_repo, category_id)

        if name is not None:
            if not name.strip():
                raise ValidationError("Category name is required")
            clash = self._category_repo.get_by_name(name.strip())
            if clash is not None and clash.id != category.id:
                raise ValidationError(f"Category '{name.strip()}' already exists")
            category.name = name.strip()
        if description is not None:
            if not description.strip():
                raise ValidationError("Category description is required")
            category.description = description

        self._category_repo.save(category)
        return CategoryDTO.from_category(category)


class DeleteCategoryHandler:
    """Products keep pointing at a deleted category; listing by it just finds nothing."""

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, category_id: str) -> None:
        _get(self._category_repo, category_id)
        self._category_repo.delete(category_id)


def _get(repo: CategoryRepository, category_id: str) -> Category:
    category = repo.get_by_id(category_id)
    if category is None:
        raise EntityNotFoundError("Category", category_id)
    return category
