"""Application service: Update Product use case.

Only the owner of the product's store may edit it. Existing orders are
unaffected: they captured name and price snapshots at creation time.
"""

from __future__ import annotations

import structlog

from marketplace.application.dto import ProductChanges, ProductDTO
from marketplace.domain.exceptions import EntityNotFoundError
from marketplace.domain.model.value_objects import Money
from marketplace.domain.repository.category_repository import CategoryRepository
from marketplace.domain.repository.product_repository import ProductRepository
from marketplace.domain.repository.store_repository import StoreRepository
from marketplace.domain.service.ownership_guard import StoreOwnershipGuard

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        store_repo: StoreRepository,
        category_repo: CategoryRepository | None = None,
    ) -> None:
        self._product_repo = product_repo
        self._store_repo = store_repo
        self._category_repo = category_repo

    def handle(self, user_id: str, product_id: str, changes: ProductChanges) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product", product_id)

        StoreOwnershipGuard(self._store_repo).authorize_product(user_id, product)

        if changes.category_id is not None and self._category_repo is not None:
            if self._category_repo.get_by_id(changes.category_id) is None:
                raise EntityNotFoundError("Category", changes.category_id)

        product.apply_changes(
            name=changes.name,
            description=changes.description,
            price=Money.of(changes.price) if changes.price is not None else None,
            stock=changes.stock,
            images=changes.images,
            category_id=changes.category_id,
        )
        self._product_repo.save(product)

        logger.info("product.updated", product_id=product_id, user_id=user_id)
        return ProductDTO.from_product(product)
