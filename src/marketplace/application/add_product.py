"""Application service: Add Product use case.

Products are always created in the caller's own store, and only once
that store has been approved.
"""

from __future__ import annotations

import structlog

from marketplace.application.clock import Clock, utc_now
from marketplace.application.dto import ProductDTO
from marketplace.domain.exceptions import EntityNotFoundError
from marketplace.domain.model.product import Product
from marketplace.domain.model.value_objects import Money
from marketplace.domain.repository.category_repository import CategoryRepository
from marketplace.domain.repository.product_repository import ProductRepository
from marketplace.domain.repository.store_repository import StoreRepository
from marketplace.domain.service.ownership_guard import StoreOwnershipGuard

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        store_repo: StoreRepository,
        category_repo: CategoryRepository | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self._product_repo = product_repo
        self._store_repo = store_repo
        self._category_repo = category_repo
        self._clock = clock

    def handle(
        self,
        user_id: str,
        name: str,
        description: str,
        price: str,
        stock: int,
        images: list[str] | None = None,
        category_id: str | None = None,
    ) -> ProductDTO:
        store = StoreOwnershipGuard(self._store_repo).approved_store_of(user_id)

        if category_id is not None and self._category_repo is not None:
            if self._category_repo.get_by_id(category_id) is None:
                raise EntityNotFoundError("Category", category_id)

        product = Product.create(
            id=self._product_repo.next_id(),
            name=name,
            description=description,
            price=Money.of(price),
            stock=stock,
            store_id=store.id,
            category_id=category_id,
            images=images,
            created_at=self._clock(),
        )
        self._product_repo.save(product)

        logger.info("product.created", product_id=product.id, store_id=store.id)
        return ProductDTO.from_product(product)
