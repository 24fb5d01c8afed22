"""Application service: Delete Product use case."""

from __future__ import annotations

import structlog

from marketplace.domain.exceptions import EntityNotFoundError
from marketplace.domain.repository.product_repository import ProductRepository
from marketplace.domain.repository.store_repository import StoreRepository
from marketplace.domain.service.ownership_guard import StoreOwnershipGuard

logger = structlog.get_logger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository, store_repo: StoreRepository) -> None:
        self._product_repo = product_repo
        self._store_repo = store_repo

    def handle(self, user_id: str, product_id: str) -> None:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product", product_id)

        StoreOwnershipGuard(self._store_repo).authorize_product(user_id, product)

        self._product_repo.delete(product_id)
        logger.info("product.deleted", product_id=product_id, user_id=user_id)
