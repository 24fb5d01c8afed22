"""Application service: catalog queries."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from marketplace.application.dto import ProductDTO
from marketplace.domain.exceptions import EntityNotFoundError, ValidationError
from marketplace.domain.repository.product_repository import ProductFilters, ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def by_id(self, product_id: str) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product", product_id)
        return ProductDTO.from_product(product)

    def by_store(self, store_id: str) -> list[ProductDTO]:
        return [ProductDTO.from_product(p) for p in self._product_repo.list_by_store(store_id)]

    def search(
        self,
        search: str | None = None,
        category_id: str | None = None,
        min_price: str | None = None,
        max_price: str | None = None,
    ) -> list[ProductDTO]:
        filters = ProductFilters(
            search=search or None,
            category_id=category_id or None,
            min_price=_parse_bound(min_price),
            max_price=_parse_bound(max_price),
        )
        return [ProductDTO.from_product(p) for p in self._product_repo.list_all(filters)]


def _parse_bound(raw: str | None) -> Decimal | None:
    if raw is None or raw == "":
        return None
    try:
        return Decimal(str(raw))
    except InvalidOperation as exc:
        raise ValidationError(f"Invalid price filter: {raw!r}") from exc
