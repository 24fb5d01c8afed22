"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from marketplace.domain.model.product import Product
from marketplace.domain.model.value_objects import Money
from marketplace.domain.repository.product_repository import ProductFilters, ProductRepository
from marketplace.infrastructure.persistence.json_collection import JsonCollection


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._products = JsonCollection(file_path)

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> str:
        return self._products.next_id()

    def get_by_id(self, product_id: str) -> Product | None:
        raw = self._products.find(product_id)
        return self._to_domain(raw) if raw is not None else None

    def list_all(self, filters: ProductFilters | None = None) -> list[Product]:
        products = [self._to_domain(raw) for raw in self._products.load()]
        if filters is None:
            return products
        return [p for p in products if filters.matches(p)]

    def list_by_store(self, store_id: str) -> list[Product]:
        return [
            self._to_domain(raw) for raw in self._products.load() if raw["store"] == store_id
        ]

    def save(self, product: Product) -> None:
        self._products.upsert(self._to_raw(product))

    def delete(self, product_id: str) -> None:
        self._products.remove(product_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "stock": product.stock,
            "store": product.store_id,
            "category": product.category_id,
            "images": list(product.images),
            "createdAt": product.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description", ""),
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            stock=raw["stock"],
            store_id=raw["store"],
            category_id=raw.get("category"),
            images=list(raw.get("images", [])),
            created_at=datetime.fromisoformat(raw["createdAt"]),
        )
