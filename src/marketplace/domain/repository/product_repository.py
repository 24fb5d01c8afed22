"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure
layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from marketplace.domain.model.product import Product


@dataclass(frozen=True)
class ProductFilters:
    """Catalog search criteria. Unset fields do not filter."""

    search: str | None = None
    category_id: str | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None

    def matches(self, product: Product) -> bool:
        if self.search:
            needle = self.search.lower()
            if needle not in product.name.lower() and needle not in product.description.lower():
                return False
        if self.category_id and product.category_id != self.category_id:
            return False
        if self.min_price is not None and product.price.amount < self.min_price:
            return False
        if self.max_price is not None and product.price.amount > self.max_price:
            return False
        return True


class ProductRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique product ID."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self, filters: ProductFilters | None = None) -> list[Product]:
        """Return every product matching ``filters``."""

    @abstractmethod
    def list_by_store(self, store_id: str) -> list[Product]:
        """Return the products listed by a store."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Remove a product. Unknown IDs are ignored."""
