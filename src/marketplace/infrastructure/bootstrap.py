"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from marketplace.infrastructure.persistence.json_cart_repository import JsonCartRepository
from marketplace.infrastructure.persistence.json_category_repository import (
    JsonCategoryRepository,
)
from marketplace.infrastructure.persistence.json_order_repository import JsonOrderRepository
from marketplace.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from marketplace.infrastructure.persistence.json_store_repository import JsonStoreRepository
from marketplace.infrastructure.persistence.json_user_repository import JsonUserRepository


@dataclass(frozen=True)
class Repositories:
    users: JsonUserRepository
    stores: JsonStoreRepository
    categories: JsonCategoryRepository
    products: JsonProductRepository
    carts: JsonCartRepository
    orders: JsonOrderRepository


def repositories(data_dir: Path) -> Repositories:
    return Repositories(
        users=JsonUserRepository(data_dir / "users.json"),
        stores=JsonStoreRepository(data_dir / "stores.json"),
        categories=JsonCategoryRepository(data_dir / "categories.json"),
        products=JsonProductRepository(data_dir / "products.json"),
        carts=JsonCartRepository(data_dir / "carts.json"),
        orders=JsonOrderRepository(data_dir / "orders.json"),
    )
