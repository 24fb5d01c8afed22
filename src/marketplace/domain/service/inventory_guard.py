"""Domain service: Inventory Guard.

Answers "can this much of that product be sold right now?" and, if so,
what the stock will be afterwards. It never writes; the caller persists
the decrement once every item of a request has passed.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from marketplace.domain.exceptions import EntityNotFoundError, InsufficientStockError
from marketplace.domain.model.value_objects import Money, Quantity
from marketplace.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class StockCheck:
    """Outcome of a passed stock check, carrying what an order line needs."""

    product_id: str
    product_name: str
    unit_price: Money
    store_id: str
    quantity: int
    remaining_stock: int


class InventoryGuard:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def check(self, product_id: str, quantity: int, already_requested: int = 0) -> StockCheck:
        """Validate a single (product, quantity) request against current stock.

        ``already_requested`` counts units of the same product claimed
        earlier in the same request.
        """
        qty = Quantity(quantity).value

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            logger.warning("stock.check_failed", product_id=product_id, reason="not_found")
            raise EntityNotFoundError("Product", product_id)

        wanted = already_requested + qty
        if product.stock < wanted:
            logger.warning(
                "stock.check_failed",
                product_id=product_id,
                requested=wanted,
                available=product.stock,
            )
            raise InsufficientStockError(
                product_id=product.id,
                product_name=product.name,
                requested=wanted,
                available=product.stock,
            )

        return StockCheck(
            product_id=product.id,
            product_name=product.name,
            unit_price=product.price,
            store_id=product.store_id,
            quantity=qty,
            remaining_stock=product.stock - wanted,
        )

    def check_all(self, items: list[tuple[str, int]]) -> list[StockCheck]:
        """Validate every (product_id, quantity) pair, in order.

        Repeated products are validated on their combined quantity; the
        last check for a product holds its final remaining stock.
        Fails on the first offending item.
        """
        claimed: dict[str, int] = {}
        checks: list[StockCheck] = []
        for product_id, quantity in items:
            check = self.check(product_id, quantity, claimed.get(product_id, 0))
            claimed[product_id] = claimed.get(product_id, 0) + check.quantity
            checks.append(check)
        return checks
