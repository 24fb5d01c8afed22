"""Application service: Create Order use case.

Turns a list of requested (product, quantity) pairs into a paid order:

  Phase 1: every item goes through the Inventory Guard. Nothing is
           written until all of them pass, so a rejected order leaves
           stock exactly as it was.
  Phase 2: stock is decremented product by product, line items are
           built from the name/price/store snapshots taken in phase 1,
           the (simulated) payment is charged and the order is saved.
"""

from __future__ import annotations

import structlog

from marketplace.application.clock import Clock, utc_now
from marketplace.application.dto import OrderDTO, OrderItemSpec, ShippingAddressSpec
from marketplace.domain.exceptions import EmptyOrderError, EntityNotFoundError
from marketplace.domain.model.order import Order, OrderLineItem, ShippingAddress
from marketplace.domain.model.value_objects import Quantity
from marketplace.domain.repository.order_repository import OrderRepository
from marketplace.domain.repository.product_repository import ProductRepository
from marketplace.domain.service.inventory_guard import InventoryGuard, StockCheck
from marketplace.domain.service.payment import PaymentGateway, SimulatedPaymentGateway

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        payment_gateway: PaymentGateway | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._payment_gateway = payment_gateway or SimulatedPaymentGateway()
        self._clock = clock

    def handle(
        self,
        user_id: str,
        item_specs: list[OrderItemSpec] | None,
        shipping_address: ShippingAddressSpec | None = None,
    ) -> OrderDTO:
        if not item_specs:
            logger.warning("order.rejected", user_id=user_id, reason="empty")
            raise EmptyOrderError()

        # Phase 1: validate everything, write nothing
        guard = InventoryGuard(self._product_repo)
        checks = guard.check_all([(spec.product_id, spec.quantity) for spec in item_specs])

        # Phase 2: commit stock, then build and persist the order
        self._commit_stock(checks)

        now = self._clock()
        line_items = [
            OrderLineItem(
                product_id=check.product_id,
                product_name=check.product_name,  # <-- name snapshot
                quantity=Quantity(check.quantity),
                unit_price=check.unit_price,  # <-- price snapshot
                store_id=check.store_id,
            )
            for check in checks
        ]
        order = Order.create(
            user_id=user_id,
            items=line_items,
            shipping_address=self._to_address(shipping_address),
            created_at=now,
        )
        order.mark_paid(self._payment_gateway.charge(order.total, now), now)
        self._order_repo.save(order)

        logger.info(
            "order.created",
            order_id=order.id,
            user_id=user_id,
            items=len(order.items),
            total=str(order.total.amount),
        )
        return OrderDTO.from_order(order)

    def _commit_stock(self, checks: list[StockCheck]) -> None:
        """Decrement each product once by its combined quantity, in first-seen order."""
        combined: dict[str, int] = {}
        for check in checks:
            combined[check.product_id] = combined.get(check.product_id, 0) + check.quantity

        for product_id, quantity in combined.items():
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError("Product", product_id)
            previous = product.stock
            product.decrement_stock(quantity)
            self._product_repo.save(product)
            logger.info(
                "stock.decremented",
                product_id=product_id,
                previous=previous,
                remaining=product.stock,
            )

    @staticmethod
    def _to_address(spec: ShippingAddressSpec | None) -> ShippingAddress:
        if spec is None:
            return ShippingAddress()
        return ShippingAddress(
            address=spec.address,
            city=spec.city,
            postal_code=spec.postal_code,
            country=spec.country,
        )
