"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from marketplace.domain.exceptions import ConcurrentUpdateError
from marketplace.domain.model.order import (
    Order,
    OrderLineItem,
    OrderStatus,
    PaymentResult,
    ShippingAddress,
    StatusChange,
)
from marketplace.domain.model.value_objects import Money, Quantity
from marketplace.domain.repository.order_repository import OrderRepository
from marketplace.infrastructure.persistence.json_collection import JsonCollection


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._orders = JsonCollection(file_path)

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> str:
        return self._orders.next_id()

    def get_by_id(self, order_id: str) -> Order | None:
        raw = self._orders.find(order_id)
        return self._to_domain(raw) if raw is not None else None

    def list_by_user(self, user_id: str) -> list[Order]:
        return self._newest_first(
            self._to_domain(raw) for raw in self._orders.load() if raw["user"] == user_id
        )

    def list_by_store(self, store_id: str) -> list[Order]:
        return self._newest_first(
            self._to_domain(raw)
            for raw in self._orders.load()
            if any(item["store"] == store_id for item in raw["items"])
        )

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self.next_id()
        else:
            stored = self._orders.find(order.id)
            if stored is not None and stored.get("version", 0) != order.version:
                raise ConcurrentUpdateError("Order", order.id)

        order.version += 1
        self._orders.upsert(self._to_raw(order))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _newest_first(orders) -> list[Order]:
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    @staticmethod
    def _to_raw(order: Order) -> dict:
        payment = order.payment_result
        return {
            "id": order.id,
            "user": order.user_id,
            "items": [
                {
                    "product": item.product_id,
                    "name": item.product_name,
                    "quantity": item.quantity.value,
                    "price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                    "store": item.store_id,
                }
                for item in order.items
            ],
            "total": str(order.total.amount),
            "currency": order.total.currency,
            "shippingAddress": {
                "address": order.shipping_address.address,
                "city": order.shipping_address.city,
                "postalCode": order.shipping_address.postal_code,
                "country": order.shipping_address.country,
            },
            "status": order.status.value,
            "statusHistory": [
                {
                    "status": change.status.value,
                    "timestamp": change.timestamp.isoformat(),
                    "updatedBy": change.updated_by,
                }
                for change in order.status_history
            ],
            "paymentResult": (
                {
                    "id": payment.id,
                    "status": payment.status,
                    "update_time": payment.update_time,
                    "email_address": payment.email_address,
                }
                if payment is not None
                else None
            ),
            "createdAt": order.created_at.isoformat(),
            "version": order.version,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderLineItem(
                product_id=i["product"],
                product_name=i["name"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["price"]), i.get("currency", "USD")),
                store_id=i["store"],
            )
            for i in raw["items"]
        ]
        address = raw.get("shippingAddress") or {}
        payment = raw.get("paymentResult")
        return Order(
            id=raw["id"],
            user_id=raw["user"],
            items=items,
            total=Money(Decimal(raw["total"]), raw.get("currency", "USD")),
            shipping_address=ShippingAddress(
                address=address.get("address", ""),
                city=address.get("city", ""),
                postal_code=address.get("postalCode", ""),
                country=address.get("country", ""),
            ),
            status=OrderStatus(raw["status"]),
            status_history=[
                StatusChange(
                    status=OrderStatus(h["status"]),
                    timestamp=datetime.fromisoformat(h["timestamp"]),
                    updated_by=h.get("updatedBy"),
                )
                for h in raw.get("statusHistory", [])
            ],
            payment_result=(
                PaymentResult(
                    id=payment["id"],
                    status=payment["status"],
                    update_time=payment["update_time"],
                    email_address=payment["email_address"],
                )
                if payment
                else None
            ),
            created_at=datetime.fromisoformat(raw["createdAt"]),
            version=raw.get("version", 0),
        )
