"""Order aggregate, the core of the domain.

An order owns immutable line items that snapshot product name, price and
store at purchase time. After creation only the status and its audit
trail change.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from marketplace.domain.exceptions import EmptyOrderError, ValidationError
from marketplace.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

    @staticmethod
    def parse(value: OrderStatus | str) -> OrderStatus:
        if isinstance(value, OrderStatus):
            return value
        try:
            return OrderStatus(str(value).strip().upper())
        except ValueError as exc:
            allowed = ", ".join(s.value for s in OrderStatus)
            raise ValidationError(
                f"Invalid order status '{value}' (expected one of {allowed})"
            ) from exc


@dataclass(frozen=True)
class OrderLineItem:
    """Price, name and store snapshot of a product at order-creation time."""

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money
    store_id: str

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass(frozen=True)
class ShippingAddress:
    address: str = ""
    city: str = ""
    postal_code: str = ""
    country: str = ""


@dataclass(frozen=True)
class StatusChange:
    status: OrderStatus
    timestamp: datetime
    updated_by: str | None


@dataclass(frozen=True)
class PaymentResult:
    id: str
    status: str
    update_time: str
    email_address: str


@dataclass
class Order:
    """Aggregate root for purchase orders.

    Use ``Order.create()`` for new orders. ``total`` is stored rather than
    derived so it stays exactly what the customer was charged.
    ``version`` backs the repository's conditional write.
    """

    id: str | None
    user_id: str
    items: list[OrderLineItem]
    total: Money
    shipping_address: ShippingAddress = field(default_factory=ShippingAddress)
    status: OrderStatus = OrderStatus.PENDING
    status_history: list[StatusChange] = field(default_factory=list)
    payment_result: PaymentResult | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version: int = 0

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        user_id: str,
        items: list[OrderLineItem],
        shipping_address: ShippingAddress | None = None,
        created_at: datetime | None = None,
    ) -> Order:
        if not items:
            raise EmptyOrderError()

        total = Money.zero()
        for item in items:
            total = total + item.line_total

        return Order(
            id=None,
            user_id=user_id,
            items=list(items),
            total=total,
            shipping_address=shipping_address or ShippingAddress(),
            created_at=created_at or datetime.now(timezone.utc),
        )

    # --- State transitions ----------------------------------------------------

    def record_status(
        self,
        status: OrderStatus,
        updated_by: str | None,
        at: datetime | None = None,
    ) -> StatusChange:
        """Set the status and append the change to the history.

        Any status may follow any other; callers that need transition
        rules enforce them before getting here.
        """
        change = StatusChange(
            status=status,
            timestamp=at or datetime.now(timezone.utc),
            updated_by=updated_by,
        )
        self.status_history.append(change)
        self.status = status
        return change

    def mark_paid(self, payment: PaymentResult, at: datetime | None = None) -> None:
        self.payment_result = payment
        self.record_status(OrderStatus.PAID, self.user_id, at)

    # --- Queries --------------------------------------------------------------

    def involves_store(self, store_id: str) -> bool:
        return any(item.store_id == store_id for item in self.items)
