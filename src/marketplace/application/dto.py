"""Data Transfer Objects: plain containers that cross layer boundaries.

Inputs describe what the caller asked for; outputs are what the calling
layer displays. ``as_json()`` renders the camelCase document shape the
HTTP API of this marketplace has always returned.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from marketplace.domain.model.cart import Cart
from marketplace.domain.model.category import Category
from marketplace.domain.model.order import Order
from marketplace.domain.model.product import Product
from marketplace.domain.model.store import Store
from marketplace.domain.model.user import User

_TIMESTAMP = "%Y-%m-%d %H:%M UTC"


# --- Inputs -------------------------------------------------------------------


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: a product ID and how many units of it to buy."""

    product_id: str
    quantity: int


@dataclass(frozen=True)
class ShippingAddressSpec:
    address: str = ""
    city: str = ""
    postal_code: str = ""
    country: str = ""


@dataclass(frozen=True)
class CartItemSpec:
    """Input: one line of a client-held cart."""

    product_id: str
    quantity: int
    store_id: str


@dataclass(frozen=True)
class ProductChanges:
    """Input: owner edits to a product. ``None`` means unchanged."""

    name: str | None = None
    description: str | None = None
    price: str | None = None
    stock: int | None = None
    images: list[str] | None = None
    category_id: str | None = None


# --- Outputs ------------------------------------------------------------------


@dataclass(frozen=True)
class OrderLineItemDTO:
    product_id: str
    product_name: str
    quantity: int
    unit_price: Decimal
    line_total: Decimal
    store_id: str


@dataclass(frozen=True)
class StatusChangeDTO:
    status: str
    timestamp: str
    updated_by: str | None


@dataclass(frozen=True)
class PaymentResultDTO:
    id: str
    status: str
    update_time: str
    email_address: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    user_id: str
    status: str
    items: list[OrderLineItemDTO]
    total: Decimal
    shipping_address: ShippingAddressSpec
    status_history: list[StatusChangeDTO]
    payment_result: PaymentResultDTO | None
    created_at: str

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        payment = order.payment_result
        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            user_id=order.user_id,
            status=order.status.value,
            items=[
                OrderLineItemDTO(
                    product_id=item.product_id,
                    product_name=item.product_name,
                    quantity=item.quantity.value,
                    unit_price=item.unit_price.amount,
                    line_total=item.line_total.amount,
                    store_id=item.store_id,
                )
                for item in order.items
            ],
            total=order.total.amount,
            shipping_address=ShippingAddressSpec(
                address=order.shipping_address.address,
                city=order.shipping_address.city,
                postal_code=order.shipping_address.postal_code,
                country=order.shipping_address.country,
            ),
            status_history=[
                StatusChangeDTO(
                    status=change.status.value,
                    timestamp=change.timestamp.isoformat(),
                    updated_by=change.updated_by,
                )
                for change in order.status_history
            ],
            payment_result=(
                PaymentResultDTO(
                    id=payment.id,
                    status=payment.status,
                    update_time=payment.update_time,
                    email_address=payment.email_address,
                )
                if payment is not None
                else None
            ),
            created_at=order.created_at.strftime(_TIMESTAMP),
        )

    def as_json(self) -> dict:
        return {
            "_id": self.id,
            "user": self.user_id,
            "items": [
                {
                    "product": item.product_id,
                    "name": item.product_name,
                    "quantity": item.quantity,
                    "price": float(item.unit_price),
                    "store": item.store_id,
                }
                for item in self.items
            ],
            "total": float(self.total),
            "shippingAddress": {
                "address": self.shipping_address.address,
                "city": self.shipping_address.city,
                "postalCode": self.shipping_address.postal_code,
                "country": self.shipping_address.country,
            },
            "status": self.status,
            "statusHistory": [
                {
                    "status": change.status,
                    "timestamp": change.timestamp,
                    "updatedBy": change.updated_by,
                }
                for change in self.status_history
            ],
            "paymentResult": (
                {
                    "id": self.payment_result.id,
                    "status": self.payment_result.status,
                    "update_time": self.payment_result.update_time,
                    "email_address": self.payment_result.email_address,
                }
                if self.payment_result is not None
                else None
            ),
            "createdAt": self.created_at,
        }


@dataclass(frozen=True)
class CartItemDTO:
    product_id: str
    quantity: int
    store_id: str


@dataclass(frozen=True)
class CartDTO:
    user_id: str
    items: list[CartItemDTO] = field(default_factory=list)
    id: str | None = None
    updated_at: str | None = None

    @staticmethod
    def from_cart(cart: Cart) -> CartDTO:
        return CartDTO(
            id=cart.id,
            user_id=cart.user_id,
            items=[
                CartItemDTO(
                    product_id=item.product_id,
                    quantity=item.quantity.value,
                    store_id=item.store_id,
                )
                for item in cart.items
            ],
            updated_at=cart.updated_at.strftime(_TIMESTAMP),
        )

    def as_json(self) -> dict:
        return {
            "_id": self.id,
            "user": self.user_id,
            "items": [
                {"product": i.product_id, "quantity": i.quantity, "store": i.store_id}
                for i in self.items
            ],
            "updatedAt": self.updated_at,
        }


@dataclass(frozen=True)
class StoreDTO:
    id: str
    name: str
    description: str
    owner_id: str
    status: str
    created_at: str

    @staticmethod
    def from_store(store: Store) -> StoreDTO:
        return StoreDTO(
            id=store.id,
            name=store.name,
            description=store.description,
            owner_id=store.owner_id,
            status=store.status.value,
            created_at=store.created_at.strftime(_TIMESTAMP),
        )

    def as_json(self) -> dict:
        return {
            "_id": self.id,
            "name": self.name,
            "description": self.description,
            "owner": self.owner_id,
            "status": self.status,
            "createdAt": self.created_at,
        }


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    description: str
    price: Decimal
    stock: int
    store_id: str
    category_id: str | None
    images: list[str]
    created_at: str

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            description=product.description,
            price=product.price.amount,
            stock=product.stock,
            store_id=product.store_id,
            category_id=product.category_id,
            images=list(product.images),
            created_at=product.created_at.strftime(_TIMESTAMP),
        )

    def as_json(self) -> dict:
        return {
            "_id": self.id,
            "name": self.name,
            "description": self.description,
            "price": float(self.price),
            "stock": self.stock,
            "store": self.store_id,
            "category": self.category_id,
            "images": list(self.images),
            "createdAt": self.created_at,
        }


@dataclass(frozen=True)
class CategoryDTO:
    id: str
    name: str
    description: str

    @staticmethod
    def from_category(category: Category) -> CategoryDTO:
        return CategoryDTO(id=category.id, name=category.name, description=category.description)

    def as_json(self) -> dict:
        return {"_id": self.id, "name": self.name, "description": self.description}


@dataclass(frozen=True)
class UserDTO:
    id: str
    email: str
    role: str

    @staticmethod
    def from_user(user: User) -> UserDTO:
        return UserDTO(id=user.id, email=user.email, role=user.role.value)

    def as_json(self) -> dict:
        return {"id": self.id, "email": self.email, "role": self.role}
