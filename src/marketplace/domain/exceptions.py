"""Domain-level exceptions.

Every business rule violation is a subclass of DomainException so the
calling layer can catch them uniformly, show the message, and map the
failure kind to its own status codes.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EmptyOrderError(ValidationError):
    """An order was requested without any line items."""

    def __init__(self) -> None:
        super().__init__("Order must contain at least one item")


class InsufficientStockError(ValidationError):
    """The requested quantity exceeds the product's current stock."""

    def __init__(
        self,
        product_id: str,
        product_name: str,
        requested: int,
        available: int,
    ) -> None:
        self.product_id = product_id
        self.product_name = product_name
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient stock for product: {product_name} "
            f"(requested {requested}, available {available})"
        )


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    def __init__(self, entity: str, entity_id: str) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found: '{entity_id}'")


class NoStoreError(DomainException):
    """The caller must own a store and does not."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(f"User '{user_id}' does not have a store")


class NotAuthorizedError(DomainException):
    """The caller does not own the resource they are trying to mutate."""


class StoreNotApprovedError(DomainException):
    """Products can only be listed by approved stores."""

    def __init__(self, store_id: str, status: str) -> None:
        self.store_id = store_id
        self.status = status
        super().__init__(
            f"Store '{store_id}' has not been approved yet (status={status})"
        )


class DuplicateStoreError(DomainException):
    """The caller already owns a store."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(f"User '{user_id}' already has a store")


class DuplicateUserError(DomainException):
    """A user with the same email is already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"User '{email}' already exists")


class ConcurrentUpdateError(DomainException):
    """The entity changed between load and save."""

    def __init__(self, entity: str, entity_id: str) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(
            f"{entity} '{entity_id}' was modified concurrently, reload and retry"
        )
