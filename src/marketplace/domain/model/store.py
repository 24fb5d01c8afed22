"""Store aggregate.

A store is opened by a user with the STORE role and stays PENDING until an
administrator reviews it. Only approved stores may list products.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from marketplace.domain.exceptions import ValidationError


class StoreStatus(Enum):
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


@dataclass
class Store:
    """Aggregate root for a seller's storefront.

    Invariants:
    - ``owner_id`` never changes after creation
    - review transitions are PENDING -> APPROVED and PENDING -> REJECTED only
    """

    id: str
    name: str
    description: str
    owner_id: str
    status: StoreStatus = StoreStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_approved(self) -> bool:
        return self.status == StoreStatus.APPROVED

    def approve(self) -> None:
        self._review(StoreStatus.APPROVED)

    def reject(self) -> None:
        self._review(StoreStatus.REJECTED)

    def rename(self, name: str) -> None:
        if not name or not name.strip():
            raise ValidationError("Store name is required")
        self.name = name.strip()

    def describe(self, description: str) -> None:
        if not description or not description.strip():
            raise ValidationError("Store description is required")
        self.description = description

    def _review(self, outcome: StoreStatus) -> None:
        if self.status != StoreStatus.PENDING:
            raise ValidationError(
                f"Cannot mark store as {outcome.value}: current status is "
                f"{self.status.value}, expected PENDING"
            )
        self.status = outcome
