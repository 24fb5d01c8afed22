"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from marketplace.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique order ID."""

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def list_by_user(self, user_id: str) -> list[Order]:
        """Return a user's orders, newest first."""

    @abstractmethod
    def list_by_store(self, store_id: str) -> list[Order]:
        """Return orders containing at least one item of the store, newest first."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new order or conditionally overwrite an existing one.

        New orders get an ID. An existing order is written only if the
        stored version still equals ``order.version``; otherwise
        ConcurrentUpdateError is raised. A successful write increments
        ``order.version``.
        """
