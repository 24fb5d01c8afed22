"""Abstract repository for User aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from marketplace.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique user ID."""

    @abstractmethod
    def get_by_id(self, user_id: str) -> User | None:
        """Return a user by ID, or None."""

    @abstractmethod
    def get_by_email(self, email: str) -> User | None:
        """Return a user by normalized email, or None."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist a new or updated user."""
