"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from marketplace.domain.model.user import User, UserRole
from marketplace.domain.repository.user_repository import UserRepository
from marketplace.infrastructure.persistence.json_collection import JsonCollection


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._users = JsonCollection(file_path)

    def next_id(self) -> str:
        return self._users.next_id()

    def get_by_id(self, user_id: str) -> User | None:
        raw = self._users.find(user_id)
        return self._to_domain(raw) if raw is not None else None

    def get_by_email(self, email: str) -> User | None:
        raw = self._users.find_first(email=email.strip().lower())
        return self._to_domain(raw) if raw is not None else None

    def save(self, user: User) -> None:
        self._users.upsert(
            {
                "id": user.id,
                "email": user.email,
                "role": user.role.value,
                "createdAt": user.created_at.isoformat(),
            }
        )

    @staticmethod
    def _to_domain(raw: dict) -> User:
        return User(
            id=raw["id"],
            email=raw["email"],
            role=UserRole(raw.get("role", UserRole.CLIENT.value)),
            created_at=datetime.fromisoformat(raw["createdAt"]),
        )
