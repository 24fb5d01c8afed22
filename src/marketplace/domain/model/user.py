"""User aggregate.

Credentials live outside this system; a user here is an identity with a
role that the calling layer uses for coarse-grained route gating.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from marketplace.domain.exceptions import ValidationError


class UserRole(Enum):
    CLIENT = "CLIENT"
    STORE = "STORE"
    ADMIN = "ADMIN"


@dataclass
class User:

    id: str
    email: str
    role: UserRole = UserRole.CLIENT
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def normalize_email(email: str) -> str:
        if not email or not email.strip():
            raise ValidationError("Email is required")
        normalized = email.strip().lower()
        if "@" not in normalized:
            raise ValidationError(f"Invalid email address: '{email}'")
        return normalized
