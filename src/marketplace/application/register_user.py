"""Application service: Register User use case.

Credentials are handled by the identity provider in front of this
service; here a user is an email plus a role.
"""

from __future__ import annotations

import structlog

from marketplace.application.clock import Clock, utc_now
from marketplace.application.dto import UserDTO
from marketplace.domain.exceptions import DuplicateUserError, ValidationError
from marketplace.domain.model.user import User, UserRole
from marketplace.domain.repository.user_repository import UserRepository

logger = structlog.get_logger(__name__)


class RegisterUserHandler:

    def __init__(self, user_repo: UserRepository, clock: Clock = utc_now) -> None:
        self._user_repo = user_repo
        self._clock = clock

    def handle(self, email: str, role: str = UserRole.CLIENT.value) -> UserDTO:
        normalized = User.normalize_email(email)
        try:
            user_role = UserRole(role.strip().upper())
        except ValueError as exc:
            raise ValidationError(f"Invalid role '{role}'") from exc

        if self._user_repo.get_by_email(normalized) is not None:
            raise DuplicateUserError(normalized)

        user = User(
            id=self._user_repo.next_id(),
            email=normalized,
            role=user_role,
            created_at=self._clock(),
        )
        self._user_repo.save(user)
        logger.info("user.registered", user_id=user.id, role=user_role.value)
        return UserDTO.from_user(user)
