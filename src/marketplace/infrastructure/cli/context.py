"""Per-invocation state shared by every command: settings, repositories, caller."""

from __future__ import annotations

import json
from dataclasses import dataclass

import click

from marketplace.domain.model.user import User, UserRole
from marketplace.infrastructure.bootstrap import Repositories
from marketplace.infrastructure.cli.errors import forbidden
from marketplace.infrastructure.config import Settings
from marketplace.infrastructure.logging import bind_actor


@dataclass
class AppContext:
    settings: Settings
    repos: Repositories

    def require_user(self, user_id: str, *roles: UserRole) -> User:
        """Resolve the acting user and, if roles are given, gate on them."""
        user = self.repos.users.get_by_id(user_id)
        if user is None:
            raise forbidden(f"Unknown user '{user_id}'")
        if roles and user.role not in roles:
            raise forbidden(
                f"User role {user.role.value} is not authorized to perform this action"
            )
        bind_actor(user.id)
        return user


pass_app = click.make_pass_decorator(AppContext)

actor_option = click.option(
    "--as",
    "actor",
    required=True,
    envvar="MARKETPLACE_USER",
    help="ID of the acting user (or MARKETPLACE_USER).",
)

json_option = click.option(
    "--json", "as_json", is_flag=True, default=False, help="Print the result as JSON."
)


def echo_json(payload) -> None:
    click.echo(json.dumps(payload, indent=2))
