"""CLI commands for users."""

from __future__ import annotations

import click

from marketplace.application.register_user import RegisterUserHandler
from marketplace.domain.exceptions import DomainException
from marketplace.domain.model.user import UserRole
from marketplace.infrastructure.cli.context import AppContext, echo_json, json_option, pass_app
from marketplace.infrastructure.cli.errors import domain_error


@click.command("register")
@click.option("--email", required=True, help="Email address (unique).")
@click.option(
    "--role",
    default=UserRole.CLIENT.value,
    show_default=True,
    type=click.Choice([r.value for r in UserRole], case_sensitive=False),
    help="Role of the new user.",
)
@json_option
@pass_app
def user_register(app: AppContext, email: str, role: str, as_json: bool) -> None:
    """Register a user."""
    handler = RegisterUserHandler(user_repo=app.repos.users)

    try:
        dto = handler.handle(email=email, role=role)
    except DomainException as exc:
        raise domain_error(exc)

    if as_json:
        echo_json(dto.as_json())
        return
    click.echo(f"User #{dto.id} '{dto.email}' registered as {dto.role}")
