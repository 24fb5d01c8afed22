"""CLI commands for categories."""

from __future__ import annotations

import click

from marketplace.application.add_category import AddCategoryHandler
from marketplace.application.dto import CategoryDTO
from marketplace.application.update_category import DeleteCategoryHandler, UpdateCategoryHandler
from marketplace.domain.exceptions import DomainException
from marketplace.domain.model.user import UserRole
from marketplace.infrastructure.cli.context import (
    AppContext,
    actor_option,
    echo_json,
    json_option,
    pass_app,
)
from marketplace.infrastructure.cli.errors import domain_error


@click.command("add")
@actor_option
@click.option("--name", required=True, help="Category name.")
@click.option("--description", required=True, help="Category description.")
@json_option
@pass_app
def category_add(app: AppContext, actor: str, name: str, description: str, as_json: bool) -> None:
    """Create a category (admin only)."""
    app.require_user(actor, UserRole.ADMIN)

    try:
        dto = AddCategoryHandler(category_repo=app.repos.categories).handle(name, description)
    except DomainException as exc:
        raise domain_error(exc)

    if as_json:
        echo_json(dto.as_json())
        return
    click.echo(f"Category #{dto.id} '{dto.name}' added")


@click.command("list")
@json_option
@pass_app
def category_list(app: AppContext, as_json: bool) -> None:
    """List all categories."""
    dtos = [CategoryDTO.from_category(c) for c in app.repos.categories.list_all()]

    if as_json:
        echo_json([dto.as_json() for dto in dtos])
        return
    if not dtos:
        click.echo("No categories found.")
        return
    click.echo(f"{'ID':<6} {'Name':<20} Description")
    click.echo("-" * 50)
    for dto in dtos:
        click.echo(f"{dto.id:<6} {dto.name:<20} {dto.description}")


@click.command("update")
@actor_option
@click.option("--id", "category_id", required=True, help="Category ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@pass_app
def category_update(
    app: AppContext,
    actor: str,
    category_id: str,
    name: str | None,
    description: str | None,
) -> None:
    """Edit a category (admin only)."""
    app.require_user(actor, UserRole.ADMIN)
    handler = UpdateCategoryHandler(category_repo=app.repos.categories)

    try:
        dto = handler.handle(category_id, name=name, description=description)
    except DomainException as exc:
        raise domain_error(exc)

    click.echo(f"Category #{dto.id} updated")


@click.command("delete")
@actor_option
@click.option("--id", "category_id", required=True, help="Category ID.")
@pass_app
def category_delete(app: AppContext, actor: str, category_id: str) -> None:
    """Delete a category (admin only)."""
    app.require_user(actor, UserRole.ADMIN)

    try:
        DeleteCategoryHandler(category_repo=app.repos.categories).handle(category_id)
    except DomainException as exc:
        raise domain_error(exc)

    click.echo(f"Category #{category_id} deleted")
