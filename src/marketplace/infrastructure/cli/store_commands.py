"""CLI commands for the Store aggregate."""

from __future__ import annotations

import click

from marketplace.application.create_store import CreateStoreHandler
from marketplace.application.dto import StoreDTO
from marketplace.application.review_store import ReviewStoreHandler
from marketplace.application.show_store import ShowStoreHandler
from marketplace.application.update_store import UpdateStoreHandler
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


def _display_store(dto: StoreDTO, as_json: bool) -> None:
    if as_json:
        echo_json(dto.as_json())
        return
    click.echo(f"Store #{dto.id} '{dto.name}'  (status={dto.status})")
    click.echo(f"Owner:   {dto.owner_id}")
    click.echo(f"Created: {dto.created_at}")
    click.echo(dto.description)


@click.command("create")
@actor_option
@click.option("--name", required=True, help="Store name (unique).")
@click.option("--description", required=True, help="Store description.")
@json_option
@pass_app
def store_create(app: AppContext, actor: str, name: str, description: str, as_json: bool) -> None:
    """Open a store for the caller; it waits for admin approval."""
    user = app.require_user(actor, UserRole.STORE)
    handler = CreateStoreHandler(store_repo=app.repos.stores)

    try:
        dto = handler.handle(user.id, name=name, description=description)
    except DomainException as exc:
        raise domain_error(exc)

    _display_store(dto, as_json)


@click.command("mine")
@actor_option
@json_option
@pass_app
def store_mine(app: AppContext, actor: str, as_json: bool) -> None:
    """Show the caller's store."""
    user = app.require_user(actor, UserRole.STORE)

    try:
        dto = ShowStoreHandler(store_repo=app.repos.stores).mine(user.id)
    except DomainException as exc:
        raise domain_error(exc)

    _display_store(dto, as_json)


@click.command("update")
@actor_option
@click.option("--name", default=None, help="New store name.")
@click.option("--description", default=None, help="New description.")
@json_option
@pass_app
def store_update(
    app: AppContext,
    actor: str,
    name: str | None,
    description: str | None,
    as_json: bool,
) -> None:
    """Edit the caller's store."""
    user = app.require_user(actor, UserRole.STORE)
    handler = UpdateStoreHandler(store_repo=app.repos.stores)

    try:
        dto = handler.handle(user.id, name=name, description=description)
    except DomainException as exc:
        raise domain_error(exc)

    _display_store(dto, as_json)


@click.command("list")
@json_option
@pass_app
def store_list(app: AppContext, as_json: bool) -> None:
    """List all stores."""
    dtos = ShowStoreHandler(store_repo=app.repos.stores).list_all()

    if as_json:
        echo_json([dto.as_json() for dto in dtos])
        return
    if not dtos:
        click.echo("No stores found.")
        return
    click.echo(f"{'ID':<6} {'Name':<24} {'Owner':<8} {'Status':<10}")
    click.echo("-" * 50)
    for dto in dtos:
        click.echo(f"{dto.id:<6} {dto.name:<24} {dto.owner_id:<8} {dto.status:<10}")


@click.command("approve")
@actor_option
@click.option("--id", "store_id", required=True, help="Store ID.")
@json_option
@pass_app
def store_approve(app: AppContext, actor: str, store_id: str, as_json: bool) -> None:
    """Approve a pending store (admin only)."""
    app.require_user(actor, UserRole.ADMIN)

    try:
        dto = ReviewStoreHandler(store_repo=app.repos.stores).approve(store_id)
    except DomainException as exc:
        raise domain_error(exc)

    _display_store(dto, as_json)


@click.command("reject")
@actor_option
@click.option("--id", "store_id", required=True, help="Store ID.")
@json_option
@pass_app
def store_reject(app: AppContext, actor: str, store_id: str, as_json: bool) -> None:
    """Reject a pending store (admin only)."""
    app.require_user(actor, UserRole.ADMIN)

    try:
        dto = ReviewStoreHandler(store_repo=app.repos.stores).reject(store_id)
    except DomainException as exc:
        raise domain_error(exc)

    _display_store(dto, as_json)
