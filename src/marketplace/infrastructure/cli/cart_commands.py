"""CLI commands for the Cart aggregate."""

from __future__ import annotations

import click

from marketplace.application.dto import CartDTO, CartItemSpec
from marketplace.application.get_cart import GetCartHandler
from marketplace.application.sync_cart import SyncCartHandler
from marketplace.application.update_cart import UpdateCartHandler
from marketplace.domain.exceptions import DomainException
from marketplace.infrastructure.cli.context import (
    AppContext,
    actor_option,
    echo_json,
    json_option,
    pass_app,
)
from marketplace.infrastructure.cli.errors import domain_error


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse 'p1:2:s1,p2:1:s1' into CartItemSpec list."""
    specs: list[CartItemSpec] = []
    for triple in raw.split(","):
        triple = triple.strip()
        if not triple:
            continue
        parts = triple.split(":")
        if len(parts) != 3:
            raise click.BadParameter(
                f"Invalid item format '{triple}'. Expected 'ProductId:Quantity:StoreId'."
            )
        product_id, qty_str, store_id = (p.strip() for p in parts)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(CartItemSpec(product_id=product_id, quantity=qty, store_id=store_id))
    return specs


def _display_cart(dto: CartDTO, as_json: bool) -> None:
    if as_json:
        echo_json(dto.as_json())
        return
    if not dto.items:
        click.echo("Cart is empty.")
        return
    click.echo(f"{'Product':<10} {'Qty':>5} {'Store':>10}")
    click.echo("-" * 27)
    for item in dto.items:
        click.echo(f"{item.product_id:<10} {item.quantity:>5} {item.store_id:>10}")


@click.command("show")
@actor_option
@json_option
@pass_app
def cart_show(app: AppContext, actor: str, as_json: bool) -> None:
    """Show the caller's cart."""
    user = app.require_user(actor)
    _display_cart(GetCartHandler(cart_repo=app.repos.carts).handle(user.id), as_json)


@click.command("update")
@actor_option
@click.option("--items", default="", help="Items as 'ProductId:Qty:StoreId,...' (empty clears).")
@json_option
@pass_app
def cart_update(app: AppContext, actor: str, items: str, as_json: bool) -> None:
    """Replace the caller's cart with the given items."""
    user = app.require_user(actor)
    handler = UpdateCartHandler(cart_repo=app.repos.carts, product_repo=app.repos.products)

    try:
        dto = handler.handle(user.id, _parse_items(items))
    except DomainException as exc:
        raise domain_error(exc)

    _display_cart(dto, as_json)


@click.command("sync")
@actor_option
@click.option("--items", required=True, help="Local items as 'ProductId:Qty:StoreId,...'.")
@json_option
@pass_app
def cart_sync(app: AppContext, actor: str, items: str, as_json: bool) -> None:
    """Merge a locally held cart into the caller's cart (quantities add up)."""
    user = app.require_user(actor)
    handler = SyncCartHandler(cart_repo=app.repos.carts, product_repo=app.repos.products)

    try:
        dto = handler.handle(user.id, _parse_items(items))
    except DomainException as exc:
        raise domain_error(exc)

    _display_cart(dto, as_json)
