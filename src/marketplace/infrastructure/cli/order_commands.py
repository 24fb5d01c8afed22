"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from marketplace.application.create_order import CreateOrderHandler
from marketplace.application.dto import OrderDTO, OrderItemSpec, ShippingAddressSpec
from marketplace.application.show_order import (
    ListMyOrdersHandler,
    ListStoreOrdersHandler,
    ShowOrderHandler,
)
from marketplace.application.update_order_status import UpdateOrderStatusHandler
from marketplace.domain.exceptions import DomainException
from marketplace.domain.model.order import OrderStatus
from marketplace.domain.model.user import UserRole
from marketplace.infrastructure.cli.context import (
    AppContext,
    actor_option,
    echo_json,
    json_option,
    pass_app,
)
from marketplace.infrastructure.cli.errors import domain_error


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'p1:3,p2:5' into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(OrderItemSpec(product_id=product_id.strip(), quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"User:    {dto.user_id}")
    click.echo(f"Created: {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} "
            f"{'$' + format(item.unit_price, '.2f'):>10} {'$' + format(item.line_total, '.2f'):>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {'$' + format(dto.total, '.2f'):>20}")
    if dto.status_history:
        click.echo()
        click.echo("  History:")
        for change in dto.status_history:
            click.echo(f"    {change.timestamp}  {change.status:<10} by {change.updated_by}")


def _display_list(dtos: list[OrderDTO]) -> None:
    if not dtos:
        click.echo("No orders found.")
        return
    click.echo(f"{'ID':<6} {'Status':<10} {'Items':>5} {'Total':>12}  Created")
    click.echo("-" * 56)
    for dto in dtos:
        click.echo(
            f"{dto.id:<6} {dto.status:<10} {len(dto.items):>5} "
            f"{'$' + format(dto.total, '.2f'):>12}  {dto.created_at}"
        )


@click.command("create")
@actor_option
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option("--address", default="", help="Street and number.")
@click.option("--city", default="", help="City.")
@click.option("--postal-code", default="", help="Postal code.")
@click.option("--country", default="", help="Country.")
@json_option
@pass_app
def order_create(
    app: AppContext,
    actor: str,
    items: str,
    address: str,
    city: str,
    postal_code: str,
    country: str,
    as_json: bool,
) -> None:
    """Place an order (stock is decremented, payment is simulated)."""
    user = app.require_user(actor)
    specs = _parse_items(items)

    handler = CreateOrderHandler(
        order_repo=app.repos.orders,
        product_repo=app.repos.products,
    )

    try:
        dto = handler.handle(
            user_id=user.id,
            item_specs=specs,
            shipping_address=ShippingAddressSpec(
                address=address, city=city, postal_code=postal_code, country=country
            ),
        )
    except DomainException as exc:
        raise domain_error(exc)

    if as_json:
        echo_json(dto.as_json())
        return
    click.echo(f"Order #{dto.id} created  (status={dto.status})")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@json_option
@pass_app
def order_show(app: AppContext, order_id: str, as_json: bool) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=app.repos.orders)

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise domain_error(exc)

    if as_json:
        echo_json(dto.as_json())
        return
    _display_order(dto)


@click.command("mine")
@actor_option
@json_option
@pass_app
def order_mine(app: AppContext, actor: str, as_json: bool) -> None:
    """List the caller's orders, newest first."""
    user = app.require_user(actor)
    dtos = ListMyOrdersHandler(order_repo=app.repos.orders).handle(user.id)

    if as_json:
        echo_json([dto.as_json() for dto in dtos])
        return
    _display_list(dtos)


@click.command("store")
@actor_option
@json_option
@pass_app
def order_store(app: AppContext, actor: str, as_json: bool) -> None:
    """List orders containing items of the caller's store."""
    user = app.require_user(actor, UserRole.STORE)
    handler = ListStoreOrdersHandler(order_repo=app.repos.orders, store_repo=app.repos.stores)

    try:
        dtos = handler.handle(user.id)
    except DomainException as exc:
        raise domain_error(exc)

    if as_json:
        echo_json([dto.as_json() for dto in dtos])
        return
    _display_list(dtos)


@click.command("status")
@actor_option
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option(
    "--status",
    required=True,
    type=click.Choice([s.value for s in OrderStatus], case_sensitive=False),
    help="New status.",
)
@json_option
@pass_app
def order_status(app: AppContext, actor: str, order_id: str, status: str, as_json: bool) -> None:
    """Change an order's status and record it in the history."""
    user = app.require_user(actor)
    handler = UpdateOrderStatusHandler(order_repo=app.repos.orders)

    try:
        dto = handler.handle(order_id, status, user.id)
    except DomainException as exc:
        raise domain_error(exc)

    if as_json:
        echo_json(dto.as_json())
        return
    click.echo(f"Order #{dto.id} is now {dto.status}.")
