"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from marketplace.application.add_product import AddProductHandler
from marketplace.application.delete_product import DeleteProductHandler
from marketplace.application.dto import ProductChanges, ProductDTO
from marketplace.application.show_product import ShowProductHandler
from marketplace.application.update_product import UpdateProductHandler
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


def _display_product(dto: ProductDTO, as_json: bool) -> None:
    if as_json:
        echo_json(dto.as_json())
        return
    click.echo(f"Product #{dto.id} '{dto.name}' at ${dto.price:.2f}  (stock={dto.stock})")
    click.echo(f"Store:    {dto.store_id}")
    if dto.category_id:
        click.echo(f"Category: {dto.category_id}")
    click.echo(dto.description)


@click.command("add")
@actor_option
@click.option("--name", required=True, help="Product name.")
@click.option("--description", required=True, help="Product description.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", required=True, type=int, help="Units in stock.")
@click.option("--category", "category_id", default=None, help="Category ID.")
@click.option("--image", "images", multiple=True, help="Image URL (repeatable).")
@json_option
@pass_app
def product_add(
    app: AppContext,
    actor: str,
    name: str,
    description: str,
    price: str,
    stock: int,
    category_id: str | None,
    images: tuple[str, ...],
    as_json: bool,
) -> None:
    """List a new product in the caller's approved store."""
    user = app.require_user(actor, UserRole.STORE)
    handler = AddProductHandler(
        product_repo=app.repos.products,
        store_repo=app.repos.stores,
        category_repo=app.repos.categories,
    )

    try:
        dto = handler.handle(
            user.id,
            name=name,
            description=description,
            price=price,
            stock=stock,
            images=list(images),
            category_id=category_id,
        )
    except DomainException as exc:
        raise domain_error(exc)

    _display_product(dto, as_json)


@click.command("list")
@click.option("--search", default=None, help="Text to look for in name or description.")
@click.option("--category", "category_id", default=None, help="Category ID.")
@click.option("--min-price", default=None, help="Lowest price.")
@click.option("--max-price", default=None, help="Highest price.")
@click.option("--store", "store_id", default=None, help="Only products of this store.")
@json_option
@pass_app
def product_list(
    app: AppContext,
    search: str | None,
    category_id: str | None,
    min_price: str | None,
    max_price: str | None,
    store_id: str | None,
    as_json: bool,
) -> None:
    """List products in the catalog."""
    handler = ShowProductHandler(product_repo=app.repos.products)

    try:
        if store_id is not None:
            dtos = handler.by_store(store_id)
        else:
            dtos = handler.search(
                search=search,
                category_id=category_id,
                min_price=min_price,
                max_price=max_price,
            )
    except DomainException as exc:
        raise domain_error(exc)

    if as_json:
        echo_json([dto.as_json() for dto in dtos])
        return
    if not dtos:
        click.echo("No products found.")
        return
    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Stock':>7} {'Store':>6}")
    click.echo("-" * 53)
    for p in dtos:
        click.echo(
            f"{p.id:<6} {p.name:<20} {'$' + format(p.price, '.2f'):>10} {p.stock:>7} {p.store_id:>6}"
        )


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@json_option
@pass_app
def product_show(app: AppContext, product_id: str, as_json: bool) -> None:
    """Show a single product."""
    try:
        dto = ShowProductHandler(product_repo=app.repos.products).by_id(product_id)
    except DomainException as exc:
        raise domain_error(exc)

    _display_product(dto, as_json)


@click.command("update")
@actor_option
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--stock", default=None, type=int, help="New stock level.")
@click.option("--category", "category_id", default=None, help="New category ID.")
@click.option("--image", "images", multiple=True, help="Replace images (repeatable).")
@json_option
@pass_app
def product_update(
    app: AppContext,
    actor: str,
    product_id: str,
    name: str | None,
    description: str | None,
    price: str | None,
    stock: int | None,
    category_id: str | None,
    images: tuple[str, ...],
    as_json: bool,
) -> None:
    """Edit a product of the caller's store."""
    user = app.require_user(actor, UserRole.STORE)
    handler = UpdateProductHandler(
        product_repo=app.repos.products,
        store_repo=app.repos.stores,
        category_repo=app.repos.categories,
    )
    changes = ProductChanges(
        name=name,
        description=description,
        price=price,
        stock=stock,
        images=list(images) if images else None,
        category_id=category_id,
    )

    try:
        dto = handler.handle(user.id, product_id, changes)
    except DomainException as exc:
        raise domain_error(exc)

    _display_product(dto, as_json)


@click.command("delete")
@actor_option
@click.option("--id", "product_id", required=True, help="Product ID.")
@pass_app
def product_delete(app: AppContext, actor: str, product_id: str) -> None:
    """Remove a product of the caller's store."""
    user = app.require_user(actor, UserRole.STORE)
    handler = DeleteProductHandler(product_repo=app.repos.products, store_repo=app.repos.stores)

    try:
        handler.handle(user.id, product_id)
    except DomainException as exc:
        raise domain_error(exc)

    click.echo(f"Product #{product_id} deleted.")
