from __future__ import annotations

from pathlib import Path

import click

from marketplace.infrastructure.bootstrap import repositories
from marketplace.infrastructure.cli.cart_commands import cart_show, cart_sync, cart_update
from marketplace.infrastructure.cli.category_commands import (
    category_add,
    category_delete,
    category_list,
    category_update,
)
from marketplace.infrastructure.cli.context import AppContext
from marketplace.infrastructure.cli.order_commands import (
    order_create,
    order_mine,
    order_show,
    order_status,
    order_store,
)
from marketplace.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from marketplace.infrastructure.cli.store_commands import (
    store_approve,
    store_create,
    store_list,
    store_mine,
    store_reject,
    store_update,
)
from marketplace.infrastructure.cli.user_commands import user_register
from marketplace.infrastructure.config import Settings
from marketplace.infrastructure.logging import configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the JSON collections (or MARKETPLACE_DATA_DIR).",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None) -> None:
    """Marketplace backend: stores, catalog, carts and orders."""
    settings = Settings.from_env().with_data_dir(data_dir)
    configure_logging(settings)
    ctx.obj = AppContext(settings=settings, repos=repositories(settings.data_dir))


@cli.group()
def user() -> None:
    """Manage users."""


@cli.group()
def store() -> None:
    """Manage stores."""


@cli.group()
def category() -> None:
    """Manage categories."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
user.add_command(user_register)
store.add_command(store_approve)
store.add_command(store_create)
store.add_command(store_list)
store.add_command(store_mine)
store.add_command(store_reject)
store.add_command(store_update)
category.add_command(category_add)
category.add_command(category_delete)
category.add_command(category_list)
category.add_command(category_update)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
cart.add_command(cart_show)
cart.add_command(cart_sync)
cart.add_command(cart_update)
order.add_command(order_create)
order.add_command(order_mine)
order.add_command(order_show)
order.add_command(order_status)
order.add_command(order_store)
