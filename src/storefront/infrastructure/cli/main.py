import click

from storefront.infrastructure.cli.cart_commands import (
    cart_clear,
    cart_remove,
    cart_set,
    cart_show,
)
from storefront.infrastructure.cli.order_commands import (
    checkout,
    order_list,
    order_show,
    order_status,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_update,
)
from storefront.infrastructure.config import Settings
from storefront.infrastructure.logging import configure_logging


@click.group()
def cli() -> None:
    """Storefront: catalog, cart and checkout"""
    configure_logging(Settings.from_env())


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def cart() -> None:
    """Manage a user's cart."""


@cli.group()
def order() -> None:
    """Inspect and advance orders."""


# Register subcommands
cli.add_command(checkout)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_update)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_set)
cart.add_command(cart_show)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)
