"""CLI commands for the shopping cart."""

from __future__ import annotations

import click

from storefront.application.clear_cart import ClearCartHandler
from storefront.application.dto import CartDTO
from storefront.application.get_cart import GetCartHandler
from storefront.application.remove_cart_item import RemoveCartItemHandler
from storefront.application.set_cart_item import SetCartItemHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import unit_of_work_factory

user_option = click.option("--user", "user_id", required=True, help="User ID.")


def _display_cart(dto: CartDTO) -> None:
    click.echo(f"Cart of {dto.user_id}  ({dto.item_count} item(s))")
    if not dto.items:
        click.echo("  (empty)")
        return

    click.echo(f"  {'ID':<6} {'Product':<20} {'Qty':>5} {'Price':>10} {'Stock':>7}")
    click.echo(f"  {'-'*52}")
    for line in dto.items:
        name = line.product_name or "(no longer available)"
        price = line.unit_price or "-"
        stock = "-" if line.stock is None else line.stock
        click.echo(
            f"  {line.product_id:<6} {name:<20} {line.quantity:>5} {price:>10} {stock:>7}"
        )


@click.command("show")
@user_option
def cart_show(user_id: str) -> None:
    """Show the user's cart (created empty on first use)."""
    handler = GetCartHandler(unit_of_work_factory())

    try:
        dto = handler.handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("set")
@user_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Quantity (at least 1).")
def cart_set(user_id: str, product_id: str, quantity: int) -> None:
    """Add a product to the cart or change its quantity."""
    handler = SetCartItemHandler(unit_of_work_factory())

    try:
        dto = handler.handle(user_id=user_id, product_id=product_id, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("remove")
@user_option
@click.option("--product", "product_id", required=True, help="Product ID.")
def cart_remove(user_id: str, product_id: str) -> None:
    """Remove a product from the cart."""
    handler = RemoveCartItemHandler(unit_of_work_factory())

    try:
        dto = handler.handle(user_id=user_id, product_id=product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("clear")
@user_option
def cart_clear(user_id: str) -> None:
    """Remove every item from the cart."""
    try:
        ClearCartHandler(unit_of_work_factory()).handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart of {user_id} cleared.")
