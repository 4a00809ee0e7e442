"""CLI commands for checkout and the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.checkout import CheckoutHandler
from storefront.application.dto import OrderDTO
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import DomainException, StorageConflictError
from storefront.domain.model.order import OrderStatus
from storefront.domain.model.user import Role
from storefront.infrastructure.bootstrap import unit_of_work_factory
from storefront.infrastructure.cli.product_commands import ROLE_CHOICE


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"User:     {dto.user_id}")
    click.echo(f"Ship to:  {dto.address}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


@click.command("checkout")
@click.option("--user", "user_id", required=True, help="User ID.")
@click.option("--address", required=True, help="Shipping address.")
def checkout(user_id: str, address: str) -> None:
    """Place an order for everything in the user's cart."""
    handler = CheckoutHandler(unit_of_work_factory())

    try:
        dto = handler.handle(user_id=user_id, address=address)
    except StorageConflictError as exc:
        raise click.ClickException(f"{exc} (nothing was charged or reserved)")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Checkout complete.")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.option("--user", "user_id", default=None, help="Only show if owned by this user.")
def order_show(order_id: int, user_id: str | None) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(unit_of_work_factory())

    try:
        dto = handler.handle(order_id, user_id=user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("list")
@click.option("--user", "user_id", required=True, help="User ID.")
def order_list(user_id: str) -> None:
    """List a user's orders, newest first."""
    handler = ListOrdersHandler(unit_of_work_factory())

    try:
        orders = handler.handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Status':<10} {'Items':>6} {'Total':>12}  Created")
    click.echo("-" * 56)
    for dto in orders:
        count = sum(item.quantity for item in dto.items)
        click.echo(f"{dto.id:<6} {dto.status:<10} {count:>6} {dto.total:>12}  {dto.created_at}")


@click.command("status")
@click.option("--role", required=True, type=ROLE_CHOICE, help="Acting user's role.")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option(
    "--status",
    required=True,
    type=click.Choice([s.value for s in OrderStatus], case_sensitive=False),
    help="New status.",
)
def order_status(role: str, order_id: int, status: str) -> None:
    """Move an order to its next status."""
    handler = UpdateOrderStatusHandler(unit_of_work_factory())

    try:
        handler.handle(actor_role=Role.parse(role), order_id=order_id, status=status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} is now {status.lower()}.")
