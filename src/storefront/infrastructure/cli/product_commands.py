"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.product import ProductImage
from storefront.domain.model.user import Role
from storefront.infrastructure.bootstrap import unit_of_work_factory

ROLE_CHOICE = click.Choice([r.value for r in Role], case_sensitive=False)

actor_option = click.option("--as-user", "actor_id", required=True, help="Acting user ID.")
role_option = click.option("--role", required=True, type=ROLE_CHOICE, help="Acting user's role.")


@click.command("add")
@actor_option
@role_option
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", default=0, show_default=True, type=int, help="Units in stock.")
@click.option("--description", default="", help="Free-text description.")
@click.option("--image", "image_urls", multiple=True, help="Image URL (repeatable).")
@click.option("--category", "category_id", default=None, help="Category ID.")
def product_add(
    actor_id: str,
    role: str,
    name: str,
    price: str,
    stock: int,
    description: str,
    image_urls: tuple[str, ...],
    category_id: str | None,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(unit_of_work_factory())

    try:
        product = handler.handle(
            actor_id=actor_id,
            actor_role=Role.parse(role),
            name=name,
            price=price,
            stock=stock,
            description=description,
            images=[ProductImage(public_id=url, url=url) for url in image_urls],
            category_id=category_id,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added at {product.price} "
        f"({product.stock} in stock)"
    )


@click.command("list")
@click.option("--owner", "owner_id", default=None, help="Only products of this manager.")
def product_list(owner_id: str | None) -> None:
    """List products in the catalog."""
    handler = ListProductsHandler(unit_of_work_factory())

    try:
        products = handler.handle(owner_id=owner_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Stock':>7}")
    click.echo("-" * 46)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {str(p.price):>10} {p.stock:>7}")


@click.command("update")
@actor_option
@role_option
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--stock", default=None, type=int, help="New stock level.")
@click.option("--name", default=None, help="New name.")
def product_update(
    actor_id: str,
    role: str,
    product_id: str,
    price: str | None,
    stock: int | None,
    name: str | None,
) -> None:
    """Update a product's price, stock or name."""
    if price is None and stock is None and name is None:
        raise click.UsageError("Nothing to update: pass --price, --stock or --name")

    handler = UpdateProductHandler(unit_of_work_factory())

    try:
        product = handler.handle(
            actor_id=actor_id,
            actor_role=Role.parse(role),
            product_id=product_id,
            price=price,
            stock=stock,
            name=name,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' now {product.price} "
        f"({product.stock} in stock)"
    )


@click.command("delete")
@actor_option
@role_option
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(actor_id: str, role: str, product_id: str) -> None:
    """Remove a product from the catalog."""
    handler = DeleteProductHandler(unit_of_work_factory())

    try:
        handler.handle(actor_id=actor_id, actor_role=Role.parse(role), product_id=product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")
