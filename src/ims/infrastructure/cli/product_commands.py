"""CLI commands for products."""

from __future__ import annotations

import click

from ims.application.add_product import AddProductHandler
from ims.application.delete_product import DeleteProductHandler
from ims.application.dto import ProductDTO
from ims.application.list_products import ListProductsHandler
from ims.application.search_products import SearchProductsHandler
from ims.application.update_product import UpdateProductHandler
from ims.domain.model.inventory import ProductUpdate
from ims.infrastructure.cli.session import session


def display_products(products: list[ProductDTO], empty_message: str) -> None:
    """Shared table formatting for product listings."""
    if not products:
        click.echo(empty_message)
        return

    click.echo(
        f"{'ID':<6} {'Name':<20} {'Quantity':>8} {'Price':>10} "
        f"{'Category':<15} {'Last Restock':<12}"
    )
    click.echo("-" * 76)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<20} {p.quantity:>8} {p.price:>10} "
            f"{p.category:<15} {p.last_restock:<12}"
        )


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.option("--price", required=True, help="Unit price (e.g. 15.00).")
@click.option("--category", required=True, help="Product category.")
@click.pass_context
def product_add(
    ctx: click.Context, name: str, quantity: int, price: str, category: str
) -> None:
    """Add a new product to the inventory."""
    with session(ctx, checkpoint=True) as system:
        product = AddProductHandler(system).handle(
            name=name, quantity=quantity, price=price, category=category
        )
        click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--quantity", default=None, type=int, help="New stock level.")
@click.option("--price", default=None, help="New unit price.")
@click.option("--category", default=None, help="New category.")
@click.pass_context
def product_update(
    ctx: click.Context,
    product_id: int,
    name: str | None,
    quantity: int | None,
    price: str | None,
    category: str | None,
) -> None:
    """Update a product. Omitted fields keep their current value."""
    changes = ProductUpdate(name=name, quantity=quantity, price=price, category=category)
    with session(ctx, checkpoint=True) as system:
        product = UpdateProductHandler(system).handle(product_id, changes)
        click.echo(f"Product #{product.id} updated")
        display_products([product], "")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_context
def product_delete(ctx: click.Context, product_id: int) -> None:
    """Delete a product. Its past sales are kept."""
    with session(ctx, checkpoint=True) as system:
        DeleteProductHandler(system).handle(product_id)
        click.echo(f"Product #{product_id} deleted")


@click.command("list")
@click.pass_context
def product_list(ctx: click.Context) -> None:
    """List all products."""
    with session(ctx) as system:
        display_products(ListProductsHandler(system).handle(), "Inventory is empty.")


@click.command("search")
@click.option("--id", "product_id", type=int, default=None, help="Exact product ID.")
@click.option("--name", default=None, help="Case-insensitive name fragment.")
@click.option("--category", default=None, help="Case-insensitive category.")
@click.pass_context
def product_search(
    ctx: click.Context,
    product_id: int | None,
    name: str | None,
    category: str | None,
) -> None:
    """Search products by ID, name or category."""
    given = [v for v in (product_id, name, category) if v is not None]
    if len(given) != 1:
        raise click.UsageError("Give exactly one of --id, --name or --category.")

    with session(ctx) as system:
        handler = SearchProductsHandler(system)
        if product_id is not None:
            results = [handler.by_id(product_id)]
        elif name is not None:
            results = handler.by_name(name)
        else:
            results = handler.by_category(category)  # type: ignore[arg-type]
        display_products(results, "No products found.")
