"""CLI commands for sales."""

from __future__ import annotations

import click

from ims.application.record_sale import RecordSaleHandler
from ims.infrastructure.cli.session import session


@click.command("record")
@click.option("--product-id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units sold.")
@click.pass_context
def sale_record(ctx: click.Context, product_id: int, quantity: int) -> None:
    """Record a sale and take the units out of stock."""
    with session(ctx, checkpoint=True) as system:
        sale = RecordSaleHandler(system).handle(product_id=product_id, quantity=quantity)
        click.echo(
            f"Sale recorded: {sale.quantity_sold} x '{sale.product_name}'"
            f"  Total: {sale.total_amount}"
        )
