"""CLI commands for read-only reports."""

from __future__ import annotations

import click

from ims.application.inventory_report import InventoryReportHandler
from ims.application.low_stock import LowStockHandler
from ims.application.sales_report import SalesReportHandler
from ims.domain.service.reporting import LOW_STOCK_THRESHOLD
from ims.infrastructure.cli.product_commands import display_products
from ims.infrastructure.cli.session import session


@click.command("inventory")
@click.pass_context
def report_inventory(ctx: click.Context) -> None:
    """Show every product and the total stock value."""
    with session(ctx) as system:
        report = InventoryReportHandler(system).handle()

    if not report.products:
        click.echo("Inventory is empty.")
        return

    display_products(report.products, "")
    click.echo()
    click.echo(
        f"Total Products: {report.product_count} | "
        f"Total Inventory Value: {report.total_value}"
    )


@click.command("sales")
@click.pass_context
def report_sales(ctx: click.Context) -> None:
    """Show every recorded sale and the total revenue."""
    with session(ctx) as system:
        report = SalesReportHandler(system).handle()

    if not report.sales:
        click.echo("No sales records found.")
        return

    click.echo(
        f"{'Product ID':<10} {'Product Name':<20} {'Qty Sold':>8} "
        f"{'Total':>12} {'Date':<10}"
    )
    click.echo("-" * 64)
    for s in report.sales:
        click.echo(
            f"{s.product_id:<10} {s.product_name:<20} {s.quantity_sold:>8} "
            f"{s.total_amount:>12} {s.sale_date:<10}"
        )
    click.echo("-" * 64)
    click.echo(f"Total Sales: {report.total_revenue}")


@click.command("low-stock")
@click.pass_context
def report_low_stock(ctx: click.Context) -> None:
    """List products at or below the low-stock threshold."""
    with session(ctx) as system:
        products = LowStockHandler(system).handle()
    display_products(
        products, f"No products at or below {LOW_STOCK_THRESHOLD} units."
    )
