from __future__ import annotations

import logging
from pathlib import Path

import click

from ims.infrastructure.bootstrap import snapshot_repository
from ims.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_search,
    product_update,
)
from ims.infrastructure.cli.report_commands import (
    report_inventory,
    report_low_stock,
    report_sales,
)
from ims.infrastructure.cli.sale_commands import sale_record
from ims.infrastructure.cli.session import save_or_fail, session


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="IMS_DATA_DIR",
    default=None,
    help="Directory holding the inventory and sales snapshots.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, verbose: bool) -> None:
    """IMS: Inventory & Sales Tracker"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj.setdefault("snapshot_repo", snapshot_repository(data_dir))


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def sale() -> None:
    """Record sales."""


@cli.group()
def report() -> None:
    """Inventory and sales reports."""


@cli.command("checkpoint")
@click.pass_context
def checkpoint(ctx: click.Context) -> None:
    """Save both collections now."""
    with session(ctx) as system:
        save_or_fail(ctx.obj["snapshot_repo"], system)
    click.echo(
        f"System state saved: {len(system.store)} products, "
        f"{len(system.ledger)} sales records."
    )


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_search)
product.add_command(product_update)
sale.add_command(sale_record)
report.add_command(report_inventory)
report.add_command(report_low_stock)
report.add_command(report_sales)
