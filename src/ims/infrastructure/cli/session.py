"""Per-invocation session: load, run one command, checkpoint."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import click

from ims.application.load_system_state import LoadSystemStateHandler
from ims.application.save_system_state import SaveSystemStateHandler
from ims.application.session import InventorySystem
from ims.domain.exceptions import DomainException
from ims.domain.repository.snapshot_repository import SnapshotRepository


def _repository(ctx: click.Context) -> SnapshotRepository:
    return ctx.find_root().obj["snapshot_repo"]


@contextmanager
def session(ctx: click.Context, *, checkpoint: bool = False) -> Iterator[InventorySystem]:
    """Yield the loaded system; save it afterwards if *checkpoint* is set.

    Domain errors become ClickExceptions. A rejected command has changed
    nothing, so nothing is saved.
    """
    repo = _repository(ctx)
    result = LoadSystemStateHandler(repo).handle()
    for message in result.diagnostics:
        click.echo(f"Warning: {message}", err=True)

    try:
        yield result.system
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if checkpoint:
        save_or_fail(repo, result.system)


def save_or_fail(repo: SnapshotRepository, system: InventorySystem) -> None:
    outcome = SaveSystemStateHandler(repo).handle(system)
    if not outcome.saved:
        raise click.ClickException("; ".join(outcome.errors))
