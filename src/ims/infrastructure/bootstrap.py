"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from ims.infrastructure.persistence.json_snapshot_repository import (
    JsonSnapshotRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

INVENTORY_FILE = "inventory.json"
SALES_FILE = "sales.json"


def snapshot_repository(data_dir: Path | None = None) -> JsonSnapshotRepository:
    base = data_dir if data_dir is not None else DEFAULT_DATA_DIR
    return JsonSnapshotRepository(base / INVENTORY_FILE, base / SALES_FILE)
