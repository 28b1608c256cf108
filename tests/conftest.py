"""Shared test fixtures."""

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import pytest

from photo_catalog.config import Settings
from photo_catalog.domain.snapshot import SnapshotRecord
from photo_catalog.errors import SaveErrorKind, SnapshotSaveError
from photo_catalog.services.datastore import DataStore, SnapshotStore, StockConfig


def make_image(
    directory: Path, name: str, modified_at: datetime | None = None
) -> Path:
    """Write a placeholder image file, optionally with a fixed mtime."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_bytes(b"not-really-an-image")
    if modified_at is not None:
        timestamp = modified_at.timestamp()
        os.utime(path, (timestamp, timestamp))
    return path


@dataclass
class InMemorySnapshotStore(SnapshotStore):
    """Snapshot store that keeps the last saved record in memory."""

    snapshot: SnapshotRecord | None = None
    saves: list[SnapshotRecord] = field(default_factory=list)
    fail_with: SaveErrorKind | None = None

    def load(self) -> SnapshotRecord | None:
        return self.snapshot

    def save(self, snapshot: SnapshotRecord) -> None:
        if self.fail_with is not None:
            raise SnapshotSaveError(self.fail_with, "save refused")
        self.snapshot = snapshot
        self.saves.append(snapshot)


@pytest.fixture(autouse=True)
def restore_catalog_logger() -> Iterator[None]:
    logger = logging.getLogger("photo_catalog")
    handlers, propagate, level = list(logger.handlers), logger.propagate, logger.level
    yield
    logger.handlers[:] = handlers
    logger.propagate = propagate
    logger.setLevel(level)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(data_dir=tmp_path / "data")


@pytest.fixture
def stock_dir(settings: Settings) -> Path:
    for index in range(5):
        make_image(settings.stock_dir, f"stock{index}.jpg")
    return settings.stock_dir


@pytest.fixture
def snapshot_store() -> InMemorySnapshotStore:
    return InMemorySnapshotStore()


@pytest.fixture
def datastore(
    settings: Settings, stock_dir: Path, snapshot_store: InMemorySnapshotStore
) -> DataStore:
    store = DataStore(store=snapshot_store, stock=StockConfig(directory=stock_dir))
    store.initialize()
    return store
