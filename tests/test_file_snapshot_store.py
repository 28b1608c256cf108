"""Tests for the file-backed snapshot store."""

from pathlib import Path

import pytest

from photo_catalog.adapters.file_snapshot_store import FileSnapshotStore
from photo_catalog.domain.snapshot import SnapshotRecord, UserRecord
from photo_catalog.errors import SaveErrorKind, SnapshotLoadError, SnapshotSaveError


def test_missing_file_loads_as_none(tmp_path: Path) -> None:
    store = FileSnapshotStore(tmp_path / "data" / "users.dat")

    assert store.load() is None


def test_save_creates_directory_and_overwrites(tmp_path: Path) -> None:
    path = tmp_path / "data" / "users.dat"
    store = FileSnapshotStore(path)

    store.save(SnapshotRecord(users=[UserRecord(username="alice")]))
    store.save(SnapshotRecord(users=[UserRecord(username="bob")]))

    loaded = store.load()
    assert [user.username for user in loaded.users] == ["bob"]
    assert [entry.name for entry in path.parent.iterdir()] == ["users.dat"]


def test_corrupt_file_raises_load_error(tmp_path: Path) -> None:
    path = tmp_path / "users.dat"
    path.write_bytes(b"\xac\xed\x00\x05 not json")

    with pytest.raises(SnapshotLoadError):
        FileSnapshotStore(path).load()


def test_unexpected_shape_raises_load_error(tmp_path: Path) -> None:
    path = tmp_path / "users.dat"
    path.write_text('{"version": 1, "users": [{"password": "x"}]}')

    with pytest.raises(SnapshotLoadError):
        FileSnapshotStore(path).load()


def test_unwritable_location_raises_save_error(tmp_path: Path) -> None:
    blocker = tmp_path / "data"
    blocker.write_text("a file where the directory should be")
    store = FileSnapshotStore(blocker / "users.dat")

    with pytest.raises(SnapshotSaveError) as excinfo:
        store.save(SnapshotRecord())

    assert excinfo.value.kind in {
        SaveErrorKind.IO_ERROR,
        SaveErrorKind.PERMISSION_DENIED,
    }


def test_timezone_aware_capture_time_raises_load_error(tmp_path: Path) -> None:
    path = tmp_path / "users.dat"
    path.write_text(
        '{"version": 1, "users": [{"username": "alice", "photos": ['
        '{"file_path": "a.jpg", "captured_at": "2024-01-01T10:00:00"},'
        '{"file_path": "b.jpg", "captured_at": "2024-01-02T10:00:00+00:00"}'
        '], "albums": [{"name": "trip", "photo_paths": ["a.jpg", "b.jpg"]}]}]}'
    )

    with pytest.raises(SnapshotLoadError):
        FileSnapshotStore(path).load()
