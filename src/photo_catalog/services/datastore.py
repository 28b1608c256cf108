"""User repository with snapshot persistence and stock seeding."""

import logging
import threading
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Protocol

from photo_catalog.adapters.stock_directory import scan_images
from photo_catalog.domain.photos import Photo
from photo_catalog.domain.snapshot import (
    SnapshotRecord,
    snapshot_from_users,
    users_from_snapshot,
)
from photo_catalog.domain.users import (
    STOCK_ALBUM,
    STOCK_USERNAME,
    User,
    normalize_username,
)
from photo_catalog.errors import SaveErrorKind, SnapshotError, SnapshotSaveError

_logger = logging.getLogger(__name__)


class SnapshotStore(Protocol):
    """Persistence interface for the whole user graph."""

    def load(self) -> SnapshotRecord | None:
        """Return the stored snapshot, or None when nothing was saved yet."""

    def save(self, snapshot: SnapshotRecord) -> None:
        """Overwrite the stored snapshot."""


class DataStoreState(Enum):
    """Lifecycle of a DataStore."""

    UNINITIALIZED = "uninitialized"
    LOADING = "loading"
    READY = "ready"
    SAVING = "saving"
    CLOSED = "closed"


@dataclass(frozen=True)
class SaveResult:
    """Outcome of a save for callers that prefer a value over an exception."""

    ok: bool
    error: SaveErrorKind | None = None
    message: str | None = None


@dataclass(frozen=True)
class StockConfig:
    """Where stock photos come from and the expected directory size."""

    directory: Path
    password: str = "stock"
    min_photos: int = 5
    max_photos: int = 10


@dataclass
class DataStore:
    """Owns every user for the lifetime of the process.

    Each public call holds a coarse lock; there are no multi-call transactions.
    Mutations made on returned User objects are persisted by calling save().
    """

    store: SnapshotStore
    stock: StockConfig
    state: DataStoreState = DataStoreState.UNINITIALIZED
    _users: dict[str, User] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def initialize(self) -> None:
        """Load the snapshot, falling back to an empty graph, then seed stock."""
        with self._lock:
            if self.state is not DataStoreState.UNINITIALIZED:
                raise RuntimeError(f"DataStore is already {self.state.value}")
            self.state = DataStoreState.LOADING
            self._users = self._load_users()
            self.state = DataStoreState.READY
            self._ensure_stock()

    def _load_users(self) -> dict[str, User]:
        try:
            snapshot = self.store.load()
            if snapshot is None:
                _logger.info("No snapshot found, starting with an empty catalog")
                return {}
            users = users_from_snapshot(snapshot)
        except (SnapshotError, OSError) as exc:
            _logger.warning("Failed to load snapshot, starting fresh: %s", exc)
            return {}
        _logger.info("Loaded snapshot with %s users", len(users))
        return users

    def _ensure_stock(self) -> None:
        stock_user = self._users.get(STOCK_USERNAME)
        if stock_user is None:
            _logger.info("Creating stock user")
            stock_user = User(username=STOCK_USERNAME, password=self.stock.password)
            self._users[STOCK_USERNAME] = stock_user
            self._seed_save("creating stock user")

        if stock_user.get_album(STOCK_ALBUM) is None:
            _logger.info("Creating stock album")
            stock_user.create_album(STOCK_ALBUM)
            self._seed_save("creating stock album")
        album = stock_user.albums[STOCK_ALBUM]

        if not self.stock.directory.is_dir():
            _logger.warning("Stock directory %s not found", self.stock.directory)
            return

        images = scan_images(self.stock.directory)
        added = 0
        for image in images:
            file_path = str(image)
            if album.contains(file_path):
                continue
            photo = stock_user.find_photo(file_path) or Photo.create(file_path)
            album.add_photo(photo)
            added += 1

        if not self.stock.min_photos <= len(images) <= self.stock.max_photos:
            _logger.warning(
                "Stock directory should contain between %s and %s photos (found %s)",
                self.stock.min_photos,
                self.stock.max_photos,
                len(images),
            )
        if added:
            _logger.info("Added %s stock photos", added)
            self._seed_save("adding stock photos")

    def _seed_save(self, action: str) -> None:
        result = self.persist()
        if not result.ok:
            _logger.error("Failed to save after %s: %s", action, result.message)

    def _require_ready(self) -> None:
        if self.state is not DataStoreState.READY:
            raise RuntimeError(
                f"DataStore is {self.state.value}; call initialize() first"
            )

    def save(self) -> None:
        """Overwrite the snapshot with the whole user graph.

        Raises SnapshotSaveError on failure; in-memory state stays usable.
        """
        with self._lock:
            self._require_ready()
            self.state = DataStoreState.SAVING
            try:
                self.store.save(snapshot_from_users(self._users))
            except OSError as exc:
                raise SnapshotSaveError.from_os_error(exc) from exc
            finally:
                self.state = DataStoreState.READY

    def persist(self) -> SaveResult:
        """Save and report the outcome as a SaveResult instead of raising."""
        try:
            self.save()
        except SnapshotSaveError as exc:
            return SaveResult(ok=False, error=exc.kind, message=str(exc))
        return SaveResult(ok=True)

    def get_user(self, username: str) -> User | None:
        with self._lock:
            self._require_ready()
            return self._users.get(normalize_username(username))

    def add_user(self, user: User) -> bool:
        """Register a user unless the name is taken, ignoring case."""
        with self._lock:
            self._require_ready()
            if user.key in self._users:
                return False
            self._users[user.key] = user
            return True

    def delete_user(self, username: str) -> bool:
        with self._lock:
            self._require_ready()
            return self._users.pop(normalize_username(username), None) is not None

    def usernames(self) -> list[str]:
        with self._lock:
            self._require_ready()
            return list(self._users)

    def close(self) -> None:
        """Write a final snapshot and refuse further calls."""
        with self._lock:
            self._require_ready()
            try:
                self.save()
            finally:
                self.state = DataStoreState.CLOSED
