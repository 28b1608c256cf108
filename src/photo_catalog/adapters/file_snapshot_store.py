"""Snapshot store backed by a single JSON file."""

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from photo_catalog.domain.snapshot import SnapshotRecord
from photo_catalog.errors import SaveErrorKind, SnapshotLoadError, SnapshotSaveError
from photo_catalog.services.datastore import SnapshotStore


@dataclass
class FileSnapshotStore(SnapshotStore):
    """Reads and fully rewrites one snapshot file."""

    path: Path

    def load(self) -> SnapshotRecord | None:
        """Return the stored snapshot, or None when no file exists."""
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise SnapshotLoadError(f"Cannot read {self.path}: {exc}") from exc
        try:
            return SnapshotRecord.model_validate_json(raw)
        except ValidationError as exc:
            raise SnapshotLoadError(f"Corrupt snapshot {self.path}: {exc}") from exc

    def save(self, snapshot: SnapshotRecord) -> None:
        """Write the snapshot to a temporary file and swap it into place."""
        try:
            payload = snapshot.model_dump_json(indent=2)
        except ValueError as exc:
            raise SnapshotSaveError(SaveErrorKind.SERIALIZATION, str(exc)) from exc

        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as exc:
            raise SnapshotSaveError.from_os_error(exc) from exc
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
