"""Snapshot persistence errors."""

import errno
from enum import Enum

_DISK_FULL_ERRNOS = {errno.ENOSPC, getattr(errno, "EDQUOT", errno.ENOSPC)}


class SaveErrorKind(Enum):
    """Why a snapshot could not be written."""

    PERMISSION_DENIED = "permission_denied"
    DISK_FULL = "disk_full"
    IO_ERROR = "io_error"
    SERIALIZATION = "serialization"


class SnapshotError(Exception):
    """Base class for snapshot failures."""


class SnapshotLoadError(SnapshotError):
    """The snapshot exists but cannot be used."""


class SnapshotSaveError(SnapshotError):
    """The snapshot could not be written."""

    def __init__(self, kind: SaveErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind

    @classmethod
    def from_os_error(cls, exc: OSError) -> "SnapshotSaveError":
        """Classify an OS-level write failure."""
        if isinstance(exc, PermissionError):
            kind = SaveErrorKind.PERMISSION_DENIED
        elif exc.errno in _DISK_FULL_ERRNOS:
            kind = SaveErrorKind.DISK_FULL
        else:
            kind = SaveErrorKind.IO_ERROR
        return cls(kind, f"Failed to write snapshot: {exc}")
