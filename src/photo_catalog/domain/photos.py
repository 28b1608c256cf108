"""Photo domain model."""

import os
from dataclasses import dataclass, field
from datetime import datetime

from photo_catalog.domain.tags import LOCATION_TAG, Tag

EPOCH = datetime.fromtimestamp(0)


def read_capture_time(file_path: str) -> datetime:
    """Return the file's modification time, or the epoch if it can't be read."""
    try:
        return datetime.fromtimestamp(os.path.getmtime(file_path))
    except (OSError, ValueError):
        return EPOCH


@dataclass(eq=False)
class Photo:
    """A catalogued image identified by its file path.

    The same instance is shared by every album of a user that references the
    path, so caption and tag edits are visible everywhere.
    """

    file_path: str
    captured_at: datetime
    caption: str = ""
    _tags: list[Tag] = field(default_factory=list, repr=False)

    @classmethod
    def create(cls, file_path: str) -> "Photo":
        """Create a photo dated from the file's last-modification time."""
        return cls(file_path=file_path, captured_at=read_capture_time(file_path))

    @property
    def tags(self) -> tuple[Tag, ...]:
        """Tags in insertion order."""
        return tuple(self._tags)

    def set_caption(self, text: str) -> None:
        self.caption = text

    def add_tag(self, tag: Tag) -> bool:
        """Attach a tag; a photo keeps at most one ``location`` tag."""
        if tag in self._tags:
            return False
        if tag.name.casefold() == LOCATION_TAG:
            self._tags = [
                existing
                for existing in self._tags
                if existing.name.casefold() != LOCATION_TAG
            ]
        self._tags.append(tag)
        return True

    def remove_tag(self, tag: Tag) -> bool:
        if tag not in self._tags:
            return False
        self._tags.remove(tag)
        return True

    def has_tag(self, name: str, value: str) -> bool:
        """Return True when any tag matches the pair ignoring case."""
        return any(tag.matches(name, value) for tag in self._tags)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Photo):
            return NotImplemented
        return self.file_path == other.file_path

    def __hash__(self) -> int:
        return hash(self.file_path)
