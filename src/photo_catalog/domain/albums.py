"""Album domain model."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime

from photo_catalog.domain.photos import Photo


@dataclass(frozen=True)
class DateRange:
    """Earliest and latest capture time of a set of photos."""

    start: datetime
    end: datetime


@dataclass(frozen=True)
class AlbumSummary:
    """Listing view of an album."""

    name: str
    size: int
    date_range: DateRange | None


@dataclass(eq=False)
class Album:
    """Named, insertion-ordered collection of photos without duplicates."""

    name: str
    _photos: list[Photo] = field(default_factory=list, repr=False)

    def add_photo(self, photo: Photo) -> bool:
        """Append a photo unless one with the same path is already present."""
        if photo in self._photos:
            return False
        self._photos.append(photo)
        return True

    def remove_photo(self, photo: Photo) -> bool:
        if photo not in self._photos:
            return False
        self._photos.remove(photo)
        return True

    def contains(self, file_path: str) -> bool:
        return any(photo.file_path == file_path for photo in self._photos)

    def get_photo(self, file_path: str) -> Photo | None:
        for photo in self._photos:
            if photo.file_path == file_path:
                return photo
        return None

    def size(self) -> int:
        return len(self._photos)

    def date_range(self) -> DateRange | None:
        """Return the capture-time span, or None for an empty album."""
        if not self._photos:
            return None
        times = [photo.captured_at for photo in self._photos]
        return DateRange(start=min(times), end=max(times))

    def rename(self, new_name: str) -> None:
        """Change the display name; the owning user keeps the map key in sync."""
        self.name = new_name

    def summary(self) -> AlbumSummary:
        return AlbumSummary(
            name=self.name, size=self.size(), date_range=self.date_range()
        )

    def __len__(self) -> int:
        return len(self._photos)

    def __iter__(self) -> Iterator[Photo]:
        return iter(tuple(self._photos))
