"""Photo search over a user's albums."""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from photo_catalog.domain.albums import Album
from photo_catalog.domain.photos import Photo
from photo_catalog.domain.users import User


class TagCombinator(Enum):
    """How a secondary tag criterion combines with the primary one."""

    AND = "and"
    OR = "or"


@dataclass(frozen=True)
class TagQuery:
    """A tag name/value pair to match ignoring case."""

    name: str
    value: str

    @property
    def is_empty(self) -> bool:
        return not self.name.strip() or not self.value.strip()

    def matches(self, photo: Photo) -> bool:
        return photo.has_tag(self.name.strip(), self.value.strip())


def search_by_date(user: User, start: date, end: date) -> list[Photo]:
    """Return photos captured on calendar days from ``start`` to ``end``.

    Both bounds are inclusive. An inverted range matches nothing.
    """
    return [
        photo for photo in user.photos() if start <= photo.captured_at.date() <= end
    ]


def search_by_tags(
    user: User,
    primary: TagQuery,
    secondary: TagQuery | None = None,
    combinator: TagCombinator = TagCombinator.AND,
) -> list[Photo]:
    """Return photos matching the primary tag and optionally a secondary one.

    A missing or blank secondary query leaves only the primary criterion.
    """
    if secondary is not None and secondary.is_empty:
        secondary = None

    def matches(photo: Photo) -> bool:
        first = primary.matches(photo)
        if secondary is None:
            return first
        if combinator is TagCombinator.AND:
            return first and secondary.matches(photo)
        return first or secondary.matches(photo)

    return [photo for photo in user.photos() if matches(photo)]


def create_album_from_results(
    user: User, name: str, photos: list[Photo]
) -> Album | None:
    """Store search results as a new album, or return None if the name is taken."""
    if not user.create_album(name):
        return None
    album = user.albums[name]
    for photo in photos:
        album.add_photo(photo)
    return album
