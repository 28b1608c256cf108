"""User accounts and their albums."""

from collections.abc import Iterator
from dataclasses import dataclass, field

from photo_catalog.domain.albums import Album
from photo_catalog.domain.photos import Photo

STOCK_USERNAME = "stock"
STOCK_ALBUM = "stock"
ADMIN_USERNAME = "admin"
RESERVED_USERNAMES = frozenset({ADMIN_USERNAME, STOCK_USERNAME})


def normalize_username(username: str) -> str:
    """Return the case-insensitive storage key for a username."""
    return username.lower()


@dataclass(eq=False)
class User:
    """An account owning albums keyed by exact album name."""

    username: str
    password: str = ""
    albums: dict[str, Album] = field(default_factory=dict)

    @property
    def key(self) -> str:
        return normalize_username(self.username)

    @property
    def is_stock(self) -> bool:
        return self.key == STOCK_USERNAME

    def check_password(self, candidate: str) -> bool:
        """Plain equality check; not a security mechanism."""
        return self.password == candidate

    def get_album(self, name: str) -> Album | None:
        return self.albums.get(name)

    def album_names(self) -> list[str]:
        return list(self.albums)

    def is_protected_album(self, name: str) -> bool:
        return self.is_stock and name == STOCK_ALBUM

    def create_album(self, name: str) -> bool:
        if name in self.albums:
            return False
        self.albums[name] = Album(name=name)
        return True

    def delete_album(self, name: str) -> bool:
        if self.is_protected_album(name):
            return False
        return self.albums.pop(name, None) is not None

    def rename_album(self, old_name: str, new_name: str) -> bool:
        """Move an album under a new name; nothing changes when a check fails."""
        if self.is_protected_album(old_name):
            return False
        if old_name not in self.albums or new_name in self.albums:
            return False
        album = self.albums.pop(old_name)
        album.rename(new_name)
        self.albums[new_name] = album
        return True

    def find_photo(self, file_path: str) -> Photo | None:
        """Return the photo already catalogued for this path in any album."""
        for album in self.albums.values():
            photo = album.get_photo(file_path)
            if photo is not None:
                return photo
        return None

    def photos(self) -> Iterator[Photo]:
        """Yield each distinct photo once, in album order."""
        seen: set[str] = set()
        for album in self.albums.values():
            for photo in album:
                if photo.file_path in seen:
                    continue
                seen.add(photo.file_path)
                yield photo
