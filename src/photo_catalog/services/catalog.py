"""Album, photo and tag operations that persist after each change."""

import logging
from dataclasses import dataclass

from photo_catalog.domain.albums import Album
from photo_catalog.domain.photos import Photo
from photo_catalog.domain.tags import Tag, parse_tag
from photo_catalog.domain.users import User
from photo_catalog.services.datastore import DataStore
from photo_catalog.services.search import create_album_from_results

_logger = logging.getLogger(__name__)


@dataclass
class CatalogService:
    """Mutates a user's albums and saves the snapshot after every change.

    Validation failures return False or None. A failed save raises
    SnapshotSaveError after the in-memory change has been applied.
    """

    datastore: DataStore

    def create_album(self, user: User, name: str) -> bool:
        name = name.strip()
        if not name or not user.create_album(name):
            return False
        self.datastore.save()
        return True

    def delete_album(self, user: User, name: str) -> bool:
        if not user.delete_album(name):
            return False
        self.datastore.save()
        return True

    def rename_album(self, user: User, old_name: str, new_name: str) -> bool:
        new_name = new_name.strip()
        if not new_name or not user.rename_album(old_name, new_name):
            return False
        self.datastore.save()
        return True

    def add_photo(self, user: User, album_name: str, file_path: str) -> Photo | None:
        """Add a file to an album, reusing the user's existing Photo for the path.

        Returns None when the album is missing or already holds the photo.
        """
        album = user.get_album(album_name)
        if album is None:
            return None
        photo = user.find_photo(file_path) or Photo.create(file_path)
        if not album.add_photo(photo):
            return None
        self.datastore.save()
        return photo

    def remove_photo(self, user: User, album_name: str, file_path: str) -> bool:
        album = user.get_album(album_name)
        photo = album.get_photo(file_path) if album else None
        if album is None or photo is None:
            return False
        album.remove_photo(photo)
        self.datastore.save()
        return True

    def copy_photo(
        self, user: User, source_album: str, target_album: str, file_path: str
    ) -> bool:
        """Add the same Photo instance to another album of the user."""
        resolved = self._resolve_transfer(user, source_album, target_album, file_path)
        if resolved is None:
            return False
        _, target, photo = resolved
        if not target.add_photo(photo):
            return False
        self.datastore.save()
        return True

    def move_photo(
        self, user: User, source_album: str, target_album: str, file_path: str
    ) -> bool:
        resolved = self._resolve_transfer(user, source_album, target_album, file_path)
        if resolved is None:
            return False
        source, target, photo = resolved
        if not target.add_photo(photo):
            return False
        source.remove_photo(photo)
        self.datastore.save()
        return True

    def set_caption(self, photo: Photo, caption: str) -> None:
        photo.set_caption(caption)
        self.datastore.save()

    def add_tag(self, photo: Photo, tag: Tag | str) -> bool:
        """Attach a Tag or ``name:value`` text to a photo."""
        parsed = parse_tag(tag) if isinstance(tag, str) else tag
        if parsed is None or not parsed.name or not parsed.value:
            return False
        if not photo.add_tag(parsed):
            return False
        self.datastore.save()
        return True

    def remove_tag(self, photo: Photo, tag: Tag) -> bool:
        if not photo.remove_tag(tag):
            return False
        self.datastore.save()
        return True

    def save_search_results(
        self, user: User, name: str, photos: list[Photo]
    ) -> Album | None:
        """Persist search results as a new album owned by the user."""
        name = name.strip()
        if not name:
            return None
        album = create_album_from_results(user, name, photos)
        if album is None:
            return None
        _logger.info("Created album %r with %s photos", name, album.size())
        self.datastore.save()
        return album

    @staticmethod
    def _resolve_transfer(
        user: User, source_album: str, target_album: str, file_path: str
    ) -> tuple[Album, Album, Photo] | None:
        if source_album == target_album:
            return None
        source = user.get_album(source_album)
        target = user.get_album(target_album)
        if source is None or target is None:
            return None
        photo = source.get_photo(file_path)
        if photo is None:
            return None
        return source, target, photo
