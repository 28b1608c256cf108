"""Persisted snapshot schema and conversion to and from the domain graph.

Records are plain pydantic models. Each user stores its photos once in a pool
keyed by file path; albums list the paths they contain, which restores the
shared Photo instances on load.
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from photo_catalog.domain.albums import Album
from photo_catalog.domain.photos import Photo
from photo_catalog.domain.tags import Tag
from photo_catalog.domain.users import User
from photo_catalog.errors import SnapshotLoadError

SNAPSHOT_VERSION = 1


class TagRecord(BaseModel):
    """Persisted tag."""

    name: str
    value: str


class PhotoRecord(BaseModel):
    """Persisted photo."""

    file_path: str
    caption: str = ""
    captured_at: datetime
    tags: list[TagRecord] = Field(default_factory=list)

    @field_validator("captured_at")
    @classmethod
    def require_naive_capture_time(cls, value: datetime) -> datetime:
        if value.tzinfo is not None:
            raise ValueError("captured_at must be a naive local datetime")
        return value


class AlbumRecord(BaseModel):
    """Persisted album referencing pooled photos by path."""

    name: str
    photo_paths: list[str] = Field(default_factory=list)


class UserRecord(BaseModel):
    """Persisted user with its photo pool."""

    username: str
    password: str = ""
    photos: list[PhotoRecord] = Field(default_factory=list)
    albums: list[AlbumRecord] = Field(default_factory=list)


class SnapshotRecord(BaseModel):
    """Whole user graph as written to disk."""

    version: int = SNAPSHOT_VERSION
    users: list[UserRecord] = Field(default_factory=list)


def user_to_record(user: User) -> UserRecord:
    photos = [
        PhotoRecord(
            file_path=photo.file_path,
            caption=photo.caption,
            captured_at=photo.captured_at,
            tags=[TagRecord(name=tag.name, value=tag.value) for tag in photo.tags],
        )
        for photo in user.photos()
    ]
    albums = [
        AlbumRecord(
            name=name,
            photo_paths=[photo.file_path for photo in album],
        )
        for name, album in user.albums.items()
    ]
    return UserRecord(
        username=user.username,
        password=user.password,
        photos=photos,
        albums=albums,
    )


def user_from_record(record: UserRecord) -> User:
    pool: dict[str, Photo] = {}
    for photo_record in record.photos:
        photo = Photo(
            file_path=photo_record.file_path,
            captured_at=photo_record.captured_at,
            caption=photo_record.caption,
        )
        for tag_record in photo_record.tags:
            photo.add_tag(Tag(name=tag_record.name, value=tag_record.value))
        pool[photo.file_path] = photo

    user = User(username=record.username, password=record.password)
    for album_record in record.albums:
        if album_record.name in user.albums:
            raise SnapshotLoadError(
                f"Duplicate album {album_record.name!r} for {record.username!r}"
            )
        album = Album(name=album_record.name)
        for path in album_record.photo_paths:
            photo = pool.get(path)
            if photo is None:
                raise SnapshotLoadError(
                    f"Album {album_record.name!r} references unknown photo {path!r}"
                )
            album.add_photo(photo)
        user.albums[album.name] = album
    return user


def snapshot_from_users(users: dict[str, User]) -> SnapshotRecord:
    """Convert the in-memory graph into a snapshot record."""
    return SnapshotRecord(users=[user_to_record(user) for user in users.values()])


def users_from_snapshot(snapshot: SnapshotRecord) -> dict[str, User]:
    """Rebuild the user map keyed by lowercased username."""
    if snapshot.version != SNAPSHOT_VERSION:
        raise SnapshotLoadError(
            f"Unsupported snapshot version {snapshot.version}, "
            f"expected {SNAPSHOT_VERSION}"
        )
    users: dict[str, User] = {}
    for record in snapshot.users:
        user = user_from_record(record)
        if user.key in users:
            raise SnapshotLoadError(f"Duplicate username {record.username!r}")
        users[user.key] = user
    return users
