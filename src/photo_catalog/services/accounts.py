"""Login and administrator user management."""

from dataclasses import dataclass
from enum import Enum

from photo_catalog.domain.users import (
    ADMIN_USERNAME,
    RESERVED_USERNAMES,
    User,
    normalize_username,
)
from photo_catalog.services.datastore import DataStore


class Role(Enum):
    """What a logged-in session may do."""

    ADMIN = "admin"
    USER = "user"


@dataclass(frozen=True)
class LoginResult:
    """Successful login; ``user`` is None for the administrator."""

    role: Role
    user: User | None = None


@dataclass
class AccountService:
    """Application service for logins and account lifecycle."""

    datastore: DataStore

    def login(self, username: str, password: str = "") -> LoginResult | None:
        """Resolve a login, returning None for unknown users or bad passwords."""
        key = normalize_username(username.strip())
        if not key:
            return None
        if key == ADMIN_USERNAME:
            return LoginResult(role=Role.ADMIN)
        user = self.datastore.get_user(key)
        if user is None or not user.check_password(password):
            return None
        return LoginResult(role=Role.USER, user=user)

    def list_usernames(self) -> list[str]:
        return self.datastore.usernames()

    def create_user(self, username: str, password: str = "") -> User | None:
        """Create and save a user; reserved or duplicate names are rejected."""
        username = username.strip()
        if not username or normalize_username(username) in RESERVED_USERNAMES:
            return None
        user = User(username=username, password=password)
        if not self.datastore.add_user(user):
            return None
        self.datastore.save()
        return user

    def delete_user(self, username: str) -> bool:
        """Delete and save a user; reserved accounts cannot be deleted."""
        if normalize_username(username.strip()) in RESERVED_USERNAMES:
            return False
        if not self.datastore.delete_user(username.strip()):
            return False
        self.datastore.save()
        return True
