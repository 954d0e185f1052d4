"""User record operations."""

from dataclasses import dataclass
from typing import Protocol

from record_service.domain.models import UserRecord


class StoreOperationFailed(RuntimeError):
    """Raised when a statement against the store fails for any reason."""


class UserRepository(Protocol):
    """Persistence interface for user records."""

    def create(self, name: object, email: object) -> UserRecord:
        """Insert a row and return it with its generated id."""

    def list_all(self) -> list[UserRecord]:
        """Return every row in store-default order."""

    def update(self, record_id: str, name: object, email: object) -> UserRecord | None:
        """Overwrite name and email for a row, if present."""

    def delete(self, record_id: str) -> UserRecord | None:
        """Remove a row and return its prior contents, if present."""


@dataclass
class UserService:
    """Application service for the user CRUD endpoints."""

    repository: UserRepository

    def create_user(self, name: object, email: object) -> UserRecord:
        return self.repository.create(name, email)

    def list_users(self) -> list[UserRecord]:
        return self.repository.list_all()

    def update_user(
        self, record_id: str, name: object, email: object
    ) -> UserRecord | None:
        """Replace both fields of a user; partial updates are not supported."""
        return self.repository.update(record_id, name, email)

    def delete_user(self, record_id: str) -> UserRecord | None:
        return self.repository.delete(record_id)
