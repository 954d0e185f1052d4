"""SQL-backed user repository."""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass

from sqlalchemy import Connection, Engine, text
from sqlalchemy.exc import SQLAlchemyError

from record_service.domain.models import UserRecord
from record_service.services.users import StoreOperationFailed, UserRepository

_INSERT_USER = text(
    "INSERT INTO users (name, email) VALUES (:name, :email) RETURNING id, name, email"
)
_SELECT_USERS = text("SELECT id, name, email FROM users")
_UPDATE_USER = text(
    "UPDATE users SET name = :name, email = :email WHERE id = :id "
    "RETURNING id, name, email"
)
_DELETE_USER = text("DELETE FROM users WHERE id = :id RETURNING id, name, email")


@dataclass
class SqlUserRepository(UserRepository):
    """Runs one parameterized statement per call on a pooled connection."""

    engine: Engine

    def create(self, name: object, email: object) -> UserRecord:
        """Insert a user row and return it."""
        with self._connection("create") as conn:
            row = conn.execute(_INSERT_USER, {"name": name, "email": email})
            return _to_record(row.mappings().one())

    def list_all(self) -> list[UserRecord]:
        """Return all user rows."""
        with self._connection("read") as conn:
            rows = conn.execute(_SELECT_USERS).mappings().all()
            return [_to_record(row) for row in rows]

    def update(self, record_id: str, name: object, email: object) -> UserRecord | None:
        """Overwrite a user row and return it, if it exists."""
        with self._connection("update") as conn:
            row = conn.execute(
                _UPDATE_USER, {"id": record_id, "name": name, "email": email}
            )
            return _to_optional_record(row.mappings().first())

    def delete(self, record_id: str) -> UserRecord | None:
        """Delete a user row and return its prior contents, if it existed."""
        with self._connection("delete") as conn:
            row = conn.execute(_DELETE_USER, {"id": record_id})
            return _to_optional_record(row.mappings().first())

    @contextmanager
    def _connection(self, operation: str) -> Iterator[Connection]:
        try:
            with self.engine.begin() as conn:
                yield conn
        except SQLAlchemyError as exc:
            raise StoreOperationFailed(f"User {operation} failed") from exc


def _to_record(row: Mapping[str, object]) -> UserRecord:
    return UserRecord(id=int(row["id"]), name=str(row["name"]), email=str(row["email"]))


def _to_optional_record(row: Mapping[str, object] | None) -> UserRecord | None:
    if row is None:
        return None
    return _to_record(row)
