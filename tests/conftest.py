"""Shared test fixtures."""

from collections.abc import Iterator
from dataclasses import dataclass, field

import pytest
from sqlalchemy import Engine, create_engine
from sqlalchemy.pool import StaticPool

from record_service.adapters.sql_schema import init_schema
from record_service.config import Settings
from record_service.containers import AppContainer
from record_service.domain.models import UserRecord
from record_service.services.users import (
    StoreOperationFailed,
    UserRepository,
    UserService,
)


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    rows: dict[int, UserRecord] = field(default_factory=dict)
    next_id: int = 1

    def create(self, name: object, email: object) -> UserRecord:
        if name is None or email is None:
            raise StoreOperationFailed("null value violates not-null constraint")
        record = UserRecord(id=self.next_id, name=str(name), email=str(email))
        self.rows[record.id] = record
        self.next_id += 1
        return record

    def list_all(self) -> list[UserRecord]:
        return list(self.rows.values())

    def update(self, record_id: str, name: object, email: object) -> UserRecord | None:
        key = int(record_id)
        if name is None or email is None:
            raise StoreOperationFailed("null value violates not-null constraint")
        if key not in self.rows:
            return None
        record = UserRecord(id=key, name=str(name), email=str(email))
        self.rows[key] = record
        return record

    def delete(self, record_id: str) -> UserRecord | None:
        return self.rows.pop(int(record_id), None)


@dataclass
class UnavailableUserRepository(UserRepository):
    """Repository whose store is unreachable."""

    def create(self, name: object, email: object) -> UserRecord:
        raise StoreOperationFailed("connection refused")

    def list_all(self) -> list[UserRecord]:
        raise StoreOperationFailed("connection refused")

    def update(self, record_id: str, name: object, email: object) -> UserRecord | None:
        raise StoreOperationFailed("connection refused")

    def delete(self, record_id: str) -> UserRecord | None:
        raise StoreOperationFailed("connection refused")


def make_container(settings: Settings, repository: UserRepository) -> AppContainer:
    async def prepare_resources() -> None:
        return None

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        user_service=UserService(repository),
        prepare_resources=prepare_resources,
        close_resources=close_resources,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(database_url="sqlite://")


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def container(
    settings: Settings, user_repository: InMemoryUserRepository
) -> AppContainer:
    return make_container(settings, user_repository)


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_schema(engine)
    yield engine
    engine.dispose()
