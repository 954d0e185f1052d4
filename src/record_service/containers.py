"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from sqlalchemy import create_engine

from record_service.adapters.sql_schema import init_schema
from record_service.adapters.sql_user_repository import SqlUserRepository
from record_service.config import Settings
from record_service.services.users import UserService

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    prepare_resources: Callable[[], Awaitable[None]]
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    engine = create_engine(resolved_settings.sqlalchemy_url())
    user_service = UserService(SqlUserRepository(engine))

    async def prepare_resources() -> None:
        if resolved_settings.init_schema:
            init_schema(engine)

    async def close_resources() -> None:
        engine.dispose()
        logger.info("Database connection pool disposed")

    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        prepare_resources=prepare_resources,
        close_resources=close_resources,
    )
