"""Table definitions for the user store."""

import logging

from sqlalchemy import Column, Engine, Integer, MetaData, String, Table

logger = logging.getLogger(__name__)

metadata = MetaData()

users_table = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False),
)


def init_schema(engine: Engine) -> None:
    """Create the users table if it does not exist."""
    metadata.create_all(engine, tables=[users_table])
    logger.info("DB schema ready")
