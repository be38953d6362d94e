"""Database initialization utilities."""

import asyncio
import logging
import sys

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

# Import models to register with IdentityBase.metadata
import gatehouse_identity.infrastructure.persistence.sqlalchemy.models  # noqa: F401
from gatehouse_config import configure_logging, get_settings
from gatehouse_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase

logger = logging.getLogger(__name__)


def _get_engine() -> AsyncEngine:
    """Get the database engine for initialization."""
    settings = get_settings()
    return create_async_engine(
        settings.database_url,
        echo=False,
        pool_pre_ping=True,
    )


async def create_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create the users and roles tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    own_engine = engine is None
    engine = engine or _get_engine()
    logger.info("Ensuring identity tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(IdentityBase.metadata.create_all)

    if own_engine:
        await engine.dispose()
    logger.info("Identity schema is up to date")


async def drop_tables(engine: AsyncEngine | None = None) -> None:
    """
    Drop the users and roles tables (USE WITH CAUTION!).

    This is primarily for testing and development reset scenarios.
    """
    own_engine = engine is None
    engine = engine or _get_engine()
    logger.warning("Dropping identity tables...")

    async with engine.begin() as conn:
        await conn.run_sync(IdentityBase.metadata.drop_all)

    if own_engine:
        await engine.dispose()
    logger.info("Identity tables dropped successfully")


async def _reset_database(force: bool = False) -> None:
    """Drop all tables and recreate them."""
    database_url = get_settings().database_url
    db_display = database_url.split("@")[-1] if "@" in database_url else database_url
    print(f"Database: {db_display}")
    print()

    if not force:
        print("WARNING: This will DELETE ALL users and roles!")
        print()
        response = input("Type 'yes' to confirm: ")
        if response.lower() != "yes":
            print("Aborted.")
            sys.exit(1)
        print()

    await drop_tables()
    await create_tables()
    logger.info("Database recreated successfully!")


def db_init() -> None:
    """Initialize database (create tables)."""
    configure_logging()
    asyncio.run(create_tables())


def db_reset() -> None:
    """Drop and recreate all identity tables."""
    configure_logging()
    force = "--force" in sys.argv or "-f" in sys.argv
    asyncio.run(_reset_database(force=force))
