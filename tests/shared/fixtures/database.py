"""
Testcontainers-based PostgreSQL fixtures for integration tests.

Provides an ephemeral Postgres instance for the test session and a clean
schema for every test.

Usage:
    # In your test file or conftest.py
    from tests.shared.fixtures.database import db_session

    async def test_something(db_session):
        repo = UserRepositorySQLAlchemy(db_session)
        await repo.create(ctx, user)
"""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool
from testcontainers.postgres import PostgresContainer

from gatehouse_identity.infrastructure.persistence.sqlalchemy.init_db import (
    create_tables,
    drop_tables,
)

POSTGRES_IMAGE = "postgres:16-alpine"


@pytest.fixture(scope="session")
def postgres_container():
    """
    Start a PostgreSQL container for the test session.

    The container is shared across all tests in the session for performance.
    Each test gets a clean database state via table drop/create.
    """
    with PostgresContainer(POSTGRES_IMAGE) as postgres:
        yield postgres


@pytest.fixture(scope="session")
def async_engine(postgres_container):
    """Create an async SQLAlchemy engine connected to the test container."""
    connection_url = postgres_container.get_connection_url()
    # Testcontainers may return postgresql+psycopg2:// or postgresql://
    async_url = connection_url.replace(
        "postgresql+psycopg2://", "postgresql+asyncpg://"
    )
    async_url = async_url.replace("postgresql://", "postgresql+asyncpg://")

    return create_async_engine(
        async_url,
        echo=False,
        poolclass=NullPool,  # Avoid connection pool issues in tests
    )


@pytest_asyncio.fixture(scope="function")
async def db_session(async_engine):
    """
    Provide an isolated database session for each test.

    Tables are dropped and recreated before the test, uncommitted changes
    are rolled back after it, and the tables are dropped again.
    """
    await drop_tables(async_engine)
    await create_tables(async_engine)

    session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with session_maker() as session:
        yield session
        await session.rollback()

    await drop_tables(async_engine)
