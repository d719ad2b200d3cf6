"""Fixtures for integration tests on in-memory SQLite."""

import pytest

from farmbook.infrastructure.persistence.sqlalchemy import Database

# Registers the users table on the shared metadata
from farmbook_identity.infrastructure.persistence.sqlalchemy import models  # noqa: F401

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def database():
    """A connected in-memory database with the schema created."""
    db = Database(TEST_DATABASE_URL)
    await db.connect()
    yield db
    await db.disconnect()


@pytest.fixture
async def db_session(database):
    """Create a test database session."""
    async with database.session() as session:
        yield session
