"""Integration tests for the Database resource lifecycle."""

import pytest
from sqlalchemy import inspect

from farmbook.infrastructure.persistence.sqlalchemy import Database


async def test_connect_creates_users_table(database):
    async with database.engine.connect() as conn:
        tables = await conn.run_sync(lambda sync: inspect(sync).get_table_names())

    assert "users" in tables


async def test_connect_is_idempotent(database):
    engine = database.engine
    await database.connect()
    assert database.engine is engine


async def test_session_requires_connection():
    db = Database("sqlite+aiosqlite:///:memory:")

    assert not db.is_connected
    with pytest.raises(RuntimeError, match="not connected"):
        db.session()


async def test_disconnect_releases_engine():
    db = Database("sqlite+aiosqlite:///:memory:")
    await db.connect(create_schema=False)

    await db.disconnect()

    assert not db.is_connected
    await db.disconnect()


async def test_file_database_creates_parent_directory(tmp_path):
    path = tmp_path / "nested" / "farmbook.db"
    db = Database(f"sqlite+aiosqlite:///{path}")

    await db.connect()
    await db.disconnect()

    assert path.parent.is_dir()
