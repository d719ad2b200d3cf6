"""Database resource with an explicit open/close lifecycle.

One ``Database`` is constructed when the application is created, connected
in the lifespan startup hook, shared by all requests, and disposed on
shutdown. Nothing here is a module-level global, so tests can build their
own instance against SQLite.
"""

import logging
from pathlib import Path
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from farmbook.infrastructure.persistence.sqlalchemy.models.base import Base

logger = logging.getLogger(__name__)


class Database:
    """Owns the async engine and session factory for one database URL."""

    def __init__(self, url: str, echo: bool = False):
        self._url = url
        self._echo = echo
        self._engine: AsyncEngine | None = None
        self._session_maker: async_sessionmaker[AsyncSession] | None = None

    @property
    def url(self) -> str:
        return self._url

    @property
    def is_connected(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            msg = "Database not connected. Call connect() first."
            raise RuntimeError(msg)
        return self._engine

    async def connect(self, create_schema: bool = True) -> None:
        """Create the engine and, optionally, any missing tables.

        Calling ``connect`` on an already connected database is a no-op.
        """
        if self._engine is not None:
            return

        self._engine = create_async_engine(self._url, **self._engine_options())
        self._session_maker = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

        if create_schema:
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)

        logger.info("Connected to database (%s)", self._engine.url.get_backend_name())

    def session(self) -> AsyncSession:
        """Open a new session bound to the shared engine."""
        if self._session_maker is None:
            msg = "Database not connected. Call connect() first."
            raise RuntimeError(msg)
        return self._session_maker()

    async def disconnect(self) -> None:
        """Dispose the engine and its connection pool."""
        if self._engine is None:
            return

        await self._engine.dispose()
        self._engine = None
        self._session_maker = None
        logger.info("Database connections closed")

    def _engine_options(self) -> dict[str, Any]:
        if not self._url.startswith("sqlite"):
            return {"echo": self._echo, "pool_pre_ping": True}

        if ":memory:" in self._url:
            # One shared connection, otherwise every checkout sees an empty db
            return {
                "echo": self._echo,
                "poolclass": StaticPool,
                "connect_args": {"check_same_thread": False},
            }

        db_path = self._url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        return {"echo": self._echo}
