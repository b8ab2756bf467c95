"""Async database engine and session management.

Uses SQLAlchemy 2.0 async (asyncpg in production, aiosqlite in tests).
The handle is created at process start and passed explicitly to the
components that need it; nothing reaches for a global connection.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

logger = logging.getLogger(__name__)


class Database:
    """Owns the engine and session factory for one process."""

    def __init__(self, url: str, **engine_kwargs):
        if url.startswith("postgresql"):
            engine_kwargs.setdefault("pool_size", 5)
            engine_kwargs.setdefault("max_overflow", 10)
        self.engine: AsyncEngine = create_async_engine(
            url,
            echo=False,
            pool_pre_ping=True,
            **engine_kwargs,
        )
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        self.available = False

    async def connect(self) -> bool:
        """Create tables if they don't exist. Returns True on success."""
        from city_explorer.models import Base

        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            self.available = True
            logger.info("Database initialized successfully")
        except Exception as e:
            self.available = False
            logger.warning("Database unavailable: %s", str(e)[:200])
        return self.available

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Scoped session for one orchestrator call."""
        async with self.session_factory() as session:
            yield session

    async def close(self):
        """Dispose engine connections on shutdown."""
        await self.engine.dispose()
        self.available = False
        logger.info("Database connections closed")
