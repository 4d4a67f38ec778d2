"""Async SQLAlchemy engine and session management.

One ``Database`` owns the engine for the configured URL. Repositories
never commit: a request borrows a session from ``get_session`` and the
unit of work commits when the request finishes.

Supported URLs:
- ``postgresql+asyncpg://...`` (production, pooled)
- ``sqlite+aiosqlite://...`` (tests and local runs)
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)


def _engine_options(
    database_url: str, echo: bool, pool_size: int, max_overflow: int
) -> dict[str, Any]:
    options: dict[str, Any] = {"echo": echo}
    if not database_url.startswith("postgresql"):
        return options

    options.update(
        pool_pre_ping=True,
        pool_size=pool_size,
        max_overflow=max_overflow,
        connect_args={
            "server_settings": {"jit": "off"},
            "command_timeout": 60,
            "timeout": 30,
        },
    )
    return options


class Database:
    """Engine plus session factory for the product store.

    Usage:
        db = Database(settings.database_url)
        await db.create_all()
        async with db.get_session() as session:
            repo = SQLAlchemyProductRepository(session=session)
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 20,
        max_overflow: int = 0,
    ) -> None:
        """Create the engine.

        Args:
            database_url: SQLAlchemy async URL.
            echo: Log every SQL statement.
            pool_size: Pooled connections (PostgreSQL only).
            max_overflow: Extra connections above ``pool_size`` (PostgreSQL only).
        """
        self.engine: AsyncEngine = create_async_engine(
            database_url,
            **_engine_options(database_url, echo, pool_size, max_overflow),
        )
        # Loaded products stay readable after commit
        self.async_session = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session that commits on success and rolls back on error."""
        async with self.async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def create_all(self) -> None:
        """Create the catalog tables if they do not exist."""
        from src.infrastructure.persistence import models  # noqa: F401
        from src.infrastructure.persistence.base import BaseModel

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def drop_all(self) -> None:
        """Drop the catalog tables (tests only)."""
        from src.infrastructure.persistence import models  # noqa: F401
        from src.infrastructure.persistence.base import BaseModel

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.drop_all)

    async def close(self) -> None:
        """Dispose the engine and its pooled connections."""
        await self.engine.dispose()

    async def check_connection(self) -> bool:
        """Return True when a trivial query succeeds.

        asyncpg raises ``OSError`` when it cannot connect; SQLAlchemy does
        not wrap it.
        """
        try:
            async with self.get_session() as session:
                await session.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError):
            return False
        return True
