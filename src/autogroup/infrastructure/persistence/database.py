"""Database abstraction layer using SQLAlchemy 2.0 async.

This module provides the database session management and engine configuration
for SQLAlchemy with async support. It supports both SQLite (aiosqlite) and
PostgreSQL (asyncpg) drivers.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from autogroup.core.config import Settings, get_settings
from autogroup.core.logging import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class DatabaseManager:
    """Database connection and session manager.

    This class manages the async database engine and session factory.
    It provides context managers for database sessions and handles
    connection pooling.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self._engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    @property
    def engine(self) -> AsyncEngine:
        """Get or create the database engine."""
        if self._engine is None:
            is_sqlite = self.settings.database_url.startswith("sqlite")
            options = (
                {"connect_args": {"check_same_thread": False}}
                if is_sqlite
                else {
                    "pool_size": self.settings.db_pool_size,
                    "max_overflow": self.settings.db_max_overflow,
                    "pool_timeout": self.settings.db_pool_timeout,
                    "pool_recycle": self.settings.db_pool_recycle,
                }
            )
            self._engine = create_async_engine(
                self.settings.database_url,
                echo=self.settings.db_echo,
                **options,
            )
            logger.info(
                "Database engine created",
                database_url=self._engine.url.render_as_string(hide_password=True),
            )
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        """Get or create the session factory."""
        if self._session_factory is None:
            self._session_factory = async_sessionmaker(
                bind=self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )
            logger.debug("Database session factory created")
        return self._session_factory

    async def create_tables(self) -> None:
        """Create all database tables.

        The autogroup tables live alongside the host system's group
        tables; in production they are expected to exist already.
        """
        # Register all models with Base.metadata
        from autogroup.infrastructure.persistence import models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
            logger.info("Database tables created")

    async def disconnect(self) -> None:
        """Close the database engine and all connections."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Database engine disposed")

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a transactional scope for database operations.

        The session is committed when the block exits normally and rolled
        back if it raises.

        Example:
            async with db.session() as session:
                group = await AutogroupService(session).load(12)
                await group.ensure_member(34)
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def check_connection(self) -> bool:
        """Check if database connection is working."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.error("Database connection check failed", error=str(e))
            return False


async def init_database(db: DatabaseManager) -> None:
    """Initialize the database.

    Creates the SQLite directory if needed and, in development, the
    tables themselves.

    Raises:
        RuntimeError: If the database cannot be reached.
    """
    settings = db.settings

    if settings.database_url.startswith("sqlite") and ":memory:" not in settings.database_url:
        # Extract path from sqlite+aiosqlite:///path/to/file.db
        db_dir = Path(settings.database_url.split(":///")[-1]).parent
        db_dir.mkdir(parents=True, exist_ok=True)
        logger.info("Database directory created", path=str(db_dir))

    if not await db.check_connection():
        raise RuntimeError("Failed to connect to database")

    if settings.is_development or settings.is_testing:
        await db.create_tables()
    else:
        logger.info("Production mode: Skipping table creation")
