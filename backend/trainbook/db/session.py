"""
Database engine lifecycle and per-request sessions.

The engine (and its bounded connection pool) is process-wide state: it is
created once in the application lifespan and disposed at shutdown. Request
handlers never touch it directly; they receive an AsyncSession from `get_db`,
which returns its connection to the pool when the request ends.
"""

from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from trainbook.core.config import get_settings
from trainbook.core.exceptions import StoreUnavailable
from trainbook.core.logging import get_logger
from trainbook.db.base import Base

logger = get_logger(__name__)

_engine: Optional[AsyncEngine] = None
_sessionmaker: Optional[async_sessionmaker[AsyncSession]] = None


def init_engine(database_url: Optional[str] = None) -> AsyncEngine:
    """Create the engine and session factory. Safe to call more than once."""
    global _engine, _sessionmaker

    if _engine is not None:
        return _engine

    settings = get_settings()
    url = database_url or settings.DATABASE_URL

    kwargs = {"echo": settings.DB_ECHO, "pool_pre_ping": True}
    if not url.startswith("sqlite"):
        kwargs.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=settings.DB_POOL_RECYCLE,
        )

    _engine = create_async_engine(url, **kwargs)
    _sessionmaker = async_sessionmaker(_engine, class_=AsyncSession, expire_on_commit=False)

    logger.info("database_engine_created", pool_size=kwargs.get("pool_size"))
    return _engine


def get_engine() -> AsyncEngine:
    if _engine is None:
        raise StoreUnavailable("Database is not initialised")
    return _engine


def get_sessionmaker() -> async_sessionmaker[AsyncSession]:
    if _sessionmaker is None:
        raise StoreUnavailable("Database is not initialised")
    return _sessionmaker


async def dispose_engine() -> None:
    """Close every pooled connection. Called on shutdown."""
    global _engine, _sessionmaker
    if _engine is not None:
        await _engine.dispose()
        logger.info("database_engine_disposed")
    _engine = None
    _sessionmaker = None


async def create_tables(engine: Optional[AsyncEngine] = None) -> None:
    # Register every model on the metadata before create_all.
    import trainbook.models  # noqa: F401

    engine = engine or get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding one session per request."""
    async with get_sessionmaker()() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
