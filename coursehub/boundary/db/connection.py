"""
Database connection management.

Provides the async SQLAlchemy engine, session factory, and FastAPI
dependency for database session injection. The engine is built once per
process and shared by every request.

Dependencies: sqlalchemy, coursehub.configs
System role: Database connection lifecycle management
"""

from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from coursehub.configs import get_settings


@lru_cache
def get_async_engine() -> AsyncEngine:
    """
    Create the async SQLAlchemy engine with connection pooling.

    pool_pre_ping=True verifies connections before use to detect stale
    connections early. Pool sizing is skipped for SQLite URLs, which do
    not accept it.

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine
    """
    db_config = get_settings().database
    pool_kwargs = {}
    if not db_config.is_sqlite:
        pool_kwargs = {
            "pool_size": db_config.pool_size,
            "max_overflow": db_config.max_overflow,
            "pool_timeout": db_config.pool_timeout,
        }

    return create_async_engine(
        db_config.async_database_url,
        echo=db_config.echo_sql,
        pool_pre_ping=True,
        **pool_kwargs,
    )


@lru_cache
def get_async_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Session factory bound to the shared engine.

    expire_on_commit=False keeps loaded attributes readable after a service
    commits, which is when response dicts are assembled.

    Returns:
        async_sessionmaker: Async session factory configured for manual transaction control
    """
    return async_sessionmaker(
        bind=get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency yielding one AsyncSession per request.

    Services own commit/rollback; the session is always closed afterwards.

    Yields:
        AsyncSession: Async SQLAlchemy database session (scoped to request lifetime)
    """
    session_factory = get_async_session_factory()
    async with session_factory() as session:
        yield session


async def dispose_async_engine() -> None:
    """
    Close pooled connections of the shared engine, if one was built.

    The cached engine and session factory are dropped so a later call
    builds fresh ones.
    """
    if not get_async_engine.cache_info().currsize:
        return
    await get_async_engine().dispose()
    get_async_session_factory.cache_clear()
    get_async_engine.cache_clear()
