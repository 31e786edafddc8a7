"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata,
through the same async engine the application uses.

Dependencies: sqlalchemy, coursehub.configs
System role: Database schema initialization

Usage:
    python -m coursehub.boundary.db.create_tables
    python -m coursehub.boundary.db.create_tables --drop
"""

import argparse
import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine

# Importing the models package registers every table with Base.metadata
from coursehub.boundary.db import models  # noqa: F401
from coursehub.boundary.db.base import Base
from coursehub.boundary.db.connection import dispose_async_engine, get_async_engine

logger = logging.getLogger(__name__)


async def create_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: existing tables are left unchanged.

    Args:
        engine: Target engine (application engine when None)
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Tables created", extra={"tables": sorted(Base.metadata.tables)})


async def drop_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.info("Tables dropped")


async def _main(drop: bool) -> None:
    try:
        if drop:
            await drop_all_tables()
        await create_all_tables()
    finally:
        await dispose_async_engine()


if __name__ == "__main__":
    from coursehub.configs import get_settings
    from coursehub.observability.logger import configure_logging

    parser = argparse.ArgumentParser(description="Create the CourseHub schema")
    parser.add_argument("--drop", action="store_true", help="Drop existing tables first")
    args = parser.parse_args()

    configure_logging(get_settings().log_level)
    asyncio.run(_main(args.drop))
