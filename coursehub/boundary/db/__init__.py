"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(),
    dispose_async_engine(): Connection management

Models live in `coursehub.boundary.db.models`, CRUD singletons in
`coursehub.boundary.db.CRUD`.

Dependencies: sqlalchemy, coursehub.configs
System role: Relational store adapter for the course marketplace
"""

from coursehub.boundary.db.base import Base, TimestampMixin, UUIDMixin
from coursehub.boundary.db.connection import (
    dispose_async_engine,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)

__all__ = [
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    "dispose_async_engine",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
]
