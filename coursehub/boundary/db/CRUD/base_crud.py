"""
Shared persistence helpers for the marketplace tables.

Every table-specific CRUD singleton inherits primary-key lookups, counting,
newest-first listing and a dialect-aware upsert from here.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Any, Generic, Iterable, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.boundary.db.base import Base, utcnow

ModelT = TypeVar("ModelT", bound=Base)

_UPSERT_INSERTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


class BaseCRUD(Generic[ModelT]):
    """
    Table-agnostic queries keyed on the UUID primary key.

    Subclasses bind a model and add the lookups their services need
    (by slug, by email, by user/course pair). Nothing here commits;
    the calling service owns the transaction.
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **kwargs) -> ModelT:
        """
        Add a row and flush so server defaults and the id are populated.

        Raises:
            IntegrityError: On unique or foreign key violations (raised at flush)
        """
        instance = self.model(**kwargs)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_id(self, session: AsyncSession, id: UUID) -> ModelT | None:
        stmt = select(self.model).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_all(
        self,
        session: AsyncSession,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[ModelT]:
        """
        Retrieve all records, newest first, with optional pagination.

        Args:
            session: Async database session
            limit: Maximum number of records to return (None for all)
            offset: Number of records to skip

        Returns:
            Sequence of model instances
        """
        stmt = (
            select(self.model)
            .order_by(self.model.created_at.desc(), self.model.id)
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_many(self, session: AsyncSession, ids: Iterable[UUID]) -> dict[UUID, ModelT]:
        """
        Retrieve records for a set of primary keys.

        Returns:
            dict mapping id to instance; missing ids are absent
        """
        ids = list(set(ids))
        if not ids:
            return {}
        stmt = select(self.model).where(self.model.id.in_(ids))
        result = await session.execute(stmt)
        return {row.id: row for row in result.scalars().all()}

    async def count(self, session: AsyncSession, *where: Any) -> int:
        """
        Count records matching optional WHERE clauses.

        Args:
            session: Async database session
            *where: SQLAlchemy boolean expressions

        Returns:
            int: Matching row count
        """
        stmt = select(func.count()).select_from(self.model)
        if where:
            stmt = stmt.where(*where)
        result = await session.execute(stmt)
        return result.scalar_one()

    async def update_by_id(
        self,
        session: AsyncSession,
        id: UUID,
        **kwargs,
    ) -> ModelT | None:
        """
        Update a record by primary key.

        Args:
            session: Async database session
            id: UUID primary key
            **kwargs: Fields to update with new values

        Returns:
            Updated model instance if found, None otherwise
        """
        stmt = (
            update(self.model)
            .where(self.model.id == id)
            .values(**kwargs)
            .returning(self.model)
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def exists(self, session: AsyncSession, id: UUID) -> bool:
        """True when a row with this primary key is present."""
        stmt = select(self.model.id).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def upsert(
        self,
        session: AsyncSession,
        conflict_columns: Sequence[str],
        values: dict[str, Any],
        update_columns: Sequence[str],
    ) -> ModelT:
        """
        Insert a row or overwrite selected columns of the conflicting row.

        Issues a single INSERT ... ON CONFLICT DO UPDATE, so concurrent
        callers never observe a missing row between a read and a write.

        Args:
            session: Async database session
            conflict_columns: Columns of the unique constraint to key on
            values: Full column values for the insert
            update_columns: Columns overwritten from `values` on conflict

        Returns:
            The inserted or updated instance

        Raises:
            NotImplementedError: For dialects without ON CONFLICT support
        """
        dialect = session.get_bind().dialect.name
        insert_fn = _UPSERT_INSERTS.get(dialect)
        if insert_fn is None:
            raise NotImplementedError(f"Upsert is not supported on dialect {dialect!r}")

        stmt = insert_fn(self.model).values(**values)
        set_ = {column: stmt.excluded[column] for column in update_columns}
        set_["updated_at"] = utcnow()
        stmt = (
            stmt.on_conflict_do_update(index_elements=list(conflict_columns), set_=set_)
            .returning(self.model)
            .execution_options(populate_existing=True)
        )
        result = await session.execute(stmt)
        return result.scalar_one()
