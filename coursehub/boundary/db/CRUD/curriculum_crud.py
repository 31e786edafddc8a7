"""
Section and Lesson CRUD operations.

Curriculum reads always sort by the explicit `order` column, falling back
to creation time so equal orders stay stable between requests.

Dependencies: sqlalchemy, coursehub.boundary.db.models
System role: Curriculum persistence operations
"""

from typing import Iterable, Sequence
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.boundary.db.CRUD.base_crud import BaseCRUD
from coursehub.boundary.db.models.course_model import LessonModel, SectionModel


class SectionCRUD(BaseCRUD[SectionModel]):
    """CRUD operations for SectionModel."""

    def __init__(self) -> None:
        """Initialize SectionCRUD with SectionModel."""
        super().__init__(SectionModel)

    async def get_in_course(
        self,
        session: AsyncSession,
        section_id: UUID,
        course_id: UUID,
    ) -> SectionModel | None:
        """
        Retrieve a section only if it belongs to the given course.

        Args:
            session: Async database session
            section_id: Section UUID
            course_id: Expected parent course UUID

        Returns:
            SectionModel if found under that course, None otherwise
        """
        stmt = select(SectionModel).where(
            SectionModel.id == section_id,
            SectionModel.course_id == course_id,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_courses(
        self,
        session: AsyncSession,
        course_ids: Iterable[UUID],
    ) -> Sequence[SectionModel]:
        """Sections of several courses in display order."""
        course_ids = list(course_ids)
        if not course_ids:
            return []
        stmt = (
            select(SectionModel)
            .where(SectionModel.course_id.in_(course_ids))
            .order_by(SectionModel.order, SectionModel.created_at, SectionModel.id)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def first_in_course(self, session: AsyncSession, course_id: UUID) -> SectionModel | None:
        """Lowest-ordered section of a course."""
        stmt = (
            select(SectionModel)
            .where(SectionModel.course_id == course_id)
            .order_by(SectionModel.order, SectionModel.created_at, SectionModel.id)
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def count_by_course(
        self,
        session: AsyncSession,
        course_ids: Iterable[UUID],
    ) -> dict[UUID, int]:
        """Section totals per course; courses without sections are absent."""
        course_ids = list(course_ids)
        if not course_ids:
            return {}
        stmt = (
            select(SectionModel.course_id, func.count(SectionModel.id))
            .where(SectionModel.course_id.in_(course_ids))
            .group_by(SectionModel.course_id)
        )
        result = await session.execute(stmt)
        return {course_id: count for course_id, count in result.all()}


class LessonCRUD(BaseCRUD[LessonModel]):
    """CRUD operations for LessonModel."""

    def __init__(self) -> None:
        """Initialize LessonCRUD with LessonModel."""
        super().__init__(LessonModel)

    async def list_for_sections(
        self,
        session: AsyncSession,
        section_ids: Iterable[UUID],
    ) -> Sequence[LessonModel]:
        """Lessons of several sections in display order."""
        section_ids = list(section_ids)
        if not section_ids:
            return []
        stmt = (
            select(LessonModel)
            .where(LessonModel.section_id.in_(section_ids))
            .order_by(LessonModel.order, LessonModel.created_at, LessonModel.id)
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def first_in_section(self, session: AsyncSession, section_id: UUID) -> LessonModel | None:
        """Lowest-ordered lesson of a section."""
        stmt = (
            select(LessonModel)
            .where(LessonModel.section_id == section_id)
            .order_by(LessonModel.order, LessonModel.created_at, LessonModel.id)
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def count_by_course(
        self,
        session: AsyncSession,
        course_ids: Iterable[UUID],
    ) -> dict[UUID, int]:
        """
        Lesson totals per course.

        Returns:
            dict course_id -> lesson count; courses without lessons are absent
        """
        course_ids = list(course_ids)
        if not course_ids:
            return {}
        stmt = (
            select(SectionModel.course_id, func.count(LessonModel.id))
            .join(LessonModel, LessonModel.section_id == SectionModel.id)
            .where(SectionModel.course_id.in_(course_ids))
            .group_by(SectionModel.course_id)
        )
        result = await session.execute(stmt)
        return {course_id: count for course_id, count in result.all()}


section_crud = SectionCRUD()
lesson_crud = LessonCRUD()
