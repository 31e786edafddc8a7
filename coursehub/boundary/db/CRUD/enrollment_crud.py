"""
Enrollment and Progress CRUD operations.

Dependencies: sqlalchemy, coursehub.boundary.db.models
System role: Learner access and playback persistence operations
"""

from datetime import datetime
from typing import Iterable, Sequence
from uuid import UUID

from sqlalchemy import Row, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.boundary.db.CRUD.base_crud import BaseCRUD
from coursehub.boundary.db.models.course_model import CourseModel
from coursehub.boundary.db.models.enrollment_model import EnrollmentModel, ProgressModel
from coursehub.boundary.db.models.user_model import UserModel


class EnrollmentCRUD(BaseCRUD[EnrollmentModel]):
    """
    CRUD operations for EnrollmentModel.

    The (user_id, course_id) unique constraint is the only guard against
    duplicate enrollments; callers treat IntegrityError from `create` as
    "already enrolled".
    """

    def __init__(self) -> None:
        """Initialize EnrollmentCRUD with EnrollmentModel."""
        super().__init__(EnrollmentModel)

    async def get_by_pair(
        self,
        session: AsyncSession,
        user_id: UUID,
        course_id: UUID,
    ) -> EnrollmentModel | None:
        """
        Retrieve the enrollment for a (user, course) pair.

        Args:
            session: Async database session
            user_id: Student UUID
            course_id: Course UUID

        Returns:
            EnrollmentModel if enrolled, None otherwise
        """
        stmt = select(EnrollmentModel).where(
            EnrollmentModel.user_id == user_id,
            EnrollmentModel.course_id == course_id,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_user(self, session: AsyncSession, user_id: UUID) -> dict[UUID, EnrollmentModel]:
        """The user's enrollments keyed by course id."""
        stmt = select(EnrollmentModel).where(EnrollmentModel.user_id == user_id)
        result = await session.execute(stmt)
        return {row.course_id: row for row in result.scalars().all()}

    async def count_by_course(
        self,
        session: AsyncSession,
        course_ids: Iterable[UUID],
    ) -> dict[UUID, int]:
        """Enrollment totals per course; courses without enrollments are absent."""
        course_ids = list(course_ids)
        if not course_ids:
            return {}
        stmt = (
            select(EnrollmentModel.course_id, func.count(EnrollmentModel.id))
            .where(EnrollmentModel.course_id.in_(course_ids))
            .group_by(EnrollmentModel.course_id)
        )
        result = await session.execute(stmt)
        return {course_id: count for course_id, count in result.all()}

    async def count_created_between(
        self,
        session: AsyncSession,
        start: datetime,
        end: datetime | None = None,
    ) -> int:
        """
        Enrollments created in [start, end).

        Args:
            session: Async database session
            start: Inclusive lower bound
            end: Exclusive upper bound, open-ended when None

        Returns:
            int: Enrollment count in the window
        """
        conditions = [EnrollmentModel.created_at >= start]
        if end is not None:
            conditions.append(EnrollmentModel.created_at < end)
        return await self.count(session, *conditions)

    async def recent_with_details(self, session: AsyncSession, limit: int) -> Sequence[Row]:
        """
        Newest enrollments joined with student and course identity.

        Returns:
            Rows of (EnrollmentModel, user name, user email, course title, course slug)
        """
        stmt = (
            select(
                EnrollmentModel,
                UserModel.name,
                UserModel.email,
                CourseModel.title,
                CourseModel.slug,
            )
            .join(UserModel, UserModel.id == EnrollmentModel.user_id)
            .join(CourseModel, CourseModel.id == EnrollmentModel.course_id)
            .order_by(EnrollmentModel.created_at.desc(), EnrollmentModel.id)
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.all()

    async def course_titles_by_user(
        self,
        session: AsyncSession,
        user_ids: Iterable[UUID],
    ) -> dict[UUID, list[str]]:
        """Titles of the courses each user is enrolled in, oldest enrollment first."""
        user_ids = list(user_ids)
        if not user_ids:
            return {}
        stmt = (
            select(EnrollmentModel.user_id, CourseModel.title)
            .join(CourseModel, CourseModel.id == EnrollmentModel.course_id)
            .where(EnrollmentModel.user_id.in_(user_ids))
            .order_by(EnrollmentModel.created_at, EnrollmentModel.id)
        )
        result = await session.execute(stmt)
        titles: dict[UUID, list[str]] = {}
        for user_id, title in result.all():
            titles.setdefault(user_id, []).append(title)
        return titles


class ProgressCRUD(BaseCRUD[ProgressModel]):
    """CRUD operations for ProgressModel."""

    def __init__(self) -> None:
        """Initialize ProgressCRUD with ProgressModel."""
        super().__init__(ProgressModel)

    async def get_by_pair(
        self,
        session: AsyncSession,
        user_id: UUID,
        lesson_id: UUID,
    ) -> ProgressModel | None:
        """Retrieve the progress record for a (user, lesson) pair."""
        stmt = select(ProgressModel).where(
            ProgressModel.user_id == user_id,
            ProgressModel.lesson_id == lesson_id,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def upsert_position(
        self,
        session: AsyncSession,
        user_id: UUID,
        lesson_id: UUID,
        position_sec: int,
        completed: bool,
    ) -> ProgressModel:
        """
        Record playback state, creating the row on first write.

        Args:
            session: Async database session
            user_id: Student UUID
            lesson_id: Lesson UUID
            position_sec: Playback offset in seconds
            completed: Completion flag

        Returns:
            ProgressModel holding the values just written
        """
        return await self.upsert(
            session,
            conflict_columns=("user_id", "lesson_id"),
            values={
                "user_id": user_id,
                "lesson_id": lesson_id,
                "position_sec": position_sec,
                "completed": completed,
            },
            update_columns=("position_sec", "completed"),
        )

    async def list_for_user_lessons(
        self,
        session: AsyncSession,
        user_id: UUID,
        lesson_ids: Iterable[UUID],
    ) -> dict[UUID, ProgressModel]:
        """The user's progress records keyed by lesson id."""
        lesson_ids = list(lesson_ids)
        if not lesson_ids:
            return {}
        stmt = select(ProgressModel).where(
            ProgressModel.user_id == user_id,
            ProgressModel.lesson_id.in_(lesson_ids),
        )
        result = await session.execute(stmt)
        return {row.lesson_id: row for row in result.scalars().all()}


enrollment_crud = EnrollmentCRUD()
progress_crud = ProgressCRUD()
