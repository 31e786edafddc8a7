"""
Review and Tag CRUD operations.

Dependencies: sqlalchemy, coursehub.boundary.db.models
System role: Course feedback and labelling persistence operations
"""

from typing import Iterable, Sequence
from uuid import UUID

from sqlalchemy import Row, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.boundary.db.CRUD.base_crud import BaseCRUD
from coursehub.boundary.db.models.review_model import (
    CourseTagModel,
    ReviewModel,
    ReviewStatus,
    TagModel,
)
from coursehub.boundary.db.models.user_model import UserModel


class ReviewCRUD(BaseCRUD[ReviewModel]):
    """CRUD operations for ReviewModel."""

    def __init__(self) -> None:
        """Initialize ReviewCRUD with ReviewModel."""
        super().__init__(ReviewModel)

    async def upsert_review(
        self,
        session: AsyncSession,
        user_id: UUID,
        course_id: UUID,
        rating: int,
        comment: str | None,
    ) -> ReviewModel:
        """
        Create or overwrite the user's review of a course.

        Status is reset to VISIBLE on every write.

        Returns:
            ReviewModel holding the values just written
        """
        return await self.upsert(
            session,
            conflict_columns=("user_id", "course_id"),
            values={
                "user_id": user_id,
                "course_id": course_id,
                "rating": rating,
                "comment": comment,
                "status": ReviewStatus.VISIBLE,
            },
            update_columns=("rating", "comment", "status"),
        )

    async def visible_for_course(self, session: AsyncSession, course_id: UUID) -> Sequence[Row]:
        """
        Visible reviews of a course, newest first, with reviewer profile.

        Returns:
            Rows of (ReviewModel, reviewer name, reviewer image)
        """
        stmt = (
            select(ReviewModel, UserModel.name, UserModel.image)
            .join(UserModel, UserModel.id == ReviewModel.user_id)
            .where(
                ReviewModel.course_id == course_id,
                ReviewModel.status == ReviewStatus.VISIBLE,
            )
            .order_by(ReviewModel.created_at.desc(), ReviewModel.id)
        )
        result = await session.execute(stmt)
        return result.all()

    async def rating_totals_by_course(
        self,
        session: AsyncSession,
        course_ids: Iterable[UUID],
    ) -> dict[UUID, tuple[int, int]]:
        """
        Visible review count and rating sum per course.

        Returns:
            dict course_id -> (review_count, rating_sum); unreviewed courses are absent
        """
        course_ids = list(course_ids)
        if not course_ids:
            return {}
        stmt = (
            select(
                ReviewModel.course_id,
                func.count(ReviewModel.id),
                func.coalesce(func.sum(ReviewModel.rating), 0),
            )
            .where(
                ReviewModel.course_id.in_(course_ids),
                ReviewModel.status == ReviewStatus.VISIBLE,
            )
            .group_by(ReviewModel.course_id)
        )
        result = await session.execute(stmt)
        return {course_id: (count, int(total)) for course_id, count, total in result.all()}


class TagCRUD(BaseCRUD[TagModel]):
    """CRUD operations for TagModel and the course_tags join."""

    def __init__(self) -> None:
        """Initialize TagCRUD with TagModel."""
        super().__init__(TagModel)

    async def names_by_course(
        self,
        session: AsyncSession,
        course_ids: Iterable[UUID],
    ) -> dict[UUID, list[str]]:
        """Tag names per course, alphabetical."""
        course_ids = list(course_ids)
        if not course_ids:
            return {}
        stmt = (
            select(CourseTagModel.course_id, TagModel.name)
            .join(TagModel, TagModel.id == CourseTagModel.tag_id)
            .where(CourseTagModel.course_id.in_(course_ids))
            .order_by(TagModel.name)
        )
        result = await session.execute(stmt)
        names: dict[UUID, list[str]] = {}
        for course_id, name in result.all():
            names.setdefault(course_id, []).append(name)
        return names

    async def attach(self, session: AsyncSession, course_id: UUID, tag_id: UUID) -> CourseTagModel:
        """Link a tag to a course."""
        link = CourseTagModel(course_id=course_id, tag_id=tag_id)
        session.add(link)
        await session.flush()
        return link


review_crud = ReviewCRUD()
tag_crud = TagCRUD()
