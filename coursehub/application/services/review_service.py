"""
Review service orchestrator.

One review per (student, course); resubmission overwrites the rating and
comment and makes the review visible again.

Dependencies: coursehub.boundary.db.CRUD, coursehub.core
System role: Review use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.boundary.db.CRUD import course_crud, review_crud
from coursehub.core.course_stats import clamp_rating
from coursehub.core.exceptions import CourseNotFoundError, ValidationError
from coursehub.core.identity import Identity, require_identity

logger = logging.getLogger(__name__)


class ReviewService:
    """Review service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def upsert_review(
        self,
        identity: Identity | None,
        course_id: UUID | None,
        rating: int | None,
        comment: str | None = None,
    ) -> dict:
        """
        Create or overwrite the caller's review of a course.

        Args:
            identity: Caller
            course_id: Reviewed course
            rating: Any integer; clamped into 1..5
            comment: Optional text; blank is stored as None

        Returns:
            dict: Stored review

        Raises:
            ValidationError: course_id or rating missing
            CourseNotFoundError: Unknown course
        """
        user = require_identity(identity)
        if course_id is None or rating is None:
            raise ValidationError(
                "courseId and rating are required",
                field="course_id" if course_id is None else "rating",
            )
        if not await course_crud.exists(self.db, course_id):
            raise CourseNotFoundError(course_id)

        stored_rating = clamp_rating(rating)
        stored_comment = comment.strip() if comment and comment.strip() else None

        review = await review_crud.upsert_review(
            self.db,
            user_id=user.user_id,
            course_id=course_id,
            rating=stored_rating,
            comment=stored_comment,
        )
        await self.db.commit()

        logger.info(
            "Review saved",
            extra={"review_id": str(review.id), "course_id": str(course_id), "rating": stored_rating},
        )
        return {
            "id": review.id,
            "user_id": review.user_id,
            "course_id": review.course_id,
            "rating": review.rating,
            "comment": review.comment,
            "status": review.status,
            "created_at": review.created_at,
            "updated_at": review.updated_at,
        }
