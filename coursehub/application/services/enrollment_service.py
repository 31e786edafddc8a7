"""
Enrollment service orchestrator.

Creates at most one enrollment per (student, course), resolves the lesson
a new learner starts on, and builds the learner dashboard.

The unique constraint on enrollments is the only concurrency guard. A
racing insert that loses surfaces as IntegrityError and is reported as
"already enrolled" (API flow) or silently accepted (redirect flow).

Dependencies: coursehub.boundary.db.CRUD, coursehub.core
System role: Enrollment use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.application.services.course_assembler import group_curriculum
from coursehub.boundary.db.CRUD import (
    course_crud,
    enrollment_crud,
    lesson_crud,
    progress_crud,
    section_crud,
)
from coursehub.boundary.db.models import EnrollmentModel
from coursehub.core.course_stats import course_progress
from coursehub.core.exceptions import AlreadyEnrolledError, CourseNotFoundError, ValidationError
from coursehub.core.identity import Identity, require_identity

logger = logging.getLogger(__name__)

DASHBOARD_PATH = "/my-learning"


def lesson_path(entry_point: dict) -> str:
    return f"/learn/{entry_point['course_slug']}/{entry_point['lesson_slug']}"


class EnrollmentService:
    """Enrollment service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize enrollment service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def _get_course(self, course_id: UUID | None) -> tuple[UUID, str]:
        """
        Resolve a course to its (id, slug).

        Returns plain values: a rollback after a lost insert race expires
        every ORM instance held by the session.
        """
        if course_id is None:
            raise ValidationError("Course ID is required", field="course_id")
        course = await course_crud.get_by_id(self.db, course_id)
        if not course:
            raise CourseNotFoundError(course_id)
        return course.id, course.slug

    async def _insert(self, user_id: UUID, course_id: UUID) -> EnrollmentModel | None:
        """
        Insert and commit an enrollment.

        Returns:
            The new enrollment, or None when a concurrent insert for the same
            pair won the race
        """
        try:
            enrollment = await enrollment_crud.create(self.db, user_id=user_id, course_id=course_id)
            await self.db.commit()
            return enrollment
        except IntegrityError:
            await self.db.rollback()
            if await enrollment_crud.get_by_pair(self.db, user_id, course_id):
                return None
            raise

    async def entry_point(self, course_id: UUID, course_slug: str) -> dict | None:
        """
        First lesson of the first section, both by `order`.

        Returns:
            dict: course_slug and lesson_slug, or None when the first section
            has no lessons or the course has no sections
        """
        section = await section_crud.first_in_course(self.db, course_id)
        if not section:
            return None
        lesson = await lesson_crud.first_in_section(self.db, section.id)
        if not lesson:
            return None
        return {"course_slug": course_slug, "lesson_slug": lesson.slug}

    async def _safe_entry_point(self, course_id: UUID, course_slug: str) -> dict | None:
        # The enrollment is already committed; a failed lookup only loses the pointer.
        try:
            return await self.entry_point(course_id, course_slug)
        except Exception as e:
            logger.warning(
                "First lesson lookup failed",
                extra={"course_id": str(course_id), "error": str(e)},
            )
            return None

    async def enroll(self, identity: Identity | None, course_id: UUID | None) -> dict:
        """
        Enroll the caller in a course.

        Args:
            identity: Caller
            course_id: Course UUID

        Returns:
            dict: enrollment record and first_lesson pointer (or None)

        Raises:
            UnauthorizedError: Anonymous caller
            ValidationError: course_id missing
            CourseNotFoundError: Unknown course
            AlreadyEnrolledError: Enrollment exists, including a lost race
        """
        user = require_identity(identity)
        course_id, course_slug = await self._get_course(course_id)

        if await enrollment_crud.get_by_pair(self.db, user.user_id, course_id):
            raise AlreadyEnrolledError(user.user_id, course_id)

        enrollment = await self._insert(user.user_id, course_id)
        if enrollment is None:
            raise AlreadyEnrolledError(user.user_id, course_id)

        logger.info(
            "Enrollment created",
            extra={
                "enrollment_id": str(enrollment.id),
                "user_id": str(user.user_id),
                "course_id": str(course_id),
            },
        )
        return {
            "enrollment": {
                "id": enrollment.id,
                "user_id": enrollment.user_id,
                "course_id": enrollment.course_id,
                "created_at": enrollment.created_at,
            },
            "first_lesson": await self._safe_entry_point(course_id, course_slug),
        }

    async def enroll_and_redirect(self, identity: Identity | None, course_id: UUID | None) -> str:
        """
        Idempotent enrollment for link clicks.

        Already being enrolled is not an error here.

        Returns:
            str: /learn/{course}/{lesson} for the first lesson, or the
            learner dashboard when the course has no lessons
        """
        user = require_identity(identity)
        course_id, course_slug = await self._get_course(course_id)

        if not await enrollment_crud.get_by_pair(self.db, user.user_id, course_id):
            enrollment = await self._insert(user.user_id, course_id)
            if enrollment is not None:
                logger.info(
                    "Enrollment created via link",
                    extra={"user_id": str(user.user_id), "course_id": str(course_id)},
                )

        entry = await self._safe_entry_point(course_id, course_slug)
        return lesson_path(entry) if entry else DASHBOARD_PATH

    async def my_courses(self, identity: Identity | None) -> list[dict]:
        """
        The caller's enrolled courses with per-lesson progress.

        Courses are ordered by total enrollment count, most popular first.
        Each lesson carries the caller's progress record or None, and each
        course a completion summary. `enrolled_at` is None when the
        enrollment row vanished between the two reads.

        Returns:
            list[dict]: Learner course entries
        """
        user = require_identity(identity)
        courses = await course_crud.get_enrolled_by_user(self.db, user.user_id)
        if not courses:
            return []

        enrollments = await enrollment_crud.list_for_user(self.db, user.user_id)
        sections = await section_crud.list_for_courses(self.db, [c.id for c in courses])
        lessons = await lesson_crud.list_for_sections(self.db, [s.id for s in sections])
        progress = await progress_crud.list_for_user_lessons(
            self.db, user.user_id, [lesson.id for lesson in lessons]
        )
        curriculum = group_curriculum(sections, lessons)

        results = []
        for course in courses:
            course_sections = curriculum.get(course.id, [])
            for section in course_sections:
                for lesson in section["lessons"]:
                    record = progress.get(lesson["id"])
                    lesson["progress"] = (
                        {
                            "id": record.id,
                            "user_id": record.user_id,
                            "lesson_id": record.lesson_id,
                            "position_sec": record.position_sec,
                            "completed": record.completed,
                            "updated_at": record.updated_at,
                        }
                        if record
                        else None
                    )
            enrollment = enrollments.get(course.id)
            results.append(
                {
                    "id": course.id,
                    "slug": course.slug,
                    "title": course.title,
                    "subtitle": course.subtitle,
                    "thumbnail_url": course.thumbnail_url,
                    "category": course.category,
                    "level": course.level,
                    "enrolled_at": enrollment.created_at if enrollment else None,
                    "sections": course_sections,
                    "progress": course_progress(course_sections),
                }
            )
        return results
