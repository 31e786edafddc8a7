"""
Curriculum service orchestrator.

Admin-only appends of sections and lessons to an existing course.

Dependencies: coursehub.boundary.db.CRUD, coursehub.core
System role: Curriculum authoring use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.application.services.course_assembler import lesson_dict, section_dict
from coursehub.boundary.db.CRUD import course_crud, lesson_crud, section_crud
from coursehub.core.exceptions import CourseNotFoundError, SectionNotFoundError
from coursehub.core.identity import Identity, require_admin

logger = logging.getLogger(__name__)


class CurriculumService:
    """Curriculum service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def add_section(
        self,
        identity: Identity | None,
        course_slug: str,
        title: str,
        order: int = 0,
    ) -> dict:
        """
        Append a section to a course.

        Args:
            identity: Caller (must be admin)
            course_slug: Parent course slug
            title: Section title
            order: Sort key within the course

        Returns:
            dict: Created section with an empty lessons list

        Raises:
            CourseNotFoundError: Unknown slug
        """
        require_admin(identity)
        course = await course_crud.get_by_slug(self.db, course_slug)
        if not course:
            raise CourseNotFoundError(course_slug)

        section = await section_crud.create(self.db, title=title, order=order, course_id=course.id)
        await self.db.commit()

        logger.info(
            "Section created",
            extra={"course_id": str(course.id), "section_id": str(section.id), "order": order},
        )
        return {**section_dict(section), "lessons": []}

    async def add_lesson(
        self,
        identity: Identity | None,
        course_slug: str,
        section_id: UUID,
        title: str,
        slug: str,
        order: int = 0,
        video_url: str | None = None,
        duration_sec: int | None = None,
        free_preview: bool = False,
    ) -> dict:
        """
        Append a lesson to a section of a course.

        The section must belong to the course named in the path; a section
        of another course is reported as not found.

        Returns:
            dict: Created lesson

        Raises:
            CourseNotFoundError: Unknown course slug
            SectionNotFoundError: Section missing or under another course
        """
        require_admin(identity)
        course = await course_crud.get_by_slug(self.db, course_slug)
        if not course:
            raise CourseNotFoundError(course_slug)

        section = await section_crud.get_in_course(self.db, section_id, course.id)
        if not section:
            raise SectionNotFoundError(section_id, {"course_slug": course_slug})

        lesson = await lesson_crud.create(
            self.db,
            title=title,
            slug=slug,
            order=order,
            video_url=video_url,
            duration_sec=duration_sec,
            free_preview=free_preview,
            section_id=section.id,
        )
        await self.db.commit()

        logger.info(
            "Lesson created",
            extra={"section_id": str(section.id), "lesson_id": str(lesson.id), "lesson_slug": slug},
        )
        return lesson_dict(lesson)
