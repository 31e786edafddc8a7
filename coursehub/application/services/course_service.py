"""
Course service orchestrator.

Coordinates the public course page and admin course lifecycle
(create, update, list every course regardless of status).

Dependencies: coursehub.boundary.db.CRUD, coursehub.core
System role: Course use case orchestration
"""

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.application.services.course_assembler import (
    course_dict,
    group_curriculum,
    instructor_dict,
)
from coursehub.boundary.db.CRUD import (
    course_crud,
    enrollment_crud,
    lesson_crud,
    review_crud,
    section_crud,
    tag_crud,
    user_crud,
)
from coursehub.boundary.db.models import CourseStatus
from coursehub.core.course_stats import build_course_stats, total_duration, total_lessons
from coursehub.core.exceptions import (
    CourseNotFoundError,
    CourseSlugTakenError,
    ValidationError,
)
from coursehub.core.identity import Identity, require_admin

logger = logging.getLogger(__name__)

# Columns that accept a PATCH; the first four may not be set to null.
REQUIRED_COURSE_FIELDS = ("slug", "title", "price_cents", "status")
UPDATABLE_COURSE_FIELDS = REQUIRED_COURSE_FIELDS + (
    "subtitle",
    "description",
    "thumbnail_url",
    "category",
    "level",
    "language",
)


class CourseService:
    """Course service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize course service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def get_course_detail(self, slug: str, identity: Identity | None = None) -> dict:
        """
        Assemble the public course page.

        Args:
            slug: Course slug
            identity: Optional viewer; used only to report is_enrolled

        Returns:
            dict: Course fields, instructor, sections with lessons, visible
            reviews, tags, stats, total_duration_sec and is_enrolled

        Raises:
            CourseNotFoundError: If no course has this slug
        """
        course = await course_crud.get_by_slug(self.db, slug)
        if not course:
            raise CourseNotFoundError(slug)

        sections = await section_crud.list_for_courses(self.db, [course.id])
        lessons = await lesson_crud.list_for_sections(self.db, [s.id for s in sections])
        curriculum = group_curriculum(sections, lessons).get(course.id, [])

        review_rows = await review_crud.visible_for_course(self.db, course.id)
        reviews = [
            {
                "id": review.id,
                "user_id": review.user_id,
                "course_id": review.course_id,
                "rating": review.rating,
                "comment": review.comment,
                "status": review.status,
                "created_at": review.created_at,
                "updated_at": review.updated_at,
                "user": {"name": name, "image": image},
            }
            for review, name, image in review_rows
        ]

        tags = await tag_crud.names_by_course(self.db, [course.id])
        instructor = await user_crud.get_by_id(self.db, course.created_by_id)
        enrollment_counts = await enrollment_crud.count_by_course(self.db, [course.id])

        is_enrolled = False
        if identity is not None:
            try:
                enrollment = await enrollment_crud.get_by_pair(self.db, identity.user_id, course.id)
                is_enrolled = enrollment is not None
            except Exception as e:
                # The page is public; a failed lookup only hides the enrolled badge.
                logger.warning(
                    "Enrollment lookup failed",
                    extra={"course_id": str(course.id), "error": str(e)},
                )

        return {
            **course_dict(course),
            "instructor": instructor_dict(instructor),
            "sections": curriculum,
            "reviews": reviews,
            "tags": tags.get(course.id, []),
            "stats": build_course_stats(
                enrollment_count=enrollment_counts.get(course.id, 0),
                review_count=len(reviews),
                rating_sum=sum(review["rating"] for review in reviews),
                total_lessons=total_lessons(curriculum),
            ),
            "total_duration_sec": total_duration(curriculum),
            "is_enrolled": is_enrolled,
        }

    async def create_course(
        self,
        identity: Identity | None,
        slug: str,
        title: str,
        subtitle: str | None = None,
        description: str | None = None,
        price_cents: int = 0,
        status: CourseStatus = CourseStatus.DRAFT,
        thumbnail_url: str | None = None,
        category: str | None = None,
        level: str | None = None,
        language: str | None = None,
    ) -> dict:
        """
        Create a course owned by the calling admin.

        Returns:
            dict: Stored course fields

        Raises:
            UnauthorizedError / ForbiddenError: Caller is not an admin
            CourseSlugTakenError: Slug already used by another course
        """
        admin = require_admin(identity)
        if await course_crud.slug_exists(self.db, slug):
            raise CourseSlugTakenError(slug)

        try:
            course = await course_crud.create(
                self.db,
                slug=slug,
                title=title,
                subtitle=subtitle,
                description=description,
                price_cents=price_cents,
                status=status,
                thumbnail_url=thumbnail_url,
                category=category,
                level=level,
                language=language,
                created_by_id=admin.user_id,
            )
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            if await course_crud.slug_exists(self.db, slug):
                raise CourseSlugTakenError(slug)
            raise
        except Exception as e:
            logger.error("Failed to create course", extra={"error": str(e), "slug": slug})
            raise

        logger.info(
            "Course created",
            extra={"course_id": str(course.id), "slug": slug, "status": course.status.value},
        )
        return course_dict(course)

    async def update_course(self, identity: Identity | None, slug: str, changes: dict[str, Any]) -> dict:
        """
        Apply a partial update to a course.

        Args:
            identity: Caller (must be admin)
            slug: Current course slug
            changes: Only the fields to change; keys outside the updatable
                set are ignored

        Returns:
            dict: Stored course fields after the update

        Raises:
            ValidationError: Nothing to change, or a required field set to null
            CourseNotFoundError: Unknown slug
            CourseSlugTakenError: New slug collides with another course
        """
        require_admin(identity)
        changes = {key: value for key, value in changes.items() if key in UPDATABLE_COURSE_FIELDS}
        if not changes:
            raise ValidationError("At least one field must be provided for update")
        for field in REQUIRED_COURSE_FIELDS:
            if field in changes and changes[field] is None:
                raise ValidationError(f"{field} cannot be null", field=field)

        course = await course_crud.get_by_slug(self.db, slug)
        if not course:
            raise CourseNotFoundError(slug)

        new_slug = changes.get("slug")
        if new_slug and new_slug != slug and await course_crud.slug_exists(self.db, new_slug):
            raise CourseSlugTakenError(new_slug)

        try:
            updated = await course_crud.update_by_id(self.db, course.id, **changes)
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            raise CourseSlugTakenError(new_slug or slug)

        logger.info(
            "Course updated",
            extra={"course_id": str(course.id), "fields": sorted(changes)},
        )
        return course_dict(updated)

    async def list_all_courses(self, identity: Identity | None) -> list[dict]:
        """
        Every course, any status, newest first, for the admin table.

        Returns:
            list[dict]: Course fields plus created_by and section, lesson and
            enrollment counts
        """
        require_admin(identity)
        try:
            courses = await course_crud.get_all(self.db)
            course_ids = [course.id for course in courses]
            creators = await user_crud.get_many(self.db, (c.created_by_id for c in courses))
            section_counts = await section_crud.count_by_course(self.db, course_ids)
            lesson_counts = await lesson_crud.count_by_course(self.db, course_ids)
            enrollment_counts = await enrollment_crud.count_by_course(self.db, course_ids)
        except Exception as e:
            logger.error("Failed to list courses", extra={"error": str(e)})
            raise

        rows = []
        for course in courses:
            creator = creators.get(course.created_by_id)
            rows.append(
                {
                    **course_dict(course),
                    "created_by": {"id": creator.id, "name": creator.name} if creator else None,
                    "section_count": section_counts.get(course.id, 0),
                    "lesson_count": lesson_counts.get(course.id, 0),
                    "enrollment_count": enrollment_counts.get(course.id, 0),
                }
            )
        return rows
