"""
Course summary assembly.

Turns CourseModel rows into catalog-card dicts (instructor, stats, tags).
Each aggregate is one grouped query over the whole page of courses, so a
page costs a fixed number of round trips regardless of its size.

Dependencies: coursehub.boundary.db.CRUD, coursehub.core.course_stats
System role: Shared read-path assembly for catalog and featured listings
"""

from typing import Any, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.boundary.db.CRUD import (
    enrollment_crud,
    lesson_crud,
    review_crud,
    tag_crud,
    user_crud,
)
from coursehub.boundary.db.models import CourseModel, LessonModel, SectionModel, UserModel
from coursehub.core.course_stats import build_course_stats


def instructor_dict(user: UserModel | None) -> dict[str, Any] | None:
    if user is None:
        return None
    return {"id": user.id, "name": user.name, "image": user.image}


def course_dict(course: CourseModel) -> dict[str, Any]:
    """All stored course columns."""
    return {
        "id": course.id,
        "slug": course.slug,
        "title": course.title,
        "subtitle": course.subtitle,
        "description": course.description,
        "price_cents": course.price_cents,
        "status": course.status,
        "thumbnail_url": course.thumbnail_url,
        "category": course.category,
        "level": course.level,
        "language": course.language,
        "created_by_id": course.created_by_id,
        "created_at": course.created_at,
        "updated_at": course.updated_at,
    }


async def summarize_courses(db: AsyncSession, courses: Sequence[CourseModel]) -> list[dict[str, Any]]:
    """
    Build catalog summaries for a list of courses, preserving order.

    Args:
        db: Async database session
        courses: Courses in display order

    Returns:
        list[dict]: Course fields plus instructor, stats and tags
    """
    if not courses:
        return []

    course_ids = [course.id for course in courses]
    instructors = await user_crud.get_many(db, (course.created_by_id for course in courses))
    enrollment_counts = await enrollment_crud.count_by_course(db, course_ids)
    rating_totals = await review_crud.rating_totals_by_course(db, course_ids)
    lesson_counts = await lesson_crud.count_by_course(db, course_ids)
    tag_names = await tag_crud.names_by_course(db, course_ids)

    summaries = []
    for course in courses:
        review_count, rating_sum = rating_totals.get(course.id, (0, 0))
        summaries.append(
            {
                "id": course.id,
                "slug": course.slug,
                "title": course.title,
                "subtitle": course.subtitle,
                "description": course.description,
                "price_cents": course.price_cents,
                "thumbnail_url": course.thumbnail_url,
                "category": course.category,
                "level": course.level,
                "language": course.language,
                "created_at": course.created_at,
                "instructor": instructor_dict(instructors.get(course.created_by_id)),
                "stats": build_course_stats(
                    enrollment_count=enrollment_counts.get(course.id, 0),
                    review_count=review_count,
                    rating_sum=rating_sum,
                    total_lessons=lesson_counts.get(course.id, 0),
                ),
                "tags": tag_names.get(course.id, []),
            }
        )
    return summaries


def section_dict(section: SectionModel) -> dict[str, Any]:
    return {
        "id": section.id,
        "course_id": section.course_id,
        "title": section.title,
        "order": section.order,
        "created_at": section.created_at,
    }


def lesson_dict(lesson: LessonModel) -> dict[str, Any]:
    return {
        "id": lesson.id,
        "section_id": lesson.section_id,
        "title": lesson.title,
        "slug": lesson.slug,
        "order": lesson.order,
        "video_url": lesson.video_url,
        "duration_sec": lesson.duration_sec,
        "free_preview": lesson.free_preview,
        "created_at": lesson.created_at,
    }


def group_curriculum(
    sections: Sequence[SectionModel],
    lessons: Sequence[LessonModel],
) -> dict[UUID, list[dict[str, Any]]]:
    """
    Nest lessons under their sections, keyed by course id.

    Both inputs must already be in display order; that order is kept.
    """
    lessons_by_section: dict[UUID, list[dict[str, Any]]] = {}
    for lesson in lessons:
        lessons_by_section.setdefault(lesson.section_id, []).append(lesson_dict(lesson))

    curriculum: dict[UUID, list[dict[str, Any]]] = {}
    for section in sections:
        entry = section_dict(section)
        entry["lessons"] = lessons_by_section.get(section.id, [])
        curriculum.setdefault(section.course_id, []).append(entry)
    return curriculum
