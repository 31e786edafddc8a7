"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from coursehub.boundary.db.CRUD import course_crud, enrollment_crud

    course = await course_crud.get_by_slug(db, "intro-to-cpus")
    enrollment = await enrollment_crud.get_by_pair(db, user_id, course.id)
"""

from coursehub.boundary.db.CRUD.base_crud import BaseCRUD
from coursehub.boundary.db.CRUD.course_crud import CatalogFilter, CourseCRUD, course_crud
from coursehub.boundary.db.CRUD.curriculum_crud import (
    LessonCRUD,
    SectionCRUD,
    lesson_crud,
    section_crud,
)
from coursehub.boundary.db.CRUD.enrollment_crud import (
    EnrollmentCRUD,
    ProgressCRUD,
    enrollment_crud,
    progress_crud,
)
from coursehub.boundary.db.CRUD.review_crud import ReviewCRUD, TagCRUD, review_crud, tag_crud
from coursehub.boundary.db.CRUD.user_crud import UserCRUD, user_crud

__all__ = [
    "BaseCRUD",
    "CatalogFilter",
    "CourseCRUD",
    "course_crud",
    "SectionCRUD",
    "section_crud",
    "LessonCRUD",
    "lesson_crud",
    "EnrollmentCRUD",
    "enrollment_crud",
    "ProgressCRUD",
    "progress_crud",
    "ReviewCRUD",
    "review_crud",
    "TagCRUD",
    "tag_crud",
    "UserCRUD",
    "user_crud",
]
