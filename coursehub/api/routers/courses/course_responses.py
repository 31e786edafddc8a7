"""
Course response mapping utilities.

Transforms service dictionaries into Pydantic response models.
Centralizes response construction logic.

Dependencies: coursehub.models.course, coursehub.models.curriculum
System role: Course response transformation
"""

from typing import Any

from coursehub.models.course import (
    AdminCourseSummary,
    CatalogResponse,
    CourseDetailResponse,
    CourseResponse,
    FeaturedCoursesResponse,
)
from coursehub.models.curriculum import LessonResponse, SectionResponse


def map_course_to_response(course_data: dict[str, Any]) -> CourseResponse:
    """
    Transform course data dictionary into CourseResponse.

    Args:
        course_data: Dictionary containing stored course fields

    Returns:
        CourseResponse: Pydantic model for API response
    """
    return CourseResponse(**course_data)


def map_catalog_to_response(catalog_data: dict[str, Any]) -> CatalogResponse:
    """
    Transform a catalog page into CatalogResponse.

    Args:
        catalog_data: Dictionary with "courses" (summaries) and "pagination"

    Returns:
        CatalogResponse: Pydantic model for API response
    """
    return CatalogResponse.model_validate(catalog_data)


def map_featured_to_response(featured_data: dict[str, Any]) -> FeaturedCoursesResponse:
    return FeaturedCoursesResponse.model_validate(featured_data)


def map_detail_to_response(detail_data: dict[str, Any]) -> CourseDetailResponse:
    """
    Transform an assembled course page into CourseDetailResponse.

    Args:
        detail_data: Course fields plus sections, reviews, stats, tags, is_enrolled

    Returns:
        CourseDetailResponse: Pydantic model for API response
    """
    return CourseDetailResponse.model_validate(detail_data)


def map_admin_courses_to_response(courses_data: list[dict[str, Any]]) -> list[AdminCourseSummary]:
    return [AdminCourseSummary.model_validate(course) for course in courses_data]


def map_section_to_response(section_data: dict[str, Any]) -> SectionResponse:
    return SectionResponse.model_validate(section_data)


def map_lesson_to_response(lesson_data: dict[str, Any]) -> LessonResponse:
    return LessonResponse.model_validate(lesson_data)
