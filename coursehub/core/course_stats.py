"""
Aggregate statistics math.

Pure reductions used by the catalog, course detail, learner dashboard and
admin dashboard. Rounding is half-up (towards +infinity on .5), so a mean
of 4.65 shows as 4.7 and a growth of -2.5% as -2%.

Dependencies: None (pure domain layer)
System role: Derived course, progress and growth figures
"""

import math
from typing import Any, Iterable

MIN_RATING = 1
MAX_RATING = 5


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going up."""
    return math.floor(value + 0.5)


def average_rating(review_count: int, rating_sum: int | float) -> float:
    """
    Mean rating rounded to one decimal place.

    Args:
        review_count: Number of visible reviews
        rating_sum: Sum of their ratings

    Returns:
        float: Mean rating, 0 when there are no reviews
    """
    if review_count <= 0:
        return 0.0
    return round_half_up(rating_sum / review_count * 10) / 10


def build_course_stats(
    enrollment_count: int = 0,
    review_count: int = 0,
    rating_sum: int | float = 0,
    total_lessons: int = 0,
) -> dict[str, Any]:
    """Assemble the stats block attached to course summaries and details."""
    return {
        "enrollment_count": enrollment_count,
        "review_count": review_count,
        "average_rating": average_rating(review_count, rating_sum),
        "total_lessons": total_lessons,
    }


def total_lessons(sections: Iterable[dict[str, Any]]) -> int:
    """Sum of lesson counts across a course's sections."""
    return sum(len(section.get("lessons") or []) for section in sections)


def total_duration(sections: Iterable[dict[str, Any]]) -> int:
    """Summed lesson length in seconds; lessons without a duration count as 0."""
    return sum(
        lesson.get("duration_sec") or 0
        for section in sections
        for lesson in section.get("lessons") or []
    )


def clamp_rating(rating: int | float) -> int:
    """Force a submitted rating into the 1..5 range."""
    return int(max(MIN_RATING, min(MAX_RATING, rating)))


def build_pagination(page: int, limit: int, total_count: int) -> dict[str, Any]:
    """
    Pagination block for list responses.

    Args:
        page: 1-based page number
        limit: Page size (> 0)
        total_count: Rows matching the filter

    Returns:
        dict: page, limit, total_count, total_pages, has_next, has_prev
    """
    total_pages = math.ceil(total_count / limit) if limit > 0 else 0
    return {
        "page": page,
        "limit": limit,
        "total_count": total_count,
        "total_pages": total_pages,
        "has_next": page < total_pages,
        "has_prev": page > 1,
    }


def enrollment_growth(last_window: int, previous_window: int) -> int:
    """
    Percent change in enrollments between two equal windows.

    No baseline (previous_window == 0) reports 0 rather than an infinite
    or undefined growth.
    """
    if previous_window <= 0:
        return 0
    return round_half_up((last_window - previous_window) / previous_window * 100)


def course_progress(sections: Iterable[dict[str, Any]]) -> dict[str, Any]:
    """
    Learner progress through one course.

    Args:
        sections: Sections in curriculum order, each with ordered "lessons";
            every lesson carries a "progress" dict or None

    Returns:
        dict: completed, total, percentage (0-100) and next_lesson, the first
        lesson in curriculum order not yet completed (None when all done)
    """
    lessons = [lesson for section in sections for lesson in section.get("lessons") or []]
    done = [lesson for lesson in lessons if (lesson.get("progress") or {}).get("completed")]
    next_lesson = next(
        (lesson for lesson in lessons if not (lesson.get("progress") or {}).get("completed")),
        None,
    )
    total = len(lessons)
    return {
        "completed": len(done),
        "total": total,
        "percentage": round_half_up(len(done) / total * 100) if total else 0,
        "next_lesson": (
            {"id": next_lesson["id"], "slug": next_lesson["slug"], "title": next_lesson["title"]}
            if next_lesson
            else None
        ),
    }
