"""
Test suite for aggregate statistics math.

Covers rating averages, pagination blocks, enrollment growth, rating
clamping, curriculum totals and learner progress.

System role: Verification of pure derived-figure helpers
"""

import uuid

import pytest

from coursehub.core.course_stats import (
    average_rating,
    build_course_stats,
    build_pagination,
    clamp_rating,
    course_progress,
    enrollment_growth,
    round_half_up,
    total_duration,
    total_lessons,
)


def _lesson(slug: str, completed: bool | None = None, duration_sec: int | None = None) -> dict:
    progress = None if completed is None else {"completed": completed, "position_sec": 10}
    return {
        "id": uuid.uuid4(),
        "slug": slug,
        "title": slug.title(),
        "duration_sec": duration_sec,
        "progress": progress,
    }


class TestAverageRating:
    """Test suite for average_rating()."""

    def test_average_should_round_to_one_decimal(self) -> None:
        assert average_rating(3, 5 + 5 + 4) == 4.7

    def test_average_should_round_half_up(self) -> None:
        assert average_rating(2, 4 + 5) == 4.5
        assert average_rating(4, 5 + 5 + 5 + 4) == 4.8

    def test_average_without_reviews_should_be_zero(self) -> None:
        assert average_rating(0, 0) == 0.0

    def test_stats_block_should_carry_all_counts(self) -> None:
        stats = build_course_stats(enrollment_count=7, review_count=2, rating_sum=9, total_lessons=12)

        assert stats == {
            "enrollment_count": 7,
            "review_count": 2,
            "average_rating": 4.5,
            "total_lessons": 12,
        }


class TestPagination:
    """Test suite for build_pagination()."""

    def test_middle_page_should_have_both_neighbours(self) -> None:
        pagination = build_pagination(page=2, limit=20, total_count=45)

        assert pagination["total_pages"] == 3
        assert pagination["has_next"] is True
        assert pagination["has_prev"] is True

    def test_last_page_should_have_no_next(self) -> None:
        pagination = build_pagination(page=3, limit=20, total_count=45)

        assert pagination["has_next"] is False
        assert pagination["has_prev"] is True

    def test_empty_result_should_have_zero_pages(self) -> None:
        pagination = build_pagination(page=1, limit=20, total_count=0)

        assert pagination["total_pages"] == 0
        assert pagination["has_next"] is False
        assert pagination["has_prev"] is False


class TestEnrollmentGrowth:
    """Test suite for enrollment_growth()."""

    @pytest.mark.parametrize(
        ("last", "previous", "expected"),
        [
            (15, 10, 50),
            (5, 10, -50),
            (10, 10, 0),
            (7, 8, -12),
            (1, 3, -67),
        ],
    )
    def test_growth_should_be_rounded_percent_change(self, last: int, previous: int, expected: int) -> None:
        assert enrollment_growth(last, previous) == expected

    def test_growth_without_baseline_should_be_zero(self) -> None:
        assert enrollment_growth(12, 0) == 0

    def test_round_half_up_should_round_negative_halves_up(self) -> None:
        assert round_half_up(-2.5) == -2
        assert round_half_up(2.5) == 3


class TestClampRating:
    """Test suite for clamp_rating()."""

    @pytest.mark.parametrize(("submitted", "stored"), [(0, 1), (-3, 1), (1, 1), (3, 3), (5, 5), (9, 5)])
    def test_rating_should_be_forced_into_range(self, submitted: int, stored: int) -> None:
        assert clamp_rating(submitted) == stored


class TestCurriculumTotals:
    """Test suite for total_lessons() and total_duration()."""

    def test_totals_should_sum_across_sections(self) -> None:
        sections = [
            {"lessons": [_lesson("a", duration_sec=60), _lesson("b", duration_sec=None)]},
            {"lessons": []},
            {"lessons": [_lesson("c", duration_sec=90)]},
        ]

        assert total_lessons(sections) == 3
        assert total_duration(sections) == 150


class TestCourseProgress:
    """Test suite for course_progress()."""

    def test_next_lesson_should_be_first_incomplete_in_order(self) -> None:
        sections = [
            {"lessons": [_lesson("intro", completed=True), _lesson("setup", completed=False)]},
            {"lessons": [_lesson("deep-dive")]},
        ]

        progress = course_progress(sections)

        assert progress["completed"] == 1
        assert progress["total"] == 3
        assert progress["percentage"] == 33
        assert progress["next_lesson"]["slug"] == "setup"

    def test_finished_course_should_have_no_next_lesson(self) -> None:
        sections = [{"lessons": [_lesson("intro", completed=True), _lesson("outro", completed=True)]}]

        progress = course_progress(sections)

        assert progress["percentage"] == 100
        assert progress["next_lesson"] is None

    def test_course_without_lessons_should_report_zero(self) -> None:
        progress = course_progress([{"lessons": []}])

        assert progress == {"completed": 0, "total": 0, "percentage": 0, "next_lesson": None}
