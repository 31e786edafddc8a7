"""
Integration tests for ReviewService and visible-review aggregation.

System role: Verification of review upserts and their effect on course stats
"""

import uuid

import pytest

from coursehub.application.services import CourseService, ReviewService
from coursehub.boundary.db.CRUD import review_crud, user_crud
from coursehub.boundary.db.models import ReviewModel, ReviewStatus, UserRole
from coursehub.core.exceptions import CourseNotFoundError, UnauthorizedError, ValidationError
from coursehub.core.identity import Identity


@pytest.mark.asyncio
async def test_resubmitting_should_overwrite_single_review(
    test_async_db, student_identity, published_course
) -> None:
    course_id = published_course["course"].id
    service = ReviewService(test_async_db)

    first = await service.upsert_review(student_identity, course_id, 2, "Too fast")
    second = await service.upsert_review(student_identity, course_id, 5, "Better on a second watch")

    count = await review_crud.count(test_async_db, ReviewModel.course_id == course_id)
    assert count == 1
    assert second["id"] == first["id"]
    assert second["rating"] == 5
    assert second["comment"] == "Better on a second watch"
    assert second["status"] == ReviewStatus.VISIBLE


@pytest.mark.asyncio
@pytest.mark.parametrize(("submitted", "stored"), [(0, 1), (-2, 1), (7, 5), (3, 3)])
async def test_rating_should_be_clamped(
    test_async_db, student_identity, published_course, submitted, stored
) -> None:
    review = await ReviewService(test_async_db).upsert_review(
        student_identity, published_course["course"].id, submitted
    )

    assert review["rating"] == stored


@pytest.mark.asyncio
async def test_blank_comment_should_be_stored_as_none(
    test_async_db, student_identity, published_course
) -> None:
    review = await ReviewService(test_async_db).upsert_review(
        student_identity, published_course["course"].id, 4, "   "
    )

    assert review["comment"] is None


@pytest.mark.asyncio
async def test_missing_fields_should_raise_validation_error(
    test_async_db, student_identity, published_course
) -> None:
    service = ReviewService(test_async_db)

    with pytest.raises(ValidationError):
        await service.upsert_review(student_identity, None, 4)
    with pytest.raises(ValidationError):
        await service.upsert_review(student_identity, published_course["course"].id, None)


@pytest.mark.asyncio
async def test_unknown_course_should_raise_not_found(test_async_db, student_identity) -> None:
    with pytest.raises(CourseNotFoundError):
        await ReviewService(test_async_db).upsert_review(student_identity, uuid.uuid4(), 4)


@pytest.mark.asyncio
async def test_review_should_require_identity(test_async_db, published_course) -> None:
    with pytest.raises(UnauthorizedError):
        await ReviewService(test_async_db).upsert_review(None, published_course["course"].id, 4)


@pytest.mark.asyncio
async def test_course_stats_should_average_visible_reviews_only(
    test_async_db, student_identity, published_course
) -> None:
    course_id = published_course["course"].id
    reviewers = [student_identity]
    for index in range(3):
        user = await user_crud.create(
            test_async_db, name=f"Reviewer {index}", email=f"reviewer{index}@student.dev"
        )
        reviewers.append(Identity(user_id=user.id, role=UserRole.STUDENT))
    await test_async_db.commit()

    service = ReviewService(test_async_db)
    for identity, rating in zip(reviewers, [5, 5, 4, 1]):
        await service.upsert_review(identity, course_id, rating)

    hidden = await review_crud.visible_for_course(test_async_db, course_id)
    hidden_review = next(review for review, _, _ in hidden if review.rating == 1)
    await review_crud.update_by_id(test_async_db, hidden_review.id, status=ReviewStatus.HIDDEN)
    await test_async_db.commit()

    detail = await CourseService(test_async_db).get_course_detail("intro-to-cpus")

    assert detail["stats"]["review_count"] == 3
    assert detail["stats"]["average_rating"] == 4.7
    assert len(detail["reviews"]) == 3
