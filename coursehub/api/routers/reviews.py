"""
Review API endpoint.

Routes: POST /reviews - Create or overwrite the caller's review

Dependencies: coursehub.application.services, coursehub.models
System role: Review HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from coursehub.api.deps import get_optional_identity, get_review_service
from coursehub.api.routers.router_utils import handle_service_errors
from coursehub.application.services import ReviewService
from coursehub.core.identity import Identity
from coursehub.models.review import ReviewResponse, UpsertReviewRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reviews", tags=["reviews"])


@router.post("", response_model=ReviewResponse)
@handle_service_errors
async def upsert_review(
    request: UpsertReviewRequest,
    identity: Identity | None = Depends(get_optional_identity),
    review_service: ReviewService = Depends(get_review_service),
) -> ReviewResponse:
    """
    Create or overwrite the caller's review of a course.

    Args:
        request: UpsertReviewRequest with course_id, rating, comment
        identity: Caller (injected from gateway headers)
        review_service: Injected ReviewService

    Returns:
        ReviewResponse: Stored review (rating clamped into 1..5)

    Raises:
        HTTPException(400): courseId or rating missing
        HTTPException(401): No caller identity
        HTTPException(404): Course not found
    """
    review = await review_service.upsert_review(
        identity,
        request.course_id,
        request.rating,
        comment=request.comment,
    )
    return ReviewResponse(**review)
