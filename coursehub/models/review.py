"""
Review schemas.

Dependencies: pydantic
System role: Review API contracts
"""

import uuid
from datetime import datetime

from pydantic import Field

from coursehub.boundary.db.models.review_model import ReviewStatus
from coursehub.models.common import CamelModel


class UpsertReviewRequest(CamelModel):
    """
    Request schema for creating or overwriting a review.

    Presence of course_id and rating is checked by the service so a missing
    field is reported as a bad request rather than a schema error.
    """

    course_id: uuid.UUID | None = None
    rating: int | None = Field(None, description="Clamped into 1..5")
    comment: str | None = Field(None, max_length=5000)


class ReviewerSummary(CamelModel):
    name: str | None = None
    image: str | None = None


class ReviewResponse(CamelModel):
    """Review as shown on a course page."""

    id: uuid.UUID
    user_id: uuid.UUID
    course_id: uuid.UUID
    rating: int
    comment: str | None = None
    status: ReviewStatus = ReviewStatus.VISIBLE
    created_at: datetime
    updated_at: datetime | None = None
    user: ReviewerSummary | None = None
