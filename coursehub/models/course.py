"""
Course domain models and schemas.

Request/response schemas for catalog, detail and course administration.

Dependencies: pydantic
System role: Course API contracts
"""

import uuid
from datetime import datetime

from pydantic import Field

from coursehub.boundary.db.models.course_model import CourseStatus
from coursehub.models.common import CamelModel, PaginationMeta
from coursehub.models.curriculum import SectionResponse
from coursehub.models.review import ReviewResponse


class CreateCourseRequest(CamelModel):
    """Request schema for creating a new course."""

    slug: str = Field(..., min_length=1, max_length=255, description="URL key (unique)")
    title: str = Field(..., min_length=1, max_length=255, description="Course title")
    subtitle: str | None = Field(None, max_length=512)
    description: str | None = Field(None, description="Long-form description")
    price_cents: int = Field(0, ge=0, description="Price in cents, 0 for free")
    status: CourseStatus = Field(CourseStatus.DRAFT, description="Publication state")
    thumbnail_url: str | None = Field(None, max_length=2048)
    category: str | None = Field(None, max_length=128)
    level: str | None = Field(None, max_length=64)
    language: str | None = Field(None, max_length=64)


class UpdateCourseRequest(CamelModel):
    """
    Request schema for updating a course.

    Only fields present in the request body are applied.
    """

    slug: str | None = Field(None, min_length=1, max_length=255)
    title: str | None = Field(None, min_length=1, max_length=255)
    subtitle: str | None = Field(None, max_length=512)
    description: str | None = None
    price_cents: int | None = Field(None, ge=0)
    status: CourseStatus | None = None
    thumbnail_url: str | None = Field(None, max_length=2048)
    category: str | None = Field(None, max_length=128)
    level: str | None = Field(None, max_length=64)
    language: str | None = Field(None, max_length=64)


class CourseResponse(CamelModel):
    """Response schema for course administration operations."""

    id: uuid.UUID
    slug: str
    title: str
    subtitle: str | None = None
    description: str | None = None
    price_cents: int
    status: CourseStatus
    thumbnail_url: str | None = None
    category: str | None = None
    level: str | None = None
    language: str | None = None
    created_by_id: uuid.UUID
    created_at: datetime
    updated_at: datetime


class InstructorSummary(CamelModel):
    """Public profile of the course author."""

    id: uuid.UUID
    name: str | None = None
    image: str | None = None


class CourseStats(CamelModel):
    """Derived per-course figures."""

    enrollment_count: int = 0
    review_count: int = 0
    average_rating: float = 0.0
    total_lessons: int = 0


class CourseSummary(CamelModel):
    """Catalog card for a published course."""

    id: uuid.UUID
    slug: str
    title: str
    subtitle: str | None = None
    description: str | None = None
    price_cents: int
    thumbnail_url: str | None = None
    category: str | None = None
    level: str | None = None
    language: str | None = None
    created_at: datetime
    instructor: InstructorSummary | None = None
    stats: CourseStats
    tags: list[str] = Field(default_factory=list)


class CatalogResponse(CamelModel):
    """One page of the public catalog."""

    courses: list[CourseSummary]
    pagination: PaginationMeta


class FeaturedCoursesResponse(CamelModel):
    """Landing-page selection."""

    courses: list[CourseSummary]


class CourseDetailResponse(CourseSummary):
    """Full course page: curriculum, reviews and the viewer's enrollment state."""

    status: CourseStatus
    created_by_id: uuid.UUID
    updated_at: datetime
    sections: list[SectionResponse] = Field(default_factory=list)
    reviews: list[ReviewResponse] = Field(default_factory=list)
    total_duration_sec: int = 0
    is_enrolled: bool = False


class CourseCreator(CamelModel):
    id: uuid.UUID
    name: str | None = None


class AdminCourseSummary(CamelModel):
    """Row of the admin course table (any status)."""

    id: uuid.UUID
    slug: str
    title: str
    status: CourseStatus
    price_cents: int
    category: str | None = None
    created_at: datetime
    updated_at: datetime
    created_by: CourseCreator | None = None
    section_count: int = 0
    lesson_count: int = 0
    enrollment_count: int = 0
