"""
Admin dashboard schemas.

Dependencies: pydantic
System role: Admin API contracts
"""

import uuid
from datetime import datetime

from coursehub.models.common import CamelModel


class RecentCourse(CamelModel):
    id: uuid.UUID
    title: str
    slug: str
    created_by: str | None = None
    enrollments: int
    created_at: datetime


class RecentEnrollment(CamelModel):
    id: uuid.UUID
    user_name: str | None = None
    user_email: str
    course_title: str
    course_slug: str
    created_at: datetime


class CategoryStat(CamelModel):
    category: str
    count: int


class AdminStatsResponse(CamelModel):
    """Platform snapshot for the admin dashboard."""

    total_courses: int
    total_users: int
    total_enrollments: int
    published_courses: int
    draft_courses: int
    recent_courses: list[RecentCourse]
    recent_enrollments: list[RecentEnrollment]
    category_stats: list[CategoryStat]
    enrollments_last_30_days: int
    enrollment_growth: int
