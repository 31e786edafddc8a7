"""
Admin stats service orchestrator.

Platform snapshot for the admin dashboard. The counts are separate
queries and are not read under one snapshot; a write landing between
them can make the figures momentarily disagree.

Dependencies: coursehub.boundary.db.CRUD, coursehub.core, coursehub.configs
System role: Admin dashboard aggregation
"""

import logging
from datetime import datetime, timedelta, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.boundary.db.CRUD import course_crud, enrollment_crud, user_crud
from coursehub.boundary.db.models import CourseModel, CourseStatus
from coursehub.configs import get_settings
from coursehub.configs.catalog import CatalogSettings
from coursehub.core.course_stats import enrollment_growth
from coursehub.core.identity import Identity, require_admin

logger = logging.getLogger(__name__)


class AdminStatsService:
    """Admin stats service orchestrator."""

    def __init__(self, db: AsyncSession, settings: CatalogSettings | None = None) -> None:
        """
        Initialize admin stats service.

        Args:
            db: Async SQLAlchemy session
            settings: Dashboard list sizes and growth window
        """
        self.db = db
        self.settings = settings or get_settings().catalog

    async def get_stats(self, identity: Identity | None, now: datetime | None = None) -> dict:
        """
        Compute the dashboard snapshot.

        Args:
            identity: Caller (must be admin)
            now: Reference time for the growth windows (current UTC time when None)

        Returns:
            dict: Totals, recent courses and enrollments, category breakdown,
            enrollments in the last window and growth versus the window before
        """
        require_admin(identity)
        now = now or datetime.now(timezone.utc)
        window = timedelta(days=self.settings.growth_window_days)
        last_start = now - window
        previous_start = now - 2 * window

        try:
            total_courses = await course_crud.count(self.db)
            total_users = await user_crud.count(self.db)
            total_enrollments = await enrollment_crud.count(self.db)
            published_courses = await course_crud.count(
                self.db, CourseModel.status == CourseStatus.PUBLISHED
            )
            draft_courses = await course_crud.count(self.db, CourseModel.status == CourseStatus.DRAFT)

            recent_courses = await course_crud.get_all(self.db, limit=self.settings.recent_courses_count)
            creators = await user_crud.get_many(self.db, (c.created_by_id for c in recent_courses))
            recent_counts = await enrollment_crud.count_by_course(self.db, [c.id for c in recent_courses])
            recent_enrollments = await enrollment_crud.recent_with_details(
                self.db, self.settings.recent_enrollments_count
            )
            categories = await course_crud.count_by_category(self.db)

            last_window = await enrollment_crud.count_created_between(self.db, last_start)
            previous_window = await enrollment_crud.count_created_between(
                self.db, previous_start, last_start
            )
        except Exception as e:
            logger.error("Failed to compute admin stats", extra={"error": str(e)})
            raise

        return {
            "total_courses": total_courses,
            "total_users": total_users,
            "total_enrollments": total_enrollments,
            "published_courses": published_courses,
            "draft_courses": draft_courses,
            "recent_courses": [
                {
                    "id": course.id,
                    "title": course.title,
                    "slug": course.slug,
                    "created_by": getattr(creators.get(course.created_by_id), "name", None),
                    "enrollments": recent_counts.get(course.id, 0),
                    "created_at": course.created_at,
                }
                for course in recent_courses
            ],
            "recent_enrollments": [
                {
                    "id": enrollment.id,
                    "user_name": user_name,
                    "user_email": user_email,
                    "course_title": course_title,
                    "course_slug": course_slug,
                    "created_at": enrollment.created_at,
                }
                for enrollment, user_name, user_email, course_title, course_slug in recent_enrollments
            ],
            "category_stats": [
                {"category": category, "count": count} for category, count in categories
            ],
            "enrollments_last_30_days": last_window,
            "enrollment_growth": enrollment_growth(last_window, previous_window),
        }
