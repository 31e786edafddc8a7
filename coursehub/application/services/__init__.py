"""Service orchestrators."""

from .admin_stats_service import AdminStatsService
from .catalog_service import CatalogService
from .course_service import CourseService
from .curriculum_service import CurriculumService
from .enrollment_service import EnrollmentService
from .progress_service import ProgressService
from .review_service import ReviewService
from .user_service import UserService

__all__ = [
    "AdminStatsService",
    "CatalogService",
    "CourseService",
    "CurriculumService",
    "EnrollmentService",
    "ProgressService",
    "ReviewService",
    "UserService",
]
