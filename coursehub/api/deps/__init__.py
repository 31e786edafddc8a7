"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_admin_stats_service,
    get_catalog_service,
    get_course_service,
    get_curriculum_service,
    get_enrollment_service,
    get_optional_identity,
    get_progress_service,
    get_review_service,
    get_settings_dependency,
    get_user_service,
)

__all__ = [
    "get_admin_stats_service",
    "get_catalog_service",
    "get_course_service",
    "get_curriculum_service",
    "get_enrollment_service",
    "get_optional_identity",
    "get_progress_service",
    "get_review_service",
    "get_settings_dependency",
    "get_user_service",
]
