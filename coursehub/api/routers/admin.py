"""
Admin API endpoints.

Routes:
- GET /admin/stats - Dashboard snapshot
- GET /admin/courses - Every course, any status
- GET /admin/users - Every account with enrollments

Dependencies: coursehub.application.services, coursehub.models
System role: Admin console HTTP API
"""

from fastapi import APIRouter, Depends

from coursehub.api.deps import (
    get_admin_stats_service,
    get_course_service,
    get_optional_identity,
    get_user_service,
)
from coursehub.api.routers.courses.course_responses import map_admin_courses_to_response
from coursehub.api.routers.router_utils import handle_service_errors
from coursehub.application.services import AdminStatsService, CourseService, UserService
from coursehub.core.identity import Identity
from coursehub.models.admin import AdminStatsResponse
from coursehub.models.course import AdminCourseSummary
from coursehub.models.user import UserListResponse

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/stats", response_model=AdminStatsResponse)
@handle_service_errors
async def admin_stats(
    identity: Identity | None = Depends(get_optional_identity),
    stats_service: AdminStatsService = Depends(get_admin_stats_service),
) -> AdminStatsResponse:
    """
    Platform totals, recent activity, categories and enrollment growth.

    Raises:
        HTTPException(401): No caller identity
        HTTPException(403): Caller is not an admin
    """
    stats = await stats_service.get_stats(identity)
    return AdminStatsResponse.model_validate(stats)


@router.get("/courses", response_model=list[AdminCourseSummary])
@handle_service_errors
async def admin_courses(
    identity: Identity | None = Depends(get_optional_identity),
    course_service: CourseService = Depends(get_course_service),
) -> list[AdminCourseSummary]:
    """Every course, newest first, with curriculum and enrollment counts."""
    courses = await course_service.list_all_courses(identity)
    return map_admin_courses_to_response(courses)


@router.get("/users", response_model=UserListResponse)
@handle_service_errors
async def admin_users(
    identity: Identity | None = Depends(get_optional_identity),
    user_service: UserService = Depends(get_user_service),
) -> UserListResponse:
    """Every account, newest first, with enrolled course titles."""
    users = await user_service.list_users(identity)
    return UserListResponse.model_validate({"users": users})
