"""
Learner dashboard API endpoint.

Routes: GET /my-courses

Dependencies: coursehub.application.services, coursehub.models
System role: Learner dashboard HTTP API
"""

from fastapi import APIRouter, Depends

from coursehub.api.deps import get_enrollment_service, get_optional_identity
from coursehub.api.routers.router_utils import handle_service_errors
from coursehub.application.services import EnrollmentService
from coursehub.core.identity import Identity
from coursehub.models.enrollment import MyCoursesResponse

router = APIRouter(prefix="/my-courses", tags=["enrollment"])


@router.get("", response_model=MyCoursesResponse)
@handle_service_errors
async def my_courses(
    identity: Identity | None = Depends(get_optional_identity),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> MyCoursesResponse:
    """
    The caller's enrolled courses with curriculum and per-lesson progress.

    Raises:
        HTTPException(401): No caller identity
    """
    courses = await enrollment_service.my_courses(identity)
    return MyCoursesResponse.model_validate({"courses": courses})
