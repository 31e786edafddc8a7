"""
Enrollment API endpoints.

Routes:
- POST /enroll - Enroll the caller (409 when already enrolled)
- GET /enroll?courseId= - Enroll if needed, then redirect to the first lesson

Dependencies: coursehub.application.services, coursehub.models
System role: Enrollment HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from fastapi.responses import RedirectResponse

from coursehub.api.deps import get_enrollment_service, get_optional_identity
from coursehub.api.routers.router_utils import handle_service_errors
from coursehub.application.services import EnrollmentService
from coursehub.core.identity import Identity
from coursehub.models.common import ErrorResponse
from coursehub.models.enrollment import EnrollRequest, EnrollResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/enroll", tags=["enrollment"])

SIGN_IN_PATH = "/auth/signin"
CATALOG_PATH = "/catalog"


@router.post(
    "",
    response_model=EnrollResponse,
    responses={401: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
@handle_service_errors
async def enroll(
    request: EnrollRequest,
    identity: Identity | None = Depends(get_optional_identity),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> EnrollResponse:
    """
    Enroll the caller in a course.

    Args:
        request: EnrollRequest with course_id
        identity: Caller (injected from gateway headers)
        enrollment_service: Injected EnrollmentService

    Returns:
        EnrollResponse: Enrollment record and first-lesson pointer (may be null)

    Raises:
        HTTPException(400): course_id missing
        HTTPException(401): No caller identity
        HTTPException(404): Course not found
        HTTPException(409): Already enrolled
    """
    result = await enrollment_service.enroll(identity, request.course_id)
    return EnrollResponse(**result)


@router.get("", response_class=RedirectResponse, status_code=307)
async def enroll_and_redirect(
    course_id: str | None = Query(None, alias="courseId"),
    identity: Identity | None = Depends(get_optional_identity),
    enrollment_service: EnrollmentService = Depends(get_enrollment_service),
) -> RedirectResponse:
    """
    Link-click enrollment.

    Never reports an error: anonymous callers go to sign-in, a missing or
    unknown course and any failure go back to the catalog.
    """
    if identity is None:
        return RedirectResponse(SIGN_IN_PATH, status_code=307)
    if not course_id:
        return RedirectResponse(CATALOG_PATH, status_code=307)

    try:
        target = await enrollment_service.enroll_and_redirect(identity, UUID(course_id))
    except Exception as e:
        logger.warning(
            "Enrollment redirect failed",
            extra={"course_id": course_id, "error": str(e), "error_type": type(e).__name__},
        )
        return RedirectResponse(CATALOG_PATH, status_code=307)

    return RedirectResponse(target, status_code=307)
