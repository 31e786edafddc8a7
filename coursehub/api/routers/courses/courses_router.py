"""
Course API endpoints.

Routes:
- GET /courses - Public catalog (filters, sorting, pagination)
- GET /courses/featured - Landing-page selection
- GET /courses/{slug} - Course page
- POST /courses - Create course (admin)
- PATCH /courses/{slug} - Update course (admin)
- POST /courses/{slug}/sections - Append section (admin)
- POST /courses/{slug}/sections/{section_id}/lessons - Append lesson (admin)

Dependencies: coursehub.application.services, coursehub.models
System role: Course catalog and authoring HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from coursehub.api.deps import (
    get_catalog_service,
    get_course_service,
    get_curriculum_service,
    get_optional_identity,
)
from coursehub.api.routers.router_utils import handle_service_errors
from coursehub.application.services import CatalogService, CourseService, CurriculumService
from coursehub.core.identity import Identity
from coursehub.models.common import ErrorResponse
from coursehub.models.course import (
    CatalogResponse,
    CourseDetailResponse,
    CourseResponse,
    CreateCourseRequest,
    FeaturedCoursesResponse,
    UpdateCourseRequest,
)
from coursehub.models.curriculum import (
    CreateLessonRequest,
    CreateSectionRequest,
    LessonResponse,
    SectionResponse,
)

from .course_responses import (
    map_catalog_to_response,
    map_course_to_response,
    map_detail_to_response,
    map_featured_to_response,
    map_lesson_to_response,
    map_section_to_response,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("", response_model=CatalogResponse)
@handle_service_errors
async def list_courses(
    search: str | None = Query(None),
    category: str | None = Query(None),
    level: str | None = Query(None),
    sort_by: str | None = Query(None, alias="sortBy"),
    min_price: str | None = Query(None, alias="minPrice"),
    max_price: str | None = Query(None, alias="maxPrice"),
    page: str | None = Query(None),
    limit: str | None = Query(None),
    catalog_service: CatalogService = Depends(get_catalog_service),
) -> CatalogResponse:
    """
    List published courses.

    Numeric parameters are taken as raw strings; malformed values fall back
    to page 1 / the default page size, malformed prices are ignored.

    Returns:
        CatalogResponse: Course summaries and pagination

    Raises:
        HTTPException(500): Retrieval failed
    """
    catalog = await catalog_service.list_courses(
        page=page,
        limit=limit,
        category=category,
        level=level,
        search=search,
        min_price=min_price,
        max_price=max_price,
        sort_by=sort_by,
    )
    return map_catalog_to_response(catalog)


@router.get("/featured", response_model=FeaturedCoursesResponse)
@handle_service_errors
async def featured_courses(
    catalog_service: CatalogService = Depends(get_catalog_service),
) -> FeaturedCoursesResponse:
    """Most-enrolled published courses."""
    return map_featured_to_response(await catalog_service.featured_courses())


@router.get(
    "/{slug}",
    response_model=CourseDetailResponse,
    responses={404: {"model": ErrorResponse}},
)
@handle_service_errors
async def get_course(
    slug: str,
    identity: Identity | None = Depends(get_optional_identity),
    course_service: CourseService = Depends(get_course_service),
) -> CourseDetailResponse:
    """
    Get the course page by slug.

    Args:
        slug: Course slug
        identity: Optional viewer (injected from gateway headers)
        course_service: Injected CourseService

    Returns:
        CourseDetailResponse: Course with curriculum, reviews, stats and is_enrolled

    Raises:
        HTTPException(404): Course not found
        HTTPException(500): Retrieval failed
    """
    detail = await course_service.get_course_detail(slug, identity=identity)
    return map_detail_to_response(detail)


@router.post("", response_model=CourseResponse, status_code=201)
@handle_service_errors
async def create_course(
    request: CreateCourseRequest,
    identity: Identity | None = Depends(get_optional_identity),
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Create a new course owned by the calling admin.

    Raises:
        HTTPException(401/403): Not an admin
        HTTPException(409): Slug already in use
    """
    logger.info(
        "Creating new course",
        extra={"slug": request.slug, "status": request.status.value},
    )
    course_data = await course_service.create_course(identity, **request.model_dump())
    return map_course_to_response(course_data)


@router.patch("/{slug}", response_model=CourseResponse)
@handle_service_errors
async def update_course(
    slug: str,
    request: UpdateCourseRequest,
    identity: Identity | None = Depends(get_optional_identity),
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Update the fields present in the request body.

    Raises:
        HTTPException(400): Empty update or required field set to null
        HTTPException(401/403): Not an admin
        HTTPException(404): Course not found
        HTTPException(409): New slug already in use
    """
    course_data = await course_service.update_course(
        identity,
        slug,
        request.model_dump(exclude_unset=True),
    )
    return map_course_to_response(course_data)


@router.post("/{slug}/sections", response_model=SectionResponse, status_code=201)
@handle_service_errors
async def create_section(
    slug: str,
    request: CreateSectionRequest,
    identity: Identity | None = Depends(get_optional_identity),
    curriculum_service: CurriculumService = Depends(get_curriculum_service),
) -> SectionResponse:
    """
    Append a section to a course.

    Raises:
        HTTPException(401/403): Not an admin
        HTTPException(404): Course not found
    """
    section = await curriculum_service.add_section(
        identity,
        slug,
        title=request.title,
        order=request.order,
    )
    return map_section_to_response(section)


@router.post(
    "/{slug}/sections/{section_id}/lessons",
    response_model=LessonResponse,
    status_code=201,
)
@handle_service_errors
async def create_lesson(
    slug: str,
    section_id: UUID,
    request: CreateLessonRequest,
    identity: Identity | None = Depends(get_optional_identity),
    curriculum_service: CurriculumService = Depends(get_curriculum_service),
) -> LessonResponse:
    """
    Append a lesson to a section of the course.

    Raises:
        HTTPException(401/403): Not an admin
        HTTPException(404): Course not found, or section not in this course
    """
    lesson = await curriculum_service.add_lesson(
        identity,
        slug,
        section_id,
        title=request.title,
        slug=request.slug,
        order=request.order,
        video_url=request.video_url,
        duration_sec=request.duration_sec,
        free_preview=request.free_preview,
    )
    return map_lesson_to_response(lesson)
