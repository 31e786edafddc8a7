"""Pydantic models for API request/response schemas."""

from coursehub.models.admin import AdminStatsResponse
from coursehub.models.common import CamelModel, ErrorResponse, PaginationMeta
from coursehub.models.course import (
    AdminCourseSummary,
    CatalogResponse,
    CourseDetailResponse,
    CourseResponse,
    CourseSummary,
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
from coursehub.models.enrollment import EnrollRequest, EnrollResponse, MyCoursesResponse
from coursehub.models.progress import ProgressResponse, UpsertProgressRequest
from coursehub.models.review import ReviewResponse, UpsertReviewRequest
from coursehub.models.user import SignupRequest, SignupResponse, UserListResponse

__all__ = [
    "AdminCourseSummary",
    "AdminStatsResponse",
    "CamelModel",
    "CatalogResponse",
    "CourseDetailResponse",
    "CourseResponse",
    "CourseSummary",
    "CreateCourseRequest",
    "CreateLessonRequest",
    "CreateSectionRequest",
    "EnrollRequest",
    "EnrollResponse",
    "ErrorResponse",
    "FeaturedCoursesResponse",
    "LessonResponse",
    "MyCoursesResponse",
    "PaginationMeta",
    "ProgressResponse",
    "ReviewResponse",
    "SectionResponse",
    "SignupRequest",
    "SignupResponse",
    "UpdateCourseRequest",
    "UpsertProgressRequest",
    "UpsertReviewRequest",
    "UserListResponse",
]
