"""
Dependency injection container.

Factory functions for FastAPI dependencies: settings, caller identity and
one service instance per request bound to the request's database session.

Dependencies: coursehub.configs, coursehub.application, coursehub.boundary, coursehub.core
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.application.services import (
    AdminStatsService,
    CatalogService,
    CourseService,
    CurriculumService,
    EnrollmentService,
    ProgressService,
    ReviewService,
    UserService,
)
from coursehub.boundary.db import get_async_db
from coursehub.configs import Settings, get_settings
from coursehub.core.identity import Identity, parse_identity


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_optional_identity(
    request: Request,
    settings: Settings = Depends(get_settings_dependency),
) -> Identity | None:
    """
    Caller identity forwarded by the auth gateway.

    Reads the user id and role headers named in AuthSettings. Absent or
    malformed headers yield None; services decide whether that is allowed.

    Args:
        request: Incoming request
        settings: Application settings (injected)

    Returns:
        Identity | None: Parsed caller
    """
    return parse_identity(
        request.headers.get(settings.auth.user_id_header),
        request.headers.get(settings.auth.role_header),
    )


def get_catalog_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> CatalogService:
    """
    Get catalog service instance.

    Args:
        db: Async database session (injected via Depends)
        settings: Application settings (injected)

    Returns:
        CatalogService: Catalog service instance
    """
    return CatalogService(db=db, settings=settings.catalog)


def get_course_service(db: AsyncSession = Depends(get_async_db)) -> CourseService:
    """
    Get course service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        CourseService: Course service instance
    """
    return CourseService(db=db)


def get_curriculum_service(db: AsyncSession = Depends(get_async_db)) -> CurriculumService:
    """Get curriculum service instance."""
    return CurriculumService(db=db)


def get_enrollment_service(db: AsyncSession = Depends(get_async_db)) -> EnrollmentService:
    """Get enrollment service instance."""
    return EnrollmentService(db=db)


def get_progress_service(db: AsyncSession = Depends(get_async_db)) -> ProgressService:
    """Get progress service instance."""
    return ProgressService(db=db)


def get_review_service(db: AsyncSession = Depends(get_async_db)) -> ReviewService:
    """Get review service instance."""
    return ReviewService(db=db)


def get_admin_stats_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> AdminStatsService:
    """
    Get admin stats service instance.

    Args:
        db: Async database session (injected via Depends)
        settings: Application settings (injected)

    Returns:
        AdminStatsService: Admin stats service instance
    """
    return AdminStatsService(db=db, settings=settings.catalog)


def get_user_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> UserService:
    """Get user service instance with the configured bcrypt cost."""
    return UserService(db=db, bcrypt_rounds=settings.auth.bcrypt_rounds)
