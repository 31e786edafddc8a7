"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""

from fastapi import APIRouter

from .routers import (
    admin_router,
    auth_router,
    courses_router,
    enroll_router,
    health_router,
    my_courses_router,
    progress_router,
    reviews_router,
)

api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(courses_router)
api_router.include_router(enroll_router)
api_router.include_router(my_courses_router)
api_router.include_router(progress_router)
api_router.include_router(reviews_router)
api_router.include_router(admin_router)
api_router.include_router(auth_router)

__all__ = ["api_router"]
