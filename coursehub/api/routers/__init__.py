"""API routers."""

from .admin import router as admin_router
from .auth import router as auth_router
from .courses import router as courses_router
from .enroll import router as enroll_router
from .health import router as health_router
from .my_courses import router as my_courses_router
from .progress import router as progress_router
from .reviews import router as reviews_router

__all__ = [
    "admin_router",
    "auth_router",
    "courses_router",
    "enroll_router",
    "health_router",
    "my_courses_router",
    "progress_router",
    "reviews_router",
]
