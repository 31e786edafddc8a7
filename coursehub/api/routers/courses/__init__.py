"""
Courses router package.

Exports the router for catalog and course management endpoints.
"""

from .courses_router import router

__all__ = ["router"]
