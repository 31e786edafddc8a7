"""
Router utility functions.

Contains helpers shared by router endpoints to keep them clean.
"""

from coursehub.api.routers.router_utils.error_handling import (
    INTERNAL_ERROR_DETAIL,
    handle_service_errors,
)

__all__ = [
    "INTERNAL_ERROR_DETAIL",
    "handle_service_errors",
]
