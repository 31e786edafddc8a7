"""
Service error handling utilities.

Provides a decorator that turns the domain exception hierarchy into
HTTPExceptions with one status per exception family, so every endpoint
reports failures the same way.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status
from pydantic import ValidationError as PydanticValidationError

from coursehub.core.exceptions import (
    ConflictError,
    CourseHubException,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])

INTERNAL_ERROR_DETAIL = "Internal server error"

# Checked in order; the first matching family wins.
STATUS_BY_EXCEPTION: tuple[tuple[type[CourseHubException], int], ...] = (
    (UnauthorizedError, status.HTTP_401_UNAUTHORIZED),
    (ForbiddenError, status.HTTP_403_FORBIDDEN),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
)


def status_for(error: CourseHubException) -> int:
    for exc_type, status_code in STATUS_BY_EXCEPTION:
        if isinstance(error, exc_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def handle_service_errors(func: F) -> F:
    """
    Decorator to handle service errors and transform them into HTTPExceptions.

    This centralizes:
    - Logging of errors with context (exception details)
    - Mapping each domain exception family to an HTTP status code
    - Hiding unexpected failures behind a generic 500 message
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except CourseHubException as e:
            status_code = status_for(e)
            if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
                logger.exception("Unhandled domain error", extra={"error": str(e)})
                raise HTTPException(status_code=status_code, detail=INTERNAL_ERROR_DETAIL)
            logger.warning(
                "Request rejected",
                extra={"status_code": status_code, "error": str(e), "details": e.details},
            )
            raise HTTPException(status_code=status_code, detail=e.message)

        except PydanticValidationError as e:
            logger.warning("Pydantic validation error", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=e.errors(include_url=False),
            )

        except Exception as e:
            logger.exception(
                "Unexpected failure in request handler",
                extra={"error": str(e), "error_type": type(e).__name__},
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=INTERNAL_ERROR_DETAIL,
            )

    return wrapper  # type: ignore
