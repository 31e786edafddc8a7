"""
Exception hierarchy for the CourseHub application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.
The API layer maps each family to one HTTP status; anything outside
this hierarchy is treated as an internal error.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class CourseHubException(Exception):
    """Base exception for all CourseHub application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class UnauthorizedError(CourseHubException):
    """Raised when an operation needs a caller identity and none was given."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message)


class ForbiddenError(CourseHubException):
    """Raised when the caller is authenticated but lacks the required role."""

    def __init__(self, message: str = "Admin role required", required_role: str | None = None) -> None:
        super().__init__(message, {"required_role": required_role} if required_role else None)


class ValidationError(CourseHubException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class NotFoundError(CourseHubException):
    """Base class for lookups that miss."""

    resource = "Resource"

    def __init__(self, identifier: Any, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["identifier"] = str(identifier)
        super().__init__(f"{self.resource} not found: {identifier}", details)


class CourseNotFoundError(NotFoundError):
    """Raised when a course slug or id does not resolve."""

    resource = "Course"


class SectionNotFoundError(NotFoundError):
    """Raised when a section does not exist within the given course."""

    resource = "Section"


class LessonNotFoundError(NotFoundError):
    """Raised when a lesson id does not resolve."""

    resource = "Lesson"


class ConflictError(CourseHubException):
    """Base class for writes rejected by a uniqueness rule."""


class AlreadyEnrolledError(ConflictError):
    """Raised when the caller already holds an enrollment for the course."""

    def __init__(self, user_id: Any, course_id: Any) -> None:
        super().__init__(
            "Already enrolled",
            {"user_id": str(user_id), "course_id": str(course_id)},
        )


class CourseSlugTakenError(ConflictError):
    """Raised when a new course reuses an existing slug."""

    def __init__(self, slug: str) -> None:
        super().__init__(f"Course slug already in use: {slug}", {"slug": slug})


class EmailAlreadyRegisteredError(ConflictError):
    """Raised on signup with an email that already has an account."""

    def __init__(self, email: str) -> None:
        super().__init__("Email already registered", {"email": email})
