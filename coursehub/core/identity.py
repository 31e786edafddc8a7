"""
Caller identity.

Identity is resolved outside this service (an auth gateway) and handed to
every operation explicitly. Nothing here reads global or request state.

Dependencies: coursehub.boundary.db.models.user_model, coursehub.core.exceptions
System role: Explicit identity and role checks for service operations
"""

from dataclasses import dataclass
from uuid import UUID

from coursehub.boundary.db.models.user_model import UserRole
from coursehub.core.exceptions import ForbiddenError, UnauthorizedError


@dataclass(frozen=True)
class Identity:
    """Authenticated caller as forwarded by the gateway."""

    user_id: UUID
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN


def parse_identity(user_id: str | None, role: str | None) -> Identity | None:
    """
    Build an Identity from raw header values.

    Missing or malformed values yield None (anonymous caller) rather than
    an error, so public endpoints keep working behind a misbehaving proxy.

    Args:
        user_id: UUID string
        role: Role name, case-insensitive

    Returns:
        Identity | None: Parsed identity, None when absent or invalid
    """
    if not user_id:
        return None
    try:
        parsed_id = UUID(user_id.strip())
    except ValueError:
        return None
    try:
        parsed_role = UserRole((role or UserRole.STUDENT.value).strip().upper())
    except ValueError:
        return None
    return Identity(user_id=parsed_id, role=parsed_role)


def require_identity(identity: Identity | None) -> Identity:
    """Return the identity or raise UnauthorizedError for anonymous callers."""
    if identity is None:
        raise UnauthorizedError()
    return identity


def require_admin(identity: Identity | None) -> Identity:
    """Return the identity if it holds the ADMIN role."""
    identity = require_identity(identity)
    if not identity.is_admin:
        raise ForbiddenError(required_role=UserRole.ADMIN.value)
    return identity
