"""
User schemas.

Request/response schemas for signup and the admin user list.

Dependencies: pydantic
System role: Account API contracts
"""

import uuid
from datetime import datetime

from pydantic import EmailStr, Field

from coursehub.boundary.db.models.user_model import UserRole
from coursehub.models.common import CamelModel


class SignupRequest(CamelModel):
    """Request schema for self-service student signup."""

    name: str = Field(..., min_length=2, max_length=255, description="Display name")
    email: EmailStr = Field(..., description="Login email")
    password: str = Field(..., min_length=8, max_length=128, description="Plain-text password")


class UserResponse(CamelModel):
    """Public account fields; the password hash is never exposed."""

    id: uuid.UUID
    name: str | None = None
    email: str
    role: UserRole
    image: str | None = None
    created_at: datetime


class SignupResponse(CamelModel):
    success: bool = True
    user: UserResponse
    message: str = "Account created successfully"


class AdminUserSummary(UserResponse):
    """Row of the admin user table."""

    enrolled_courses: list[str]
    created_course_count: int


class UserListResponse(CamelModel):
    users: list[AdminUserSummary]
