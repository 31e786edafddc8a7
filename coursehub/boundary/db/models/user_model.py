"""
User ORM model.

Represents a platform account, either an ADMIN (course author and
operator) or a STUDENT (learner). Role is fixed at creation.

Dependencies: sqlalchemy, coursehub.boundary.db.base
System role: Account persistence
"""

import enum

from sqlalchemy import Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from coursehub.boundary.db.base import Base, TimestampMixin, UUIDMixin


class UserRole(str, enum.Enum):
    """
    Account roles.

    ADMIN: Creates and manages courses, sees platform statistics
    STUDENT: Enrolls in courses, tracks progress, leaves reviews
    """

    ADMIN = "ADMIN"
    STUDENT = "STUDENT"


class UserModel(Base, UUIDMixin, TimestampMixin):
    """
    User ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        name: Display name
        email: Login email (unique)
        password_hash: bcrypt hash, None for accounts provisioned externally
        role: ADMIN or STUDENT
        image: Avatar URL
    """

    __tablename__ = "users"

    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True, index=True)
    password_hash: Mapped[str | None] = mapped_column(String(255), nullable=True)
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, native_enum=False, length=16),
        nullable=False,
        default=UserRole.STUDENT,
    )
    image: Mapped[str | None] = mapped_column(String(2048), nullable=True)
