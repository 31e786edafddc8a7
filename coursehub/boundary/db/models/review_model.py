"""
Review, Tag and CourseTag ORM models.

Dependencies: sqlalchemy, coursehub.boundary.db.base
System role: Course feedback and labelling persistence
"""

import enum
from uuid import UUID

from sqlalchemy import CheckConstraint, Enum, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from coursehub.boundary.db.base import Base, TimestampMixin, UUIDMixin


class ReviewStatus(str, enum.Enum):
    """
    Moderation state. Only VISIBLE reviews count towards course stats.
    """

    VISIBLE = "VISIBLE"
    HIDDEN = "HIDDEN"


class ReviewModel(Base, UUIDMixin, TimestampMixin):
    """
    One student's rating of one course.

    Constraints:
        (user_id, course_id): UNIQUE; resubmission overwrites
        rating: 1..5
    """

    __tablename__ = "reviews"
    __table_args__ = (
        UniqueConstraint("user_id", "course_id", name="uq_reviews_user_course"),
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_reviews_rating_range"),
    )

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    course_id: Mapped[UUID] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    comment: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[ReviewStatus] = mapped_column(
        Enum(ReviewStatus, native_enum=False, length=16),
        nullable=False,
        default=ReviewStatus.VISIBLE,
    )


class TagModel(Base, UUIDMixin, TimestampMixin):
    """Named label shared across courses."""

    __tablename__ = "tags"

    name: Mapped[str] = mapped_column(String(128), nullable=False, unique=True)


class CourseTagModel(Base, UUIDMixin, TimestampMixin):
    """Many-to-many join between courses and tags."""

    __tablename__ = "course_tags"
    __table_args__ = (
        UniqueConstraint("course_id", "tag_id", name="uq_course_tags_course_tag"),
    )

    course_id: Mapped[UUID] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    tag_id: Mapped[UUID] = mapped_column(
        ForeignKey("tags.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
