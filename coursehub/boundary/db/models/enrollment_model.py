"""
Enrollment and Progress ORM models.

Both tables are keyed by a composite unique constraint that doubles as the
concurrency guard: two racing inserts for the same pair leave one row.

Dependencies: sqlalchemy, coursehub.boundary.db.base
System role: Learner access and playback state persistence
"""

from uuid import UUID

from sqlalchemy import Boolean, CheckConstraint, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from coursehub.boundary.db.base import Base, TimestampMixin, UUIDMixin


class EnrollmentModel(Base, UUIDMixin, TimestampMixin):
    """
    Grants a student access to a course.

    Constraints:
        (user_id, course_id): UNIQUE; at most one enrollment per pair
    """

    __tablename__ = "enrollments"
    __table_args__ = (
        UniqueConstraint("user_id", "course_id", name="uq_enrollments_user_course"),
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


class ProgressModel(Base, UUIDMixin, TimestampMixin):
    """
    Per-student, per-lesson playback state, overwritten in place.

    Constraints:
        (user_id, lesson_id): UNIQUE; one record per pair
    """

    __tablename__ = "progress"
    __table_args__ = (
        UniqueConstraint("user_id", "lesson_id", name="uq_progress_user_lesson"),
        CheckConstraint("position_sec >= 0", name="ck_progress_position_non_negative"),
    )

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    lesson_id: Mapped[UUID] = mapped_column(
        ForeignKey("lessons.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position_sec: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
