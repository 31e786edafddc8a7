"""
Course, Section and Lesson ORM models.

A course owns an ordered list of sections; each section owns an ordered
list of lessons. Display order is the integer `order` column, not the
insertion order.

Relationships are declared with lazy="raise": every read path composes
its own queries in the CRUD layer instead of walking an object graph.

Dependencies: sqlalchemy, coursehub.boundary.db.base
System role: Catalog and curriculum persistence
"""

import enum
from uuid import UUID

from sqlalchemy import Boolean, CheckConstraint, Enum, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from coursehub.boundary.db.base import Base, TimestampMixin, UUIDMixin


class CourseStatus(str, enum.Enum):
    """
    Publication state.

    DRAFT: Visible to admins only
    PUBLISHED: Listed in the public catalog
    """

    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"


class CourseModel(Base, UUIDMixin, TimestampMixin):
    """
    Course ORM model.

    Attributes:
        slug: URL key (unique)
        title, subtitle, description: Marketing copy
        price_cents: Non-negative price in cents (0 = free)
        status: DRAFT or PUBLISHED
        category, level, language: Catalog facets
        thumbnail_url: Cover image
        created_by_id: Owning admin
    """

    __tablename__ = "courses"
    __table_args__ = (
        CheckConstraint("price_cents >= 0", name="ck_courses_price_non_negative"),
    )

    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    subtitle: Mapped[str | None] = mapped_column(String(512), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price_cents: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    status: Mapped[CourseStatus] = mapped_column(
        Enum(CourseStatus, native_enum=False, length=16),
        nullable=False,
        default=CourseStatus.DRAFT,
        index=True,
    )
    category: Mapped[str | None] = mapped_column(String(128), nullable=True, index=True)
    level: Mapped[str | None] = mapped_column(String(64), nullable=True)
    language: Mapped[str | None] = mapped_column(String(64), nullable=True)
    thumbnail_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    created_by_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )

    sections = relationship(
        "SectionModel",
        back_populates="course",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="raise",
    )


class SectionModel(Base, UUIDMixin, TimestampMixin):
    """Curriculum chapter; `order` sorts sections within a course."""

    __tablename__ = "sections"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    course_id: Mapped[UUID] = mapped_column(
        ForeignKey("courses.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    course = relationship("CourseModel", back_populates="sections", lazy="raise")
    lessons = relationship(
        "LessonModel",
        back_populates="section",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="raise",
    )


class LessonModel(Base, UUIDMixin, TimestampMixin):
    """
    Single video lesson.

    Attributes:
        slug: URL key within the course
        order: Sort key within the section
        video_url: Playback source
        duration_sec: Length in seconds, None when unknown
        free_preview: Watchable without enrollment
    """

    __tablename__ = "lessons"
    __table_args__ = (
        CheckConstraint(
            "duration_sec IS NULL OR duration_sec >= 0",
            name="ck_lessons_duration_non_negative",
        ),
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    video_url: Mapped[str | None] = mapped_column(String(2048), nullable=True)
    duration_sec: Mapped[int | None] = mapped_column(Integer, nullable=True)
    free_preview: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    section_id: Mapped[UUID] = mapped_column(
        ForeignKey("sections.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    section = relationship("SectionModel", back_populates="lessons", lazy="raise")
