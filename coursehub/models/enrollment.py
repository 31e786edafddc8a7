"""
Enrollment and learner dashboard schemas.

Dependencies: pydantic
System role: Enrollment API contracts
"""

import uuid
from datetime import datetime

from pydantic import Field

from coursehub.models.common import CamelModel
from coursehub.models.progress import ProgressResponse


class EnrollRequest(CamelModel):
    """Request schema for enrolling; course_id presence is checked by the service."""

    course_id: uuid.UUID | None = None


class EnrollmentRecord(CamelModel):
    id: uuid.UUID
    user_id: uuid.UUID
    course_id: uuid.UUID
    created_at: datetime


class EntryPoint(CamelModel):
    """First lesson a new learner is sent to."""

    course_slug: str
    lesson_slug: str


class EnrollResponse(CamelModel):
    """Response schema for a new enrollment."""

    success: bool = True
    enrollment: EnrollmentRecord
    first_lesson: EntryPoint | None = None


class NextLesson(CamelModel):
    id: uuid.UUID
    slug: str
    title: str


class CourseProgressSummary(CamelModel):
    """Completion figures for one enrolled course."""

    completed: int
    total: int
    percentage: int
    next_lesson: NextLesson | None = None


class LearnerLesson(CamelModel):
    id: uuid.UUID
    section_id: uuid.UUID
    title: str
    slug: str
    order: int
    video_url: str | None = None
    duration_sec: int | None = None
    free_preview: bool = False
    progress: ProgressResponse | None = None


class LearnerSection(CamelModel):
    id: uuid.UUID
    title: str
    order: int
    lessons: list[LearnerLesson] = Field(default_factory=list)


class LearnerCourse(CamelModel):
    """Enrolled course with curriculum annotated by the caller's progress."""

    id: uuid.UUID
    slug: str
    title: str
    subtitle: str | None = None
    thumbnail_url: str | None = None
    category: str | None = None
    level: str | None = None
    enrolled_at: datetime | None = None
    sections: list[LearnerSection] = Field(default_factory=list)
    progress: CourseProgressSummary


class MyCoursesResponse(CamelModel):
    courses: list[LearnerCourse]
