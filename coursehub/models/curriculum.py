"""
Curriculum schemas.

Request/response schemas for sections and lessons.

Dependencies: pydantic
System role: Curriculum API contracts
"""

import uuid
from datetime import datetime

from pydantic import Field

from coursehub.models.common import CamelModel


class CreateSectionRequest(CamelModel):
    """Request schema for appending a section to a course."""

    title: str = Field(..., min_length=1, max_length=255, description="Section title")
    order: int = Field(0, ge=0, description="Sort key within the course")


class CreateLessonRequest(CamelModel):
    """Request schema for appending a lesson to a section."""

    title: str = Field(..., min_length=1, max_length=255, description="Lesson title")
    slug: str = Field(..., min_length=1, max_length=255, description="URL key within the course")
    order: int = Field(0, ge=0, description="Sort key within the section")
    video_url: str | None = Field(None, max_length=2048, description="Playback source")
    duration_sec: int | None = Field(None, ge=0, description="Length in seconds")
    free_preview: bool = Field(False, description="Watchable without enrollment")


class LessonResponse(CamelModel):
    """Response schema for a lesson."""

    id: uuid.UUID
    section_id: uuid.UUID
    title: str
    slug: str
    order: int
    video_url: str | None = None
    duration_sec: int | None = None
    free_preview: bool = False
    created_at: datetime | None = None


class SectionResponse(CamelModel):
    """Response schema for a section, with lessons in display order."""

    id: uuid.UUID
    course_id: uuid.UUID
    title: str
    order: int
    created_at: datetime | None = None
    lessons: list[LessonResponse] = Field(default_factory=list)
