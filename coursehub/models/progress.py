"""
Progress schemas.

Dependencies: pydantic
System role: Playback progress API contracts
"""

import uuid
from datetime import datetime

from coursehub.models.common import CamelModel


class UpsertProgressRequest(CamelModel):
    """
    Heartbeat from the video player.

    Missing or negative position_sec is stored as 0, missing completed as false.
    """

    lesson_id: uuid.UUID | None = None
    position_sec: int | None = None
    completed: bool | None = None


class ProgressResponse(CamelModel):
    """
    Stored playback state, or the default when nothing was recorded.

    Identifiers are None for the default.
    """

    id: uuid.UUID | None = None
    user_id: uuid.UUID | None = None
    lesson_id: uuid.UUID | None = None
    position_sec: int = 0
    completed: bool = False
    updated_at: datetime | None = None
