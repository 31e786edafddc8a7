"""
Progress service orchestrator.

Playback heartbeats from the video player. Every write is a single upsert
keyed by (user, lesson), so retries and duplicated calls are harmless and
the last write wins.

Dependencies: coursehub.boundary.db.CRUD, coursehub.core
System role: Progress tracking use case orchestration
"""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from coursehub.boundary.db.CRUD import progress_crud
from coursehub.boundary.db.models import ProgressModel
from coursehub.core.exceptions import LessonNotFoundError, ValidationError
from coursehub.core.identity import Identity, require_identity

logger = logging.getLogger(__name__)


def _progress_dict(progress: ProgressModel) -> dict:
    return {
        "id": progress.id,
        "user_id": progress.user_id,
        "lesson_id": progress.lesson_id,
        "position_sec": progress.position_sec,
        "completed": progress.completed,
        "updated_at": progress.updated_at,
    }


class ProgressService:
    """Progress service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_progress(self, identity: Identity | None, lesson_id: UUID | None) -> dict:
        """
        Stored playback state for the caller and lesson.

        Returns:
            dict: The record, or {completed: False, position_sec: 0} when none exists
        """
        user = require_identity(identity)
        if lesson_id is None:
            raise ValidationError("Lesson ID is required", field="lesson_id")

        progress = await progress_crud.get_by_pair(self.db, user.user_id, lesson_id)
        if progress is None:
            return {"completed": False, "position_sec": 0}
        return _progress_dict(progress)

    async def upsert_progress(
        self,
        identity: Identity | None,
        lesson_id: UUID | None,
        position_sec: int | None = None,
        completed: bool | None = None,
    ) -> dict:
        """
        Record playback position and completion.

        Missing or negative positions are stored as 0, a missing completed
        flag as False. Position is not checked against lesson duration.

        Raises:
            ValidationError: lesson_id missing
            LessonNotFoundError: lesson_id does not reference a lesson
        """
        user = require_identity(identity)
        if lesson_id is None:
            raise ValidationError("Lesson ID is required", field="lesson_id")

        position = position_sec if position_sec and position_sec > 0 else 0
        try:
            progress = await progress_crud.upsert_position(
                self.db,
                user_id=user.user_id,
                lesson_id=lesson_id,
                position_sec=position,
                completed=bool(completed),
            )
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(
                "Progress rejected by store",
                extra={"lesson_id": str(lesson_id), "error": str(e.orig)},
            )
            raise LessonNotFoundError(lesson_id)

        logger.debug(
            "Progress recorded",
            extra={"lesson_id": str(lesson_id), "position_sec": position, "completed": bool(completed)},
        )
        return _progress_dict(progress)
