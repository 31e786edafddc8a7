"""
Progress API endpoints.

Routes:
- GET /progress?lessonId= - Stored playback state (or the default)
- POST /progress - Upsert playback state

Dependencies: coursehub.application.services, coursehub.models
System role: Playback progress HTTP API
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from coursehub.api.deps import get_optional_identity, get_progress_service
from coursehub.api.routers.router_utils import handle_service_errors
from coursehub.application.services import ProgressService
from coursehub.core.identity import Identity
from coursehub.models.progress import ProgressResponse, UpsertProgressRequest

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get("", response_model=ProgressResponse)
@handle_service_errors
async def get_progress(
    lesson_id: UUID | None = Query(None, alias="lessonId"),
    identity: Identity | None = Depends(get_optional_identity),
    progress_service: ProgressService = Depends(get_progress_service),
) -> ProgressResponse:
    """
    Playback state for the caller and lesson.

    Raises:
        HTTPException(400): lessonId missing
        HTTPException(401): No caller identity
    """
    progress = await progress_service.get_progress(identity, lesson_id)
    return ProgressResponse(**progress)


@router.post("", response_model=ProgressResponse)
@handle_service_errors
async def upsert_progress(
    request: UpsertProgressRequest,
    identity: Identity | None = Depends(get_optional_identity),
    progress_service: ProgressService = Depends(get_progress_service),
) -> ProgressResponse:
    """
    Record playback position and completion; last write wins.

    Raises:
        HTTPException(400): lessonId missing
        HTTPException(401): No caller identity
        HTTPException(404): Lesson not found
    """
    progress = await progress_service.upsert_progress(
        identity,
        request.lesson_id,
        position_sec=request.position_sec,
        completed=request.completed,
    )
    return ProgressResponse(**progress)
