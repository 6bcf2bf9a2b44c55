"""
Mindfulness session API endpoints.

Routes:
- POST /api/sessions - Schedule a session (form fields)
- GET /api/sessions?userId= - List a user's sessions, most recent first
- GET /api/sessions/{id} - Get single session
- PATCH /api/sessions/{id}/reflection - Update reflection notes and duration
- DELETE /api/sessions/{id} - Delete session

Dependencies: mindfulness.application.services, mindfulness.models
System role: Session management HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Form, Query, status
from fastapi.responses import JSONResponse

from mindfulness.api.deps.dependencies import get_session_service
from mindfulness.application.services.session_service import MindfulnessSessionService
from mindfulness.models import MindfulnessSession
from mindfulness.models.responses import (
    DeleteResultResponse,
    ErrorResponse,
    ScheduleResponse,
    UpdateResultResponse,
)

from .router_utils import error_response, handle_api_errors, parse_datetime, parse_int
from .router_utils.responses import map_session_to_response, map_sessions_to_summary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/sessions", tags=["sessions"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ScheduleResponse,
    responses=ERROR_RESPONSES,
)
@handle_api_errors
def schedule_session(
    user_id: str | None = Form(None, alias="userId"),
    title: str | None = Form(None),
    description: str | None = Form(None),
    category: str | None = Form(None),
    difficulty: str | None = Form(None),
    scheduled_at: str | None = Form(None, alias="scheduledAt"),
    duration_minutes: str | None = Form(None, alias="durationMinutes"),
    reflection_notes: str | None = Form(None, alias="reflectionNotes"),
    session_service: MindfulnessSessionService = Depends(get_session_service),
) -> JSONResponse:
    """
    Schedule a session from form fields.

    scheduledAt is an ISO-8601 local date-time. Malformed numbers or
    dates are reported as 400 like any other validation failure.

    Returns:
        201 {"message": "Session scheduled", "sessionId": id}
    """
    session = MindfulnessSession(
        user_id=parse_int(user_id, "userId"),
        title=title,
        description=description,
        category=category,
        difficulty=difficulty,
        scheduled_at=parse_datetime(scheduled_at, "scheduledAt"),
        duration_minutes=parse_int(duration_minutes, "durationMinutes"),
        reflection_notes=reflection_notes,
    )
    session_id = session_service.schedule_session(session)
    body = ScheduleResponse(session_id=session_id)
    return JSONResponse(status_code=status.HTTP_201_CREATED, content=body.model_dump(by_alias=True))


@router.get("", responses=ERROR_RESPONSES)
@handle_api_errors
def list_sessions(
    user_id: str | None = Query(None, alias="userId"),
    session_service: MindfulnessSessionService = Depends(get_session_service),
) -> JSONResponse:
    """
    List sessions of one user.

    Returns:
        JSON array of {id, title, category, durationMinutes}
    """
    sessions = session_service.sessions_for_user(parse_int(user_id, "userId"))
    return JSONResponse(content=map_sessions_to_summary(sessions))


@router.get("/{session_id}", responses={404: {"model": ErrorResponse}})
@handle_api_errors
def get_session(
    session_id: int,
    session_service: MindfulnessSessionService = Depends(get_session_service),
) -> JSONResponse:
    session = session_service.find_by_id(session_id)
    if session is None:
        return error_response(status.HTTP_404_NOT_FOUND, f"Session {session_id} not found")
    return JSONResponse(content=map_session_to_response(session))


@router.patch(
    "/{session_id}/reflection",
    response_model=UpdateResultResponse,
    responses=ERROR_RESPONSES,
)
@handle_api_errors
def update_reflection(
    session_id: int,
    reflection_notes: str | None = Form(None, alias="reflectionNotes"),
    duration_minutes: str | None = Form(None, alias="durationMinutes"),
    session_service: MindfulnessSessionService = Depends(get_session_service),
) -> JSONResponse:
    """
    Record reflection notes and the actual duration after a session.

    Returns:
        200 {"updated": bool}; false when no row matched the id
    """
    updated = session_service.update_reflection(
        session_id,
        reflection_notes,
        parse_int(duration_minutes, "durationMinutes"),
    )
    return JSONResponse(content=UpdateResultResponse(updated=updated).model_dump())


@router.delete("/{session_id}", response_model=DeleteResultResponse)
@handle_api_errors
def delete_session(
    session_id: int,
    session_service: MindfulnessSessionService = Depends(get_session_service),
) -> JSONResponse:
    deleted = session_service.delete(session_id)
    return JSONResponse(content=DeleteResultResponse(deleted=deleted).model_dump())
