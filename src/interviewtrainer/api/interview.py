"""Interview session endpoints (start, get, begin, complete, cancel)."""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from interviewtrainer.api.interview_service import InterviewService, get_interview_service
from interviewtrainer.core.errors import ErrorDetail
from interviewtrainer.models import (
    CompleteSessionRequest,
    InterviewSessionRead,
    StartSessionRequest,
)

router = APIRouter(prefix="/api/interview", tags=["interview"])

_not_found = {status.HTTP_404_NOT_FOUND: {"model": ErrorDetail}}
_transition_errors = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorDetail},
    **_not_found,
}


@router.post(
    "/start",
    response_model=InterviewSessionRead,
    status_code=status.HTTP_201_CREATED,
)
async def start_session(
    request: StartSessionRequest,
    response: Response,
    service: InterviewService = Depends(get_interview_service),
):
    """Create a new session for the user in Started status."""
    session = await service.start_session(request)
    response.headers["Location"] = str(
        router.url_path_for("get_session", session_id=str(session.id))
    )
    return session


@router.get("/{session_id}", response_model=InterviewSessionRead, responses=_not_found)
async def get_session(
    session_id: UUID,
    service: InterviewService = Depends(get_interview_service),
):
    return await service.get_session(session_id)


@router.patch(
    "/{session_id}/start",
    response_model=InterviewSessionRead,
    responses=_transition_errors,
)
async def start_interview(
    session_id: UUID,
    service: InterviewService = Depends(get_interview_service),
):
    """Begin the interview. Only allowed from Started."""
    return await service.start_interview(session_id)


@router.patch(
    "/{session_id}/complete",
    response_model=InterviewSessionRead,
    responses=_transition_errors,
)
async def complete_session(
    session_id: UUID,
    request: CompleteSessionRequest,
    service: InterviewService = Depends(get_interview_service),
):
    """Record score, summary and tips. Only allowed from InProgress."""
    return await service.complete_session(session_id, request)


@router.patch(
    "/{session_id}/cancel",
    response_model=InterviewSessionRead,
    responses=_transition_errors,
)
async def cancel_session(
    session_id: UUID,
    service: InterviewService = Depends(get_interview_service),
):
    """Cancel a session that is not finished yet."""
    return await service.cancel_session(session_id)
