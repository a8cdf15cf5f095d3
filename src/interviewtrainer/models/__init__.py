"""Domain models package."""

from interviewtrainer.models.enums import SessionStatus
from interviewtrainer.models.interview_session import InterviewSession
from interviewtrainer.models.interview_session_schemas import (
    CompleteSessionRequest,
    InterviewSessionRead,
    StartSessionRequest,
)

__all__ = [
    "CompleteSessionRequest",
    "InterviewSession",
    "InterviewSessionRead",
    "SessionStatus",
    "StartSessionRequest",
]
