"""Pydantic schemas for InterviewSession API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from interviewtrainer.models.enums import SessionStatus
from interviewtrainer.models.interview_session import InterviewSession

# camelCase on the wire, snake_case accepted on input
_wire_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

# Range of the 32-bit INTEGER score column
SCORE_MIN = -(2**31)
SCORE_MAX = 2**31 - 1


class StartSessionRequest(BaseModel):
    """Schema for starting a new interview session."""

    model_config = _wire_config

    user_id: UUID = Field(..., description="User requesting the practice session")


class CompleteSessionRequest(BaseModel):
    """Schema for completing an interview with its outcome."""

    model_config = _wire_config

    score: int = Field(..., ge=SCORE_MIN, le=SCORE_MAX)
    summary: str = Field("", max_length=5000)
    tips: str = Field("", max_length=5000)


class InterviewSessionRead(BaseModel):
    """Schema for reading an interview session."""

    model_config = _wire_config

    id: UUID
    user_id: UUID
    status: SessionStatus
    created_at: datetime
    finished_at: datetime | None = None
    score: int | None = None
    summary: str | None = None
    tips: str | None = None

    @classmethod
    def from_session(cls, session: InterviewSession) -> "InterviewSessionRead":
        return cls(
            id=session.id,
            user_id=session.owner_id,
            status=session.status,
            created_at=session.created_at,
            finished_at=session.finished_at,
            score=session.score,
            summary=session.summary,
            tips=session.tips,
        )
