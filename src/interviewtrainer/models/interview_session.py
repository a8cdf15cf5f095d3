"""InterviewSession aggregate root and its lifecycle state machine."""

import uuid
from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, Integer, String, Text, TypeDecorator, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from interviewtrainer.core.db import Base
from interviewtrainer.core.errors import InvalidTransitionError
from interviewtrainer.models.enums import SessionStatus
from interviewtrainer.utils.datetime import now_utc


class SessionStatusType(TypeDecorator):
    """Stores SessionStatus as its canonical name.

    Rows holding anything else raise UnknownStatusError on load instead of
    being coerced to a default.
    """

    impl = String(20)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return SessionStatus.parse(value).value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return SessionStatus.parse(value)


class InterviewSession(Base):
    """Interview practice session.

    State is held in private mapped attributes and exposed read-only. The
    only way to change it is through start(), complete() and cancel(), which
    all check the status transition table before writing anything.
    """

    __tablename__ = "interview_sessions"
    __table_args__ = (
        CheckConstraint(
            "status IN ('Started', 'InProgress', 'Completed', 'Cancelled')",
            name="ck_interview_sessions_status",
        ),
    )

    _id: Mapped[uuid.UUID] = mapped_column("id", Uuid(as_uuid=True), primary_key=True)

    # Requesting user
    _owner_id: Mapped[uuid.UUID] = mapped_column(
        "user_id",
        Uuid(as_uuid=True),
        nullable=False,
        index=True,
    )

    _status: Mapped[SessionStatus] = mapped_column(
        "status",
        SessionStatusType(),
        nullable=False,
        index=True,
    )

    _created_at: Mapped[datetime] = mapped_column("created_at", DateTime(), nullable=False)
    _finished_at: Mapped[datetime | None] = mapped_column("finished_at", DateTime(), nullable=True)

    # Outcome, written once on completion
    _score: Mapped[int | None] = mapped_column("score", Integer, nullable=True)
    _summary: Mapped[str | None] = mapped_column("summary", Text, nullable=True)
    _tips: Mapped[str | None] = mapped_column("tips", Text, nullable=True)

    def __init__(self, owner_id: uuid.UUID):
        self._id = uuid.uuid4()
        self._owner_id = owner_id
        self._status = SessionStatus.STARTED
        self._created_at = now_utc()
        self._finished_at = None
        self._score = None
        self._summary = None
        self._tips = None

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def owner_id(self) -> uuid.UUID:
        return self._owner_id

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def finished_at(self) -> datetime | None:
        return self._finished_at

    @property
    def score(self) -> int | None:
        return self._score

    @property
    def summary(self) -> str | None:
        return self._summary

    @property
    def tips(self) -> str | None:
        return self._tips

    def start(self) -> None:
        """Begin the interview (Started -> InProgress)."""
        self._transition_to(SessionStatus.IN_PROGRESS)

    def complete(self, score: int, summary: str, tips: str) -> None:
        """Finish the interview and record its outcome (InProgress -> Completed).

        The outcome fields are written only after the transition check passes,
        so a rejected call leaves the session untouched.
        """
        self._transition_to(SessionStatus.COMPLETED)
        self._score = score
        self._summary = summary
        self._tips = tips
        self._finished_at = now_utc()

    def cancel(self) -> None:
        """Abandon a session that has not finished yet."""
        self._transition_to(SessionStatus.CANCELLED)

    def _transition_to(self, next_status: SessionStatus) -> None:
        if not self._status.can_transition_to(next_status):
            raise InvalidTransitionError(self._status.value, next_status.value)
        self._status = next_status

    def __repr__(self) -> str:
        return (
            f"<InterviewSession(id={self._id}, owner_id={self._owner_id}, "
            f"status={self._status})>"
        )
