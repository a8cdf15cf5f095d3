"""Interview session use cases: load, apply one aggregate operation, save."""

from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from interviewtrainer.core.db import get_db
from interviewtrainer.core.errors import NotFoundError
from interviewtrainer.core.logging import get_logger
from interviewtrainer.core.store import SessionStore
from interviewtrainer.models import (
    CompleteSessionRequest,
    InterviewSession,
    InterviewSessionRead,
    StartSessionRequest,
)

logger = get_logger(__name__)


class InterviewService:
    """Maps requests onto the InterviewSession aggregate.

    Domain errors raised by the aggregate are not caught here; the global
    AppError handler turns them into responses.
    """

    def __init__(self, store: SessionStore):
        self.store = store

    async def start_session(self, request: StartSessionRequest) -> InterviewSessionRead:
        session = InterviewSession(request.user_id)
        await self.store.add(session)

        logger.info(
            "interview_session.created",
            session_id=str(session.id),
            user_id=str(session.owner_id),
        )
        return InterviewSessionRead.from_session(session)

    async def get_session(self, session_id: UUID) -> InterviewSessionRead:
        session = await self._load(session_id)
        return InterviewSessionRead.from_session(session)

    async def start_interview(self, session_id: UUID) -> InterviewSessionRead:
        session = await self._load(session_id)
        session.start()
        await self.store.save(session)

        logger.info("interview_session.started", session_id=str(session_id))
        return InterviewSessionRead.from_session(session)

    async def complete_session(
        self, session_id: UUID, request: CompleteSessionRequest
    ) -> InterviewSessionRead:
        session = await self._load(session_id)
        session.complete(request.score, request.summary, request.tips)
        await self.store.save(session)

        logger.info(
            "interview_session.completed",
            session_id=str(session_id),
            score=request.score,
        )
        return InterviewSessionRead.from_session(session)

    async def cancel_session(self, session_id: UUID) -> InterviewSessionRead:
        session = await self._load(session_id)
        session.cancel()
        await self.store.save(session)

        logger.info("interview_session.cancelled", session_id=str(session_id))
        return InterviewSessionRead.from_session(session)

    async def _load(self, session_id: UUID) -> InterviewSession:
        session = await self.store.load(session_id)
        if session is None:
            raise NotFoundError("session", str(session_id))
        return session


def get_session_store(db: AsyncSession = Depends(get_db)) -> SessionStore:
    """FastAPI dependency for the session store."""
    return SessionStore(db)


def get_interview_service(store: SessionStore = Depends(get_session_store)) -> InterviewService:
    """FastAPI dependency for the interview use cases."""
    return InterviewService(store)
