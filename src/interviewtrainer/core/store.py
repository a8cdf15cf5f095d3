"""Persistence for InterviewSession aggregates."""

from typing import NoReturn
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from interviewtrainer.core.errors import StoreError
from interviewtrainer.core.logging import get_logger
from interviewtrainer.models.interview_session import InterviewSession

logger = get_logger(__name__)


class SessionStore:
    """Loads and saves interview sessions through an async SQLAlchemy session.

    Writes are last-write-wins: there is no version check on save, so two
    requests mutating the same session concurrently can overwrite each other.
    Database failures are rolled back and surfaced as StoreError without
    driver details.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def load(self, session_id: UUID) -> InterviewSession | None:
        try:
            return await self.db.get(InterviewSession, session_id)
        except SQLAlchemyError as exc:
            await self._fail("load", session_id, exc)

    async def add(self, session: InterviewSession) -> None:
        self.db.add(session)
        await self._commit("add", session.id)

    async def save(self, session: InterviewSession) -> None:
        self.db.add(session)
        await self._commit("save", session.id)

    async def delete(self, session_id: UUID) -> bool:
        """Remove a session. Returns False if it did not exist."""
        session = await self.load(session_id)
        if session is None:
            return False
        await self.db.delete(session)
        await self._commit("delete", session_id)
        return True

    async def _commit(self, operation: str, session_id: UUID) -> None:
        try:
            await self.db.commit()
        except SQLAlchemyError as exc:
            await self._fail(operation, session_id, exc)

    async def _fail(self, operation: str, session_id: UUID, exc: SQLAlchemyError) -> NoReturn:
        await self.db.rollback()
        logger.error(
            "session_store.failure",
            operation=operation,
            session_id=str(session_id),
            error=type(exc).__name__,
        )
        raise StoreError() from exc
