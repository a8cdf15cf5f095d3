"""
Enums for domain models.
SessionStatus carries the lifecycle transition table alongside the values.
"""

import enum

from interviewtrainer.core.errors import UnknownStatusError


class SessionStatus(str, enum.Enum):
    """Interview session lifecycle states."""

    STARTED = "Started"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"

    @classmethod
    def parse(cls, value: str) -> "SessionStatus":
        """Build a status from its canonical name.

        Raises:
            UnknownStatusError: If value is not one of the four canonical names
        """
        try:
            return cls(value)
        except ValueError:
            raise UnknownStatusError(str(value)) from None

    def can_transition_to(self, next_status: "SessionStatus") -> bool:
        """Whether moving from this status to next_status is a legal edge."""
        return next_status in _TRANSITIONS[self]

    @property
    def is_terminal(self) -> bool:
        return not _TRANSITIONS[self]

    def __str__(self) -> str:
        return self.value


_TRANSITIONS: dict[SessionStatus, frozenset[SessionStatus]] = {
    SessionStatus.STARTED: frozenset({SessionStatus.IN_PROGRESS, SessionStatus.CANCELLED}),
    SessionStatus.IN_PROGRESS: frozenset({SessionStatus.COMPLETED, SessionStatus.CANCELLED}),
    SessionStatus.COMPLETED: frozenset(),
    SessionStatus.CANCELLED: frozenset(),
}
