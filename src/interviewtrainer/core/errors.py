"""Custom exceptions and error response schemas."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Standardized error response."""

    error: str = Field(..., description="Human-readable error message")
    code: str = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional context")


class AppError(Exception):
    """Base exception for all app-level errors."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None,
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_response(self) -> ErrorDetail:
        """Convert to API response schema."""
        return ErrorDetail(
            error=self.message,
            code=self.code,
            details=self.details if self.details else None,
        )


class ValidationError(AppError):
    """Raised when request validation fails."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(
            code="VALIDATION_ERROR",
            message=message,
            status_code=422,
            details=details,
        )


class NotFoundError(AppError):
    """Raised when resource doesn't exist."""

    def __init__(self, resource: str, resource_id: str):
        super().__init__(
            code="NOT_FOUND",
            message=f"{resource} {resource_id} not found",
            status_code=404,
            details={"resource": resource, "resource_id": resource_id},
        )


class DomainError(AppError):
    """Business rule violation. Recoverable by the caller, never retried."""

    def __init__(self, code: str, message: str, details: Optional[dict] = None):
        super().__init__(
            code=code,
            message=message,
            status_code=400,
            details=details,
        )


class UnknownStatusError(DomainError):
    """Raised when a status value is not one of the canonical names."""

    def __init__(self, value: str):
        super().__init__(
            code="UNKNOWN_STATUS",
            message=f"Unknown session status: {value}",
            details={"value": value},
        )


class InvalidTransitionError(DomainError):
    """Raised when a lifecycle operation is not allowed from the current status."""

    def __init__(self, current: str, target: str):
        self.current = current
        self.target = target
        super().__init__(
            code="INVALID_TRANSITION",
            message=f"Cannot change status from {current} to {target}",
            details={"current": current, "target": target},
        )


class StoreError(AppError):
    """Raised when the session store cannot complete a load or save."""

    def __init__(self, message: str = "Session store unavailable", details: Optional[dict] = None):
        super().__init__(
            code="STORE_ERROR",
            message=message,
            status_code=500,
            details=details,
        )
