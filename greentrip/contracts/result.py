"""Response envelope shared by the reporting endpoints."""

from datetime import datetime, timezone
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ServiceError(BaseModel):
    """Structured error from a service call."""

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, str | int | float | bool | list[str] | None] | None = None


class ServiceResult(BaseModel, Generic[T]):
    """Envelope for API responses: ``{"success": ..., "data": ...}``.

    On success: ``data`` is populated, ``message`` optionally set.
    On failure: ``error`` is populated with structured error info.
    """

    success: bool
    data: T | None = None
    message: str | None = None
    error: ServiceError | None = None
    duration_ms: float | None = Field(default=None, ge=0)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(tz=timezone.utc))

    @classmethod
    def ok(
        cls, data: T | None = None, message: str | None = None, duration_ms: float | None = None
    ) -> "ServiceResult[T]":
        return cls(success=True, data=data, message=message, duration_ms=duration_ms)

    @classmethod
    def fail(
        cls, code: str, message: str, **details: str | int | float | bool | list[str] | None
    ) -> "ServiceResult[T]":
        return cls(
            success=False,
            message=message,
            error=ServiceError(code=code, message=message, details=details or None),
        )
