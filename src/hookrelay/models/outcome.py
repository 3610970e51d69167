"""Outcome reported to Hook Relay after a handler runs."""

from __future__ import annotations

import traceback
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

OutcomeStatus = Literal["success", "failure"]


class OutcomeError(BaseModel):
    """Error details for a failed handler invocation.

    Attributes:
        name: Exception class name.
        message: Exception message.
        stack: Formatted traceback (sent to the relay only, never to the caller).
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(description="Exception class name")
    message: str = Field(description="Exception message")
    stack: str | None = Field(default=None, description="Formatted traceback")

    @classmethod
    def from_exception(cls, exc: BaseException) -> OutcomeError:
        """Capture name, message and traceback from an exception."""
        return cls(
            name=type(exc).__name__,
            message=str(exc),
            stack="".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
        )


class OutcomePayload(BaseModel):
    """Body of POST /v1/events/{event_id}/outcome.

    Serialize with to_json() so the wire format uses camelCase
    ``durationMs`` and omits absent fields.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    status: OutcomeStatus = Field(description="Handler result")
    duration_ms: int = Field(ge=0, alias="durationMs", description="Handler duration")
    error: OutcomeError | None = Field(default=None, description="Failure details")

    @classmethod
    def success(cls, duration_ms: int) -> OutcomePayload:
        """Create a success outcome."""
        return cls(status="success", duration_ms=duration_ms)

    @classmethod
    def failure(cls, duration_ms: int, error: OutcomeError) -> OutcomePayload:
        """Create a failure outcome."""
        return cls(status="failure", duration_ms=duration_ms, error=error)

    def to_json(self) -> str:
        """Serialize using the relay's wire field names."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


__all__ = [
    "OutcomeError",
    "OutcomePayload",
    "OutcomeStatus",
]
