"""Event and option models for wrapped webhook handlers."""

from __future__ import annotations

import warnings
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .providers import PROVIDER_PAYLOAD_MODELS


class HookRelayEvent(BaseModel):
    """A webhook delivery handed to user code.

    Built fresh for every request from the Hook Relay headers and the
    parsed body. Nothing is persisted.

    Attributes:
        id: Hook Relay event ID (always taken from the X-HookRelay-Event-Id header).
        provider: Provider name (e.g. "stripe").
        provider_event_id: Original provider event ID, or ``id`` when the
            payload does not carry one.
        payload: Parsed JSON body.
        received_at: When the SDK received the delivery.
        attempt: Delivery attempt number (1-based).
        replayed: Whether the delivery was replayed from the dashboard.
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(description="Hook Relay event ID")
    provider: str = Field(description="Provider name")
    provider_event_id: str = Field(description="Original provider event ID")
    payload: Any = Field(description="Parsed JSON body")
    received_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="When the delivery was received",
    )
    attempt: int = Field(default=1, description="Delivery attempt number (1-based)")
    replayed: bool = Field(default=False, description="Whether this is a replayed event")

    def typed_payload(self) -> Any:
        """Validate the payload into the provider's payload model.

        Returns the matching StripeEvent / GitHubEvent / ShopifyEvent for
        known providers, otherwise the raw payload unchanged.

        Raises:
            pydantic.ValidationError: If the payload does not fit the model.
        """
        model = PROVIDER_PAYLOAD_MODELS.get(self.provider)
        if model is None:
            return self.payload
        return model.model_validate(self.payload)

    def acknowledge(self) -> None:
        """No-op kept for compatibility; acknowledgment is automatic."""
        warnings.warn(
            "HookRelayEvent.acknowledge() is deprecated; acknowledgment is automatic",
            DeprecationWarning,
            stacklevel=2,
        )


class HookRelayOptions(BaseModel):
    """Options for with_hookrelay().

    Attributes:
        provider: The webhook provider this endpoint accepts.
        timeout_ms: Declared handler timeout. Not enforced by the SDK.
        enforce_idempotency: Declared idempotency flag. Duplicate suppression
            is performed by the relay service, not locally.
        allow_replay: Whether replayed deliveries are accepted.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    provider: str = Field(min_length=1, description="Webhook provider (e.g. 'stripe')")
    timeout_ms: int = Field(default=8000, gt=0, description="Handler timeout in milliseconds")
    enforce_idempotency: bool = Field(default=True, description="Reject duplicate events")
    allow_replay: bool = Field(default=True, description="Accept replayed events")


# Sync or async callable receiving the event
HookRelayHandler = Callable[[HookRelayEvent], Awaitable[None] | None]


__all__ = [
    "HookRelayEvent",
    "HookRelayHandler",
    "HookRelayOptions",
]
