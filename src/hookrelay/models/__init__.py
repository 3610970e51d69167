"""Pydantic models for Hook Relay events, outcomes and provider payloads."""

from .event import HookRelayEvent, HookRelayHandler, HookRelayOptions
from .outcome import OutcomeError, OutcomePayload, OutcomeStatus
from .providers import (
    PROVIDER_PAYLOAD_MODELS,
    GitHubAccount,
    GitHubEvent,
    GitHubRepository,
    ShopifyEvent,
    StripeEvent,
    StripeEventData,
    StripeEventRequest,
)

__all__ = [
    "PROVIDER_PAYLOAD_MODELS",
    "GitHubAccount",
    "GitHubEvent",
    "GitHubRepository",
    "HookRelayEvent",
    "HookRelayHandler",
    "HookRelayOptions",
    "OutcomeError",
    "OutcomePayload",
    "OutcomeStatus",
    "ShopifyEvent",
    "StripeEvent",
    "StripeEventData",
    "StripeEventRequest",
]
