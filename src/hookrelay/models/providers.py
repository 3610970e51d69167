"""Payload models for providers Hook Relay knows about.

These only describe the commonly used fields. Every model allows extra
fields so new provider attributes never break validation; install the
provider's own SDK for exhaustive types.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class StripeEventData(BaseModel):
    """The ``data`` envelope of a Stripe event."""

    model_config = ConfigDict(extra="allow")

    object: dict[str, Any] = Field(default_factory=dict)
    previous_attributes: dict[str, Any] | None = None


class StripeEventRequest(BaseModel):
    """Request that triggered a Stripe event, if any."""

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    idempotency_key: str | None = None


class StripeEvent(BaseModel):
    """Basic Stripe event structure."""

    model_config = ConfigDict(extra="allow")

    id: str
    object: str = "event"
    type: str
    api_version: str | None = None
    created: int | None = None
    data: StripeEventData = Field(default_factory=StripeEventData)
    livemode: bool = False
    pending_webhooks: int | None = None
    request: StripeEventRequest | None = None


class GitHubAccount(BaseModel):
    """A GitHub user or organization reference."""

    model_config = ConfigDict(extra="allow")

    login: str
    id: int
    type: str | None = None


class GitHubRepository(BaseModel):
    """Repository attached to a GitHub webhook."""

    model_config = ConfigDict(extra="allow")

    id: int
    name: str
    full_name: str
    private: bool = False
    owner: GitHubAccount | None = None


class GitHubEvent(BaseModel):
    """Basic GitHub webhook event structure."""

    model_config = ConfigDict(extra="allow")

    action: str | None = None
    sender: GitHubAccount | None = None
    repository: GitHubRepository | None = None
    organization: GitHubAccount | None = None


class ShopifyEvent(BaseModel):
    """Basic Shopify webhook event structure."""

    model_config = ConfigDict(extra="allow")

    id: int | None = None
    admin_graphql_api_id: str | None = None


# Provider name -> payload model used by HookRelayEvent.typed_payload()
PROVIDER_PAYLOAD_MODELS: dict[str, type[BaseModel]] = {
    "stripe": StripeEvent,
    "github": GitHubEvent,
    "shopify": ShopifyEvent,
}


__all__ = [
    "PROVIDER_PAYLOAD_MODELS",
    "GitHubAccount",
    "GitHubEvent",
    "GitHubRepository",
    "ShopifyEvent",
    "StripeEvent",
    "StripeEventData",
    "StripeEventRequest",
]
