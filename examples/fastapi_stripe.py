#!/usr/bin/env python3
"""Stripe webhooks through Hook Relay on FastAPI.

Demonstrates:
- with_hookrelay(): signature checks, parsing and outcome reporting
- typed_payload(): Stripe fields as a pydantic model
- raising from the handler to ask the relay for a retry

Prerequisites:
    - Shared secret in .env or the environment: HOOKRELAY_SECRET=hr_sec_...
    - Run with: uvicorn examples.fastapi_stripe:app --reload
"""

from fastapi import FastAPI

from hookrelay import HookRelayEvent, HookRelaySettings, StripeEvent, with_hookrelay
from hookrelay.logging import configure_logging, get_logger

settings = HookRelaySettings()
configure_logging(level=settings.log_level, format=settings.log_format)
logger = get_logger(__name__)

app = FastAPI(title="Hook Relay Stripe example")


async def handle_stripe(event: HookRelayEvent) -> None:
    """Dispatch on the Stripe event type."""
    stripe_event: StripeEvent = event.typed_payload()
    log = logger.bind(
        event_id=event.id,
        stripe_event_id=event.provider_event_id,
        attempt=event.attempt,
        replayed=event.replayed,
    )

    event_type = stripe_event.type
    obj = stripe_event.data.object

    if event_type == "checkout.session.completed":
        log.info("Checkout completed", session=obj.get("id"))
    elif event_type in ("customer.subscription.created", "customer.subscription.updated"):
        log.info("Subscription changed", subscription=obj.get("id"))
    elif event_type == "customer.subscription.deleted":
        log.info("Subscription canceled", subscription=obj.get("id"))
    elif event_type == "invoice.payment_succeeded":
        log.info("Invoice paid", invoice=obj.get("id"))
    elif event_type == "invoice.payment_failed":
        # Raising answers 500, so the relay schedules another attempt
        raise RuntimeError("Payment failure handling is not available yet")
    else:
        log.info("Unhandled event type", type=event_type)


app.add_api_route(
    "/api/webhooks/stripe",
    with_hookrelay(handle_stripe, provider="stripe", settings=settings),
    methods=["POST"],
)
