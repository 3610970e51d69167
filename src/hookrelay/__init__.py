"""hookrelay: Hook Relay SDK for FastAPI and Starlette.

Wraps a webhook route so deliveries forwarded by Hook Relay are
signature-checked, parsed into a typed event, handed to your code, and
their outcome reported back to the relay.

Quick Start:
    from fastapi import FastAPI
    from hookrelay import HookRelayEvent, hookrelay_endpoint

    app = FastAPI()

    @app.post("/api/webhooks/stripe")
    @hookrelay_endpoint("stripe")
    async def handle_stripe(event: HookRelayEvent) -> None:
        stripe_event = event.typed_payload()
        if stripe_event.type == "checkout.session.completed":
            await fulfill_order(stripe_event.data.object)

Configuration is read from HOOKRELAY_SECRET / HOOKRELAY_API_URL, or
passed explicitly with ``settings=HookRelaySettings(...)``.
"""

__version__ = "0.1.0"

from . import headers
from .config import DEFAULT_API_URL, HookRelaySettings
from .exceptions import HookRelayConfigError, HookRelayError, HookRelaySignatureError
from .logging import configure_logging, get_logger
from .models import (
    GitHubEvent,
    HookRelayEvent,
    HookRelayHandler,
    HookRelayOptions,
    OutcomeError,
    OutcomePayload,
    ShopifyEvent,
    StripeEvent,
)
from .outcome import report_outcome, resolve_api_url
from .signature import (
    require_valid_signature,
    sign_payload,
    timing_safe_equal,
    verify_signature,
)
from .wrapper import extract_provider_event_id, hookrelay_endpoint, with_hookrelay

__all__ = [
    "__version__",
    # Wrapper
    "with_hookrelay",
    "hookrelay_endpoint",
    "extract_provider_event_id",
    # Configuration
    "DEFAULT_API_URL",
    "HookRelaySettings",
    # Exceptions
    "HookRelayConfigError",
    "HookRelayError",
    "HookRelaySignatureError",
    # Logging
    "configure_logging",
    "get_logger",
    # Models
    "GitHubEvent",
    "HookRelayEvent",
    "HookRelayHandler",
    "HookRelayOptions",
    "OutcomeError",
    "OutcomePayload",
    "ShopifyEvent",
    "StripeEvent",
    # Headers
    "headers",
    # Signatures
    "require_valid_signature",
    "sign_payload",
    "timing_safe_equal",
    "verify_signature",
    # Outcome reporting
    "report_outcome",
    "resolve_api_url",
]
