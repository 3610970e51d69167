"""HTTP headers the Hook Relay service sends with every forwarded webhook."""

from typing import Final

# Unique Hook Relay event identifier
EVENT_ID: Final = "X-HookRelay-Event-Id"
# Provider name (e.g. "stripe", "github")
PROVIDER: Final = "X-HookRelay-Provider"
# Original provider event ID (informational)
PROVIDER_EVENT_ID: Final = "X-HookRelay-Provider-Event-Id"
# Delivery attempt number (1-based)
ATTEMPT: Final = "X-HookRelay-Attempt"
# "true" when the delivery was replayed from the dashboard
REPLAYED: Final = "X-HookRelay-Replayed"
# Unix timestamp (seconds) when the request was signed
TIMESTAMP: Final = "X-HookRelay-Timestamp"
# HMAC signature for request verification
SIGNATURE: Final = "X-HookRelay-Signature"
# Provider event type (e.g. "checkout.session.completed")
EVENT_TYPE: Final = "X-HookRelay-Event-Type"

__all__ = [
    "ATTEMPT",
    "EVENT_ID",
    "EVENT_TYPE",
    "PROVIDER",
    "PROVIDER_EVENT_ID",
    "REPLAYED",
    "SIGNATURE",
    "TIMESTAMP",
]
