"""Hook Relay exception hierarchy.

All exceptions inherit from HookRelayError so callers can catch every
SDK-raised error with a single except clause.

Client and protocol problems on an incoming delivery (missing headers,
bad signature, malformed JSON) are never raised; the wrapped endpoint turns
them into 4xx responses. Only conditions the caller must fix are raised.
"""

from __future__ import annotations


class HookRelayError(Exception):
    """Base exception for all Hook Relay errors.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code.
    """

    code: str = "hookrelay_error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, object]:
        """Convert exception to API-friendly dictionary."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
            }
        }


class HookRelayConfigError(HookRelayError):
    """Required configuration is missing or invalid.

    Raised from a wrapped endpoint when no shared secret is configured.
    It is deliberately not converted into an HTTP response so the host
    application's own error handling surfaces it.
    """

    code: str = "configuration_error"


class HookRelaySignatureError(HookRelayError):
    """Envelope signature verification failed.

    Raised by require_valid_signature(). The wrapped endpoint itself answers
    401 instead of raising.
    """

    code: str = "invalid_signature"
