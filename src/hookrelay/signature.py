"""Envelope signatures for Hook Relay deliveries.

The relay signs every forwarded request with HMAC-SHA256 over the string
``"<unix-timestamp>.<raw-body>"`` and sends ``v1=<hex_digest>`` in the
X-HookRelay-Signature header. Signatures older or newer than five minutes
are rejected to bound the replay window and tolerate clock skew.

This covers the relay-to-application hop only. The original provider's
signature (Stripe, GitHub, ...) is checked by the relay before forwarding.
"""

from __future__ import annotations

import hashlib
import hmac
import time

from .exceptions import HookRelaySignatureError

SIGNATURE_VERSION = "v1"
TIMESTAMP_TOLERANCE_SECONDS = 300

_PREFIX = f"{SIGNATURE_VERSION}="


def _to_bytes(value: str | bytes) -> bytes:
    return value if isinstance(value, bytes) else value.encode("utf-8")


def sign_payload(timestamp: int, payload: str | bytes, secret: str) -> str:
    """Compute the envelope signature for a payload.

    Args:
        timestamp: Unix timestamp in seconds.
        payload: Raw request body. Strings are UTF-8 encoded.
        secret: Shared secret for HMAC.

    Returns:
        Signature in format "v1=<hex_digest>".
    """
    signed_payload = f"{timestamp}.".encode() + _to_bytes(payload)
    digest = hmac.new(
        key=secret.encode("utf-8"),
        msg=signed_payload,
        digestmod=hashlib.sha256,
    ).hexdigest()
    return f"{_PREFIX}{digest}"


def timing_safe_equal(a: str, b: str) -> bool:
    """Compare two strings in time independent of where they differ.

    Lengths are checked first; after that every character is visited
    and differences are accumulated, so the loop never exits early.
    """
    if len(a) != len(b):
        return False

    result = 0
    for x, y in zip(a, b):
        result |= ord(x) ^ ord(y)

    return result == 0


def verify_signature(
    timestamp: str,
    payload: str | bytes,
    signature_header: str,
    secret: str,
    *,
    tolerance_seconds: int = TIMESTAMP_TOLERANCE_SECONDS,
    now: int | None = None,
) -> bool:
    """Verify a Hook Relay envelope signature.

    Never raises for malformed input; anything that does not check out
    returns False.

    Args:
        timestamp: Value of the X-HookRelay-Timestamp header.
        payload: Raw request body exactly as received.
        signature_header: Value of the X-HookRelay-Signature header.
        secret: Shared secret for HMAC.
        tolerance_seconds: Maximum allowed distance between timestamp and now.
        now: Current unix time in seconds. Defaults to the system clock.

    Returns:
        True if the signature matches and the timestamp is within tolerance.
    """
    if not signature_header.startswith(_PREFIX):
        return False

    try:
        ts = int(timestamp.strip())
    except ValueError:
        return False

    current = int(time.time()) if now is None else now
    if abs(current - ts) > tolerance_seconds:
        return False

    provided = signature_header[len(_PREFIX) :]
    expected = sign_payload(ts, payload, secret)[len(_PREFIX) :]

    return timing_safe_equal(expected, provided)


def require_valid_signature(
    timestamp: str,
    payload: str | bytes,
    signature_header: str,
    secret: str,
    *,
    tolerance_seconds: int = TIMESTAMP_TOLERANCE_SECONDS,
    now: int | None = None,
) -> None:
    """Verify a signature, raising instead of returning False.

    Raises:
        HookRelaySignatureError: If the signature is invalid or expired.
    """
    if not verify_signature(
        timestamp,
        payload,
        signature_header,
        secret,
        tolerance_seconds=tolerance_seconds,
        now=now,
    ):
        raise HookRelaySignatureError("Invalid signature")
