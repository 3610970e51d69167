"""Helpers for exercising a wrapped endpoint in your own tests.

Example:
    ```python
    from fastapi.testclient import TestClient
    from hookrelay.testing import signed_headers

    body = json.dumps({"id": "evt_1", "type": "invoice.paid"})
    response = client.post(
        "/api/webhooks/stripe",
        content=body,
        headers=signed_headers(body, secret="hr_sec_test", provider="stripe"),
    )
    assert response.status_code == 202
    ```
"""

from __future__ import annotations

import time

from . import headers
from .signature import sign_payload


def signed_headers(
    body: str | bytes,
    secret: str,
    *,
    provider: str,
    event_id: str = "evt_test",
    timestamp: int | None = None,
    attempt: int = 1,
    replayed: bool = False,
) -> dict[str, str]:
    """Build the header set the relay sends for a delivery of ``body``.

    Args:
        body: Exact request body that will be sent.
        secret: Shared secret used to sign the body.
        provider: Value for X-HookRelay-Provider.
        event_id: Value for X-HookRelay-Event-Id.
        timestamp: Signing time. Defaults to now.
        attempt: Delivery attempt number.
        replayed: Whether to mark the delivery as replayed.

    Returns:
        Headers ready to pass to an HTTP client.
    """
    ts = int(time.time()) if timestamp is None else timestamp
    return {
        "Content-Type": "application/json",
        headers.EVENT_ID: event_id,
        headers.PROVIDER: provider,
        headers.TIMESTAMP: str(ts),
        headers.SIGNATURE: sign_payload(ts, body, secret),
        headers.ATTEMPT: str(attempt),
        headers.REPLAYED: "true" if replayed else "false",
    }
