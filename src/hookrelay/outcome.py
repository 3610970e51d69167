"""Outcome reporting back to the Hook Relay API.

Reports are attempted exactly once. A report that fails (transport error,
timeout or non-2xx answer) is logged and reported as False; the relay's own
retry engine decides what happens next.
"""

from __future__ import annotations

import os
from urllib.parse import quote

import httpx

from .config import DEFAULT_API_URL
from .logging import get_logger
from .models import OutcomePayload

logger = get_logger(__name__)

API_URL_ENV_VAR = "HOOKRELAY_API_URL"


def resolve_api_url(api_url: str | None = None) -> str:
    """Resolve the Hook Relay API base URL.

    Priority: explicit argument, then HOOKRELAY_API_URL, then the
    public default endpoint.
    """
    base_url = api_url or os.environ.get(API_URL_ENV_VAR) or DEFAULT_API_URL
    return base_url.rstrip("/")


async def report_outcome(
    event_id: str,
    outcome: OutcomePayload,
    secret: str,
    api_url: str | None = None,
    *,
    timeout_seconds: float = 10.0,
) -> bool:
    """Report the outcome of a handler execution to Hook Relay.

    Args:
        event_id: The Hook Relay event ID.
        outcome: Success/failure details.
        secret: Shared secret, sent as a Bearer token.
        api_url: Optional API base URL override.
        timeout_seconds: HTTP request timeout.

    Returns:
        True if the relay accepted the report (2xx), False otherwise.
    """
    # Event IDs come from request headers; keep them inside one path segment
    url = f"{resolve_api_url(api_url)}/v1/events/{quote(event_id, safe='')}/outcome"

    headers = {
        "Content-Type": "application/json",
        "Authorization": f"Bearer {secret}",
    }

    try:
        async with httpx.AsyncClient(timeout=timeout_seconds) as client:
            response = await client.post(url, content=outcome.to_json(), headers=headers)
    except httpx.TimeoutException:
        logger.error("Outcome report timed out", event_id=event_id, url=url)
        return False
    except httpx.RequestError as e:
        logger.error("Outcome report failed", event_id=event_id, url=url, error=str(e))
        return False
    except Exception as e:
        logger.exception("Unexpected error reporting outcome", event_id=event_id, error=str(e))
        return False

    if not 200 <= response.status_code < 300:
        logger.error(
            "Outcome report rejected",
            event_id=event_id,
            status_code=response.status_code,
            reason=response.reason_phrase,
        )
        return False

    logger.debug("Outcome reported", event_id=event_id, status=outcome.status)
    return True
