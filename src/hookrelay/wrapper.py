"""Wrap a FastAPI/Starlette route handler with Hook Relay.

The wrapper:
- verifies the relay's envelope signature
- parses the body and builds a HookRelayEvent
- runs the user handler (sync or async)
- reports success/failure back to Hook Relay
- answers 202 on success and 500 on handler failure so the relay retries

Example:
    ```python
    from fastapi import FastAPI
    from hookrelay import with_hookrelay

    app = FastAPI()

    async def handle_stripe(event):
        if event.payload["type"] == "checkout.session.completed":
            await fulfill_order(event.payload["data"]["object"])

    app.add_api_route(
        "/api/webhooks/stripe",
        with_hookrelay(handle_stripe, provider="stripe"),
        methods=["POST"],
    )
    ```
"""

from __future__ import annotations

import inspect
import json
import time
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import Request, Response
from fastapi.responses import JSONResponse

from . import headers
from .config import HookRelaySettings
from .logging import get_logger
from .models import (
    HookRelayEvent,
    HookRelayHandler,
    HookRelayOptions,
    OutcomeError,
    OutcomePayload,
)
from .outcome import report_outcome
from .signature import verify_signature

logger = get_logger(__name__)

HookRelayEndpoint = Callable[[Request], Awaitable[Response]]


def _error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def _reject_constant(value: str) -> Any:
    # NaN and Infinity are not JSON, even though json.loads accepts them
    raise ValueError(f"Invalid JSON constant: {value}")


def _parse_attempt(value: str | None) -> int:
    """Parse the attempt header, defaulting to 1 when absent or malformed."""
    if not value:
        return 1
    try:
        return int(value.strip())
    except ValueError:
        logger.warning("Ignoring malformed attempt header", value=value)
        return 1


def extract_provider_event_id(provider: str, payload: Any) -> str | None:
    """Extract the provider-specific event ID from a parsed payload.

    Only Stripe carries a usable top-level ``id``; every other provider
    returns None and the caller falls back to the Hook Relay event ID.
    """
    if not isinstance(payload, dict):
        return None

    if provider == "stripe":
        event_id = payload.get("id")
        return event_id if isinstance(event_id, str) and event_id else None

    return None


def with_hookrelay(
    handler: HookRelayHandler,
    provider: str,
    *,
    timeout_ms: int = 8000,
    enforce_idempotency: bool = True,
    allow_replay: bool = True,
    settings: HookRelaySettings | None = None,
) -> HookRelayEndpoint:
    """Wrap a webhook handler into a Hook Relay endpoint.

    Args:
        handler: Callable receiving a HookRelayEvent. May be sync or async.
        provider: Provider this endpoint accepts (must match X-HookRelay-Provider).
        timeout_ms: Declared handler timeout (not enforced locally).
        enforce_idempotency: Declared idempotency flag (enforced by the relay).
        allow_replay: Whether replayed deliveries are accepted.
        settings: Explicit configuration. When None, HookRelaySettings is
            loaded from the environment on every request.

    Returns:
        An ``async (Request) -> Response`` endpoint.

    Raises:
        pydantic.ValidationError: If the options are invalid (e.g. empty provider).
    """
    options = HookRelayOptions(
        provider=provider,
        timeout_ms=timeout_ms,
        enforce_idempotency=enforce_idempotency,
        allow_replay=allow_replay,
    )

    async def hookrelay_handler(request: Request) -> Response:
        config = settings if settings is not None else HookRelaySettings()
        secret = config.require_secret()

        event_id = request.headers.get(headers.EVENT_ID)
        header_provider = request.headers.get(headers.PROVIDER)
        timestamp = request.headers.get(headers.TIMESTAMP)
        signature = request.headers.get(headers.SIGNATURE)
        attempt = _parse_attempt(request.headers.get(headers.ATTEMPT))
        replayed = request.headers.get(headers.REPLAYED) == "true"

        if not event_id or not signature or not timestamp:
            return _error_response("Missing required Hook Relay headers", 400)

        if header_provider != options.provider:
            received = "unknown" if header_provider is None else header_provider
            return _error_response(
                f"Expected provider '{options.provider}', got '{received}'",
                400,
            )

        # Signature covers the raw bytes, so read before any parsing
        raw_body = await request.body()

        if not verify_signature(timestamp, raw_body, signature, secret):
            logger.debug("Rejected delivery with invalid signature", event_id=event_id)
            return _error_response("Invalid signature", 401)

        try:
            payload = json.loads(raw_body, parse_constant=_reject_constant)
        except ValueError:
            return _error_response("Invalid JSON payload", 400)

        if replayed and not options.allow_replay:
            logger.debug("Rejected replayed delivery", event_id=event_id)
            return _error_response("Replayed events are not allowed", 400)

        event = HookRelayEvent(
            id=event_id,
            provider=options.provider,
            provider_event_id=extract_provider_event_id(options.provider, payload) or event_id,
            payload=payload,
            attempt=attempt,
            replayed=replayed,
        )

        log = logger.bind(event_id=event_id, provider=options.provider, attempt=attempt)
        start = time.monotonic()

        try:
            result = handler(event)
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            duration_ms = int((time.monotonic() - start) * 1000)
            error = OutcomeError.from_exception(e)
            log.info(
                "Webhook handler failed",
                duration_ms=duration_ms,
                error_name=error.name,
                error=error.message,
            )

            reported = await report_outcome(
                event_id,
                OutcomePayload.failure(duration_ms, error),
                secret,
                config.api_url,
                timeout_seconds=config.outcome_timeout_seconds,
            )
            if not reported:
                log.error("Failed to report failure outcome")

            # 500 tells the relay to schedule a retry
            return JSONResponse({"error": error.message, "eventId": event_id}, status_code=500)

        duration_ms = int((time.monotonic() - start) * 1000)
        log.info("Webhook handler completed", duration_ms=duration_ms)

        reported = await report_outcome(
            event_id,
            OutcomePayload.success(duration_ms),
            secret,
            config.api_url,
            timeout_seconds=config.outcome_timeout_seconds,
        )
        if not reported:
            log.error("Failed to report success outcome")

        return JSONResponse({"accepted": True, "eventId": event_id}, status_code=202)

    return hookrelay_handler


def hookrelay_endpoint(
    provider: str,
    *,
    timeout_ms: int = 8000,
    enforce_idempotency: bool = True,
    allow_replay: bool = True,
    settings: HookRelaySettings | None = None,
) -> Callable[[HookRelayHandler], HookRelayEndpoint]:
    """Decorator form of with_hookrelay().

    Example:
        ```python
        @app.post("/api/webhooks/github")
        @hookrelay_endpoint("github", allow_replay=False)
        async def handle_github(event: HookRelayEvent) -> None:
            ...
        ```
    """

    def decorator(handler: HookRelayHandler) -> HookRelayEndpoint:
        return with_hookrelay(
            handler,
            provider,
            timeout_ms=timeout_ms,
            enforce_idempotency=enforce_idempotency,
            allow_replay=allow_replay,
            settings=settings,
        )

    return decorator
