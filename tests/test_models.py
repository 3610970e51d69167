"""Unit tests for Hook Relay models."""

import json

import pytest
from pydantic import ValidationError

from hookrelay.models import (
    GitHubEvent,
    HookRelayEvent,
    HookRelayOptions,
    OutcomeError,
    OutcomePayload,
    ShopifyEvent,
    StripeEvent,
)


def make_event(provider: str, payload: object) -> HookRelayEvent:
    return HookRelayEvent(
        id="evt_relay_1",
        provider=provider,
        provider_event_id="evt_relay_1",
        payload=payload,
    )


class TestOutcomePayload:
    """Tests for OutcomePayload serialization."""

    def test_success_wire_format(self):
        """Success outcome should use camelCase and omit error."""
        outcome = OutcomePayload.success(120)
        assert json.loads(outcome.to_json()) == {"status": "success", "durationMs": 120}

    def test_failure_wire_format(self):
        """Failure outcome should include the error record."""
        outcome = OutcomePayload.failure(
            7, OutcomeError(name="KeyError", message="'sku'", stack="Traceback ...")
        )
        assert json.loads(outcome.to_json()) == {
            "status": "failure",
            "durationMs": 7,
            "error": {"name": "KeyError", "message": "'sku'", "stack": "Traceback ..."},
        }

    def test_accepts_alias(self):
        """Both field name and wire alias should populate duration."""
        assert OutcomePayload(status="success", durationMs=5).duration_ms == 5
        assert OutcomePayload(status="success", duration_ms=5).duration_ms == 5

    def test_invalid_status(self):
        with pytest.raises(ValidationError):
            OutcomePayload(status="maybe", duration_ms=1)

    def test_negative_duration(self):
        with pytest.raises(ValidationError):
            OutcomePayload.success(-1)


class TestOutcomeError:
    """Tests for OutcomeError.from_exception."""

    def test_captures_raised_exception(self):
        try:
            raise RuntimeError("Database connection failed")
        except RuntimeError as e:
            error = OutcomeError.from_exception(e)

        assert error.name == "RuntimeError"
        assert error.message == "Database connection failed"
        assert error.stack is not None
        assert "RuntimeError: Database connection failed" in error.stack

    def test_custom_exception_name(self):
        class PaymentDeclined(Exception):
            pass

        error = OutcomeError.from_exception(PaymentDeclined("card declined"))
        assert error.name == "PaymentDeclined"
        assert error.message == "card declined"


class TestHookRelayEvent:
    """Tests for HookRelayEvent."""

    def test_defaults(self):
        event = make_event("custom", {"a": 1})
        assert event.attempt == 1
        assert event.replayed is False
        assert event.received_at.tzinfo is not None

    def test_typed_payload_stripe(self):
        event = make_event(
            "stripe",
            {
                "id": "evt_1",
                "object": "event",
                "type": "invoice.paid",
                "data": {"object": {"id": "in_1"}},
                "livemode": False,
            },
        )
        typed = event.typed_payload()
        assert isinstance(typed, StripeEvent)
        assert typed.type == "invoice.paid"
        assert typed.data.object == {"id": "in_1"}

    def test_typed_payload_github(self):
        event = make_event(
            "github",
            {
                "action": "opened",
                "sender": {"login": "octocat", "id": 1, "type": "User"},
                "repository": {"id": 2, "name": "hello", "full_name": "octocat/hello"},
                "pull_request": {"number": 7},
            },
        )
        typed = event.typed_payload()
        assert isinstance(typed, GitHubEvent)
        assert typed.sender.login == "octocat"
        assert typed.repository.full_name == "octocat/hello"
        assert typed.model_extra["pull_request"] == {"number": 7}

    def test_typed_payload_shopify(self):
        typed = make_event("shopify", {"id": 99, "total_price": "10.00"}).typed_payload()
        assert isinstance(typed, ShopifyEvent)
        assert typed.id == 99

    def test_typed_payload_unknown_provider_returns_raw(self):
        payload = {"anything": True}
        assert make_event("linear", payload).typed_payload() == payload

    def test_typed_payload_invalid(self):
        with pytest.raises(ValidationError):
            make_event("stripe", {"object": "event"}).typed_payload()

    def test_acknowledge_is_deprecated_noop(self):
        event = make_event("stripe", {})
        with pytest.warns(DeprecationWarning):
            assert event.acknowledge() is None


class TestHookRelayOptions:
    """Tests for HookRelayOptions."""

    def test_defaults(self):
        options = HookRelayOptions(provider="stripe")
        assert options.timeout_ms == 8000
        assert options.enforce_idempotency is True
        assert options.allow_replay is True

    def test_provider_required(self):
        with pytest.raises(ValidationError):
            HookRelayOptions(provider="")

    def test_timeout_positive(self):
        with pytest.raises(ValidationError):
            HookRelayOptions(provider="stripe", timeout_ms=0)

    def test_frozen(self):
        options = HookRelayOptions(provider="stripe")
        with pytest.raises(ValidationError):
            options.allow_replay = False
