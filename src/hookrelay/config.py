"""Configuration management for Hook Relay."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

from .exceptions import HookRelayConfigError

DEFAULT_API_URL = "https://api.hookrelay.io"


class HookRelaySettings(BaseSettings):
    """Hook Relay configuration loaded from environment variables.

    All settings can be overridden via environment variables with
    the HOOKRELAY_ prefix. For example:
        HOOKRELAY_SECRET=hr_sec_...
        HOOKRELAY_API_URL=https://relay.internal.example.com

    Pass an instance to with_hookrelay() to pin configuration for one
    endpoint; when omitted, the environment is read on every request.
    """

    secret: str | None = Field(
        default=None,
        description=(
            "Shared secret used to verify envelope signatures and to authenticate "
            "outcome reports. Required when a delivery is handled."
        ),
    )
    api_url: str = Field(
        default=DEFAULT_API_URL,
        description="Base URL of the Hook Relay API used for outcome reports",
    )
    outcome_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        le=60,
        description="HTTP timeout for a single outcome report",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_format: Literal["json", "text"] = Field(
        default="json",
        description="Log output format",
    )

    model_config = {
        "env_prefix": "HOOKRELAY_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def require_secret(self) -> str:
        """Return the configured shared secret.

        Raises:
            HookRelayConfigError: If no secret is configured.
        """
        if not self.secret:
            raise HookRelayConfigError("HOOKRELAY_SECRET environment variable is not configured")
        return self.secret
