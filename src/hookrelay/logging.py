"""Structured logging for Hook Relay.

The SDK logs through structlog on top of the standard library, so the host
application's handlers and levels decide what is shown. Nothing is
configured on import; applications that do not set up logging themselves
can call configure_logging() once at startup.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from structlog.typing import Processor


def configure_logging(
    level: str = "INFO",
    format: str = "json",
) -> None:
    """Configure structlog rendering and apply a log level.

    A stdout handler is added only when the root logger has none, so
    handlers installed by the host application are left in place. The
    level is applied to the root logger every time this is called.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        format: Output format - "json" for production, "text" for development.

    Example:
        ```python
        from hookrelay import HookRelaySettings
        from hookrelay.logging import configure_logging

        settings = HookRelaySettings()
        configure_logging(level=settings.log_level, format=settings.log_format)
        ```
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)
    root.setLevel(log_level)

    shared_processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if format.lower() == "json":
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger.

    Safe to call at import time: the returned proxy binds to whatever
    structlog configuration is active when it is first used.
    """
    return structlog.get_logger(name)  # type: ignore[no-any-return]
