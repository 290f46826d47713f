"""LoggerProtocol definition for structured logging.

The builder only reports two kinds of events, so the port is narrow:

    - DEBUG: Per-template diagnostics (template built, key segment skipped,
      collection token not found)
    - WARNING: Degraded input (missing metadata, invalid operation context,
      violated precondition while verification is off)

Every call is structured: an event name plus key-value context.

Usage:
    from routegen.core.container import get_logger
    from routegen.domain.protocols.logger_protocol import LoggerProtocol

    logger: LoggerProtocol = get_logger()
    scoped = logger.bind(controller="Products", action="Get")
    scoped.debug("route_template_built", template="Products({key})")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Structured logger used by the route template builder."""

    def debug(self, event: str, /, **context: Any) -> None:
        """Log a diagnostic event.

        Args:
            event: snake_case event name (no f-strings; put values in context).
            **context: Structured key-value context fields.
        """
        ...

    def warning(self, event: str, /, **context: Any) -> None:
        """Log a degraded-input event.

        Args:
            event: snake_case event name.
            **context: Structured key-value context fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a logger that adds context to every event.

        The receiver is left unchanged.
        """
        ...
