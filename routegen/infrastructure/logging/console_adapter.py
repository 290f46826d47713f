"""structlog-backed LoggerProtocol implementation.

Events go to stderr so stdout stays free for tools that print templates.
Rendering follows Settings: JSON lines in testing/ci (or when log_json is
set), a plain key=value console layout otherwise. Events below the
configured level are dropped by structlog's filtering bound logger.

Implementation does NOT inherit from LoggerProtocol (PEP 544 structural
subtyping).
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _build_processors(use_json: bool) -> list[Any]:
    renderer = (
        structlog.processors.JSONRenderer()
        if use_json
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    return [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        renderer,
    ]


class ConsoleAdapter:
    """Route generation logger writing structured events to stderr.

    Args:
        use_json: Render JSON lines instead of the console layout.
        level: Minimum standard library level that is emitted.
    """

    def __init__(self, *, use_json: bool = False, level: int = logging.INFO) -> None:
        structlog.configure(
            processors=_build_processors(use_json),
            wrapper_class=structlog.make_filtering_bound_logger(level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
            cache_logger_on_first_use=True,
        )
        self._logger = structlog.get_logger()

    @classmethod
    def _wrap(cls, bound_logger: Any) -> ConsoleAdapter:
        adapter = cls.__new__(cls)
        adapter._logger = bound_logger
        return adapter

    def debug(self, event: str, /, **context: Any) -> None:
        self._logger.debug(event, **context)

    def warning(self, event: str, /, **context: Any) -> None:
        self._logger.warning(event, **context)

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Return a new adapter that adds context to every event."""
        return self._wrap(self._logger.bind(**context))
