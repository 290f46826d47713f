"""Application-scoped singletons.

Composition root for infrastructure used by the builder:
- Logging (structlog console adapter)

Usage:
    from routegen.core.container import get_logger

    logger = get_logger()
    logger.debug("route_template_built", template=template)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from routegen.core.config import get_settings

if TYPE_CHECKING:
    from routegen.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development/production: ConsoleAdapter (human-readable unless log_json)
    - testing/ci: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from routegen.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=settings.use_json_logs,
        level=settings.log_level_number,
    )
