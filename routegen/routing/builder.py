"""Route template builder.

Orchestrates template synthesis for one operation context: path first, then
the query suffix. Builders are scoped to a single context and hold no state
across calls, so independent contexts can be built concurrently.

Usage:
    from routegen.routing.builder import build_route_template

    build_route_template(context)
    # 'api/Products({key})/Orders?top={top}'
"""

from collections.abc import Iterable

from routegen.core.container import get_logger
from routegen.domain.entities import OperationContext
from routegen.domain.protocols.logger_protocol import LoggerProtocol
from routegen.routing.path import PathSegmentComposer
from routegen.routing.query import QueryStringComposer


class RouteTemplateBuilder:
    """Builds the route template of one operation context.

    Args:
        context: Operation context to build the template for.
        logger: Logger (defaults to the app logger); bound to the
            controller and action of the context.
    """

    def __init__(
        self,
        context: OperationContext,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self._context = context
        self._logger = (logger or get_logger()).bind(
            controller=context.controller_name,
            action=context.action_name,
        )

    @property
    def context(self) -> OperationContext:
        return self._context

    def build(self) -> str:
        """Render the route template (path + optional query suffix).

        Returns:
            The route template.
        """
        path = PathSegmentComposer(self._context, self._logger).build()
        query = QueryStringComposer(self._context).build()
        template = path + query

        self._logger.debug(
            "route_template_built",
            action_type=self._context.action_type.value,
            generation_kind=self._context.generation_kind.value,
            attribute_routed=self._context.is_attribute_routed,
            template=template,
        )

        return template


def build_route_template(
    context: OperationContext,
    logger: LoggerProtocol | None = None,
) -> str:
    """Build the route template of one operation context."""
    return RouteTemplateBuilder(context, logger).build()


def build_route_templates(
    contexts: Iterable[OperationContext],
    logger: LoggerProtocol | None = None,
) -> list[str]:
    """Build route templates for many contexts.

    Each context gets its own builder; templates are returned in input order.

    Args:
        contexts: Operation contexts.
        logger: Logger shared by all builders.

    Returns:
        One template per context.
    """
    return [build_route_template(context, logger) for context in contexts]
