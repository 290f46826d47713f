"""Path composition for route templates.

The path is the normalized route prefix followed by either the declared
template (attribute routing) or segments built from naming conventions:

    Entity set access   Products({key})/Orders
    Bound operation     Products({key})/Sales.Rate(rating={rating})
    Unbound operation   GetTopSellers(count={count})
"""

from routegen.core.container import get_logger
from routegen.domain.entities import OperationContext
from routegen.domain.enums import ActionType, GenerationKind, UrlKeyDelimiter
from routegen.domain.protocols.logger_protocol import LoggerProtocol
from routegen.routing.array_fixup import ArrayParameterFixup
from routegen.routing.constants import PATH_SEPARATOR
from routegen.routing.keys import KeyExpander
from routegen.routing.navigation import find_navigation_property
from routegen.routing.parameters import build_parameter_list
from routegen.routing.tokens import remove_route_constraints


def normalize_route_prefix(prefix: str | None) -> str:
    """Trim slashes and inline route constraints from a route prefix.

    Example:
        >>> normalize_route_prefix("/api/v{version:apiVersion}/")
        'api/v{version}'
    """
    if not prefix:
        return ""

    prefix = prefix.strip(PATH_SEPARATOR)

    if not prefix:
        return ""

    return remove_route_constraints(prefix)


def join_path(*parts: str) -> str:
    """Join non-empty path parts with a slash."""
    return PATH_SEPARATOR.join(part for part in parts if part)


class PathSegmentComposer:
    """Builds the path portion of a route template.

    Args:
        context: Operation context to build the path for.
        logger: Logger for degraded-metadata warnings (defaults to the app logger).
    """

    def __init__(
        self,
        context: OperationContext,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self._context = context
        self._logger = logger or get_logger()

    def build(self) -> str:
        """Render the path.

        Returns:
            The path without a leading slash.
        """
        prefix = normalize_route_prefix(self._context.route_prefix)

        if self._context.is_attribute_routed:
            controller_prefix = (self._context.controller_route_prefix or "").strip(
                PATH_SEPARATOR
            )
            return self._join_declared(join_path(prefix, controller_prefix))

        return join_path(prefix, *self._convention_segments())

    # -------------------------------------------------------------------------
    # Attribute routing
    # -------------------------------------------------------------------------

    def _join_declared(self, prefix: str) -> str:
        template = self._context.raw_template or ""

        if template and (
            self._context.is_function
            and self._context.generation_kind == GenerationKind.CLIENT
        ):
            template = ArrayParameterFixup(self._context, self._logger).apply(template)

        if not prefix:
            return template

        if not template:
            return prefix

        # A leading parenthesis continues the prefix's resource segment.
        if (
            template.startswith("(")
            and self._context.url_key_delimiter == UrlKeyDelimiter.PARENTHESES
        ):
            return prefix + template

        return join_path(prefix, template)

    # -------------------------------------------------------------------------
    # Convention routing
    # -------------------------------------------------------------------------

    def _convention_segments(self) -> list[str]:
        match self._context.action_type:
            case ActionType.ENTITY_SET:
                return [self._entity_set_segment()]

            case ActionType.BOUND_OPERATION:
                qualified = self._context.options.use_qualified_operation_names
                return [
                    self._keyed_controller_segment(),
                    *self._operation_segment(qualified=qualified),
                ]

            case ActionType.UNBOUND_OPERATION:
                return self._operation_segment(qualified=False)

            case _:
                msg = f"Unknown action type: {self._context.action_type}"
                raise ValueError(msg)

    def _keyed_controller_segment(self) -> str:
        keys = KeyExpander(self._context, self._logger).build()
        return self._context.controller_name + keys

    def _entity_set_segment(self) -> str:
        segment = self._keyed_controller_segment()
        entity_set = self._context.entity_set

        if entity_set is None:
            self._logger.warning(
                "entity_set_missing",
                controller=self._context.controller_name,
                action=self._context.action_name,
            )
            return segment

        navigation_property = find_navigation_property(
            self._context.action_name,
            entity_set.entity_type.navigation_properties,
        )

        if navigation_property is None:
            return segment

        return join_path(segment, navigation_property)

    def _operation_segment(self, *, qualified: bool) -> list[str]:
        operation = self._context.operation

        if operation is None:
            self._logger.warning(
                "operation_missing",
                controller=self._context.controller_name,
                action=self._context.action_name,
                action_type=self._context.action_type.value,
            )
            return []

        name = operation.route_name(qualified=qualified)
        return [name + build_parameter_list(self._context, operation)]
