"""Entity key segment expansion.

Key parameters are the described parameters named with the reserved key
token prefix (``key``, ``keyCategoryId``). Composite keys also accept
parameters named exactly like a key property (``categoryId``). The segment
is only rendered when there is one key parameter per entity key; any
other count means the action does not address a single entity and the
segment is omitted.

Parentheses delimiter:
    Products({key})
    OrderLines({keyOrderId},{keyLineNumber})

Slash delimiter:
    Products/{key}
    OrderLines/{orderId}/{lineNumber}
"""

from routegen.core.container import get_logger
from routegen.domain.entities import EntityKey, OperationContext, ParameterDescription
from routegen.domain.enums import UrlKeyDelimiter
from routegen.domain.protocols.logger_protocol import LoggerProtocol
from routegen.routing.constants import KEY_SEPARATOR, KEY_TOKEN, PATH_SEPARATOR
from routegen.routing.expansion import expand_parameter_token


def is_key_parameter(keys: tuple[EntityKey, ...], name: str) -> bool:
    """Check whether a described parameter binds an entity key.

    Args:
        keys: Entity key properties.
        name: Described parameter name.

    Returns:
        True if name equals a key property name or starts with the reserved
        key token (both case-insensitive).
    """
    lowered = name.lower()

    if any(key.name.lower() == lowered for key in keys):
        return True

    return lowered.startswith(KEY_TOKEN)


def key_parameter_descriptions(
    context: OperationContext,
) -> list[ParameterDescription]:
    """Return the descriptions that bind entity keys, in caller order.

    Only names starting with the reserved key token count, except for
    composite keys, where a description named exactly like a key property
    counts too.
    """
    keys = context.entity_keys

    if len(keys) > 1:
        return [
            description
            for description in context.parameter_descriptions
            if is_key_parameter(keys, description.name)
        ]

    return [
        description
        for description in context.parameter_descriptions
        if description.name.lower().startswith(KEY_TOKEN)
    ]


class KeyExpander:
    """Builds the key segment for one operation context.

    Args:
        context: Operation context to expand keys for.
        logger: Logger for fallback diagnostics (defaults to the app logger).
    """

    def __init__(
        self,
        context: OperationContext,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self._context = context
        self._logger = logger or get_logger()

    def build(self) -> str:
        """Render the key segment.

        Returns:
            The key segment including its leading delimiter, or "" when the
            entity has no keys or the key parameter count does not match.
        """
        keys = self._context.entity_keys
        parameters = key_parameter_descriptions(self._context)

        if len(keys) != len(parameters):
            self._logger.debug(
                "key_segment_skipped",
                reason="key_count_mismatch",
                entity_keys=len(keys),
                key_parameters=len(parameters),
            )
            return ""

        if not keys:
            return ""

        if len(keys) == 1:
            tokens = [expand_parameter_token(self._context, keys[0].semantic_type, KEY_TOKEN)]
        else:
            tokens = self._expand_composite(keys, parameters)

        if self._context.url_key_delimiter == UrlKeyDelimiter.PARENTHESES:
            return f"({KEY_SEPARATOR.join(tokens)})"

        return "".join(PATH_SEPARATOR + token for token in tokens)

    def _expand_composite(
        self,
        keys: tuple[EntityKey, ...],
        parameters: list[ParameterDescription],
    ) -> list[str]:
        # Keys after the first become plain path segments in slash mode.
        as_segment = self._context.url_key_delimiter == UrlKeyDelimiter.SLASH
        return [
            expand_parameter_token(
                self._context,
                key.semantic_type,
                parameter.name,
                key_as_segment=as_segment and index > 0,
            )
            for index, (key, parameter) in enumerate(zip(keys, parameters))
        ]
