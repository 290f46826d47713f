"""Token expansion shared by entity keys and operation parameters.

Every token renders as ``{name}``. Server templates stop there: the serving
runtime parses raw values itself. Client templates describe the literal
format so a code generator can serialize arguments:

    Collection  ->  [{name}]
    Enum        ->  Sales.Color'{name}'   ('{name}' when unqualified enum
                                           literals are allowed)
    Quoted type ->  prefix'{name}'         (see routing.quoting)
    Other       ->  {name}

Keys rendered as extra path segments (slash delimiter, second key onwards)
are never decorated.
"""

from routegen.core.contracts import require
from routegen.domain.entities import OperationContext
from routegen.domain.enums import GenerationKind
from routegen.domain.types import SemanticType
from routegen.routing.quoting import get_quoting_prefix


def expand_parameter_token(
    context: OperationContext,
    semantic_type: SemanticType,
    name: str,
    *,
    key_as_segment: bool = False,
) -> str:
    """Render one template token.

    Args:
        context: Context providing generation kind and enum options.
        semantic_type: Metadata type of the key or parameter.
        name: Token name (must not be empty).
        key_as_segment: True for keys rendered as additional path segments.

    Returns:
        The rendered token.

    Raises:
        ContractViolationError: If name is empty and contract verification
            is enabled.

    Examples:
        >>> expand_parameter_token(client_context, EDM_STRING, "key")
        "'{key}'"
        >>> expand_parameter_token(server_context, EDM_STRING, "key")
        '{key}'
    """
    require(bool(name), "token name must not be empty", type_name=semantic_type.name)

    token = f"{{{name}}}"

    if context.generation_kind == GenerationKind.SERVER or key_as_segment:
        return token

    if semantic_type.is_collection:
        return f"[{token}]"

    if semantic_type.is_enum:
        qualifier = (
            ""
            if context.options.allow_unqualified_enum_literal
            else semantic_type.name
        )
        return f"{qualifier}'{token}'"

    prefix = get_quoting_prefix(semantic_type.python_type)

    if prefix is None:
        return token

    return f"{prefix}'{token}'"
