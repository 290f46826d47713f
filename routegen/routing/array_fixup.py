"""Bracket fix-up for collection parameters in declared templates.

A declared (attribute-routed) template such as ``GetByIds(ids={ids})`` carries
no type information. For client templates the tokens of collection-typed
function parameters are wrapped in brackets so code generators serialize them
as arrays:

    GetByIds(ids={ids})  ->  GetByIds(ids=[{ids}])
"""

from routegen.core.container import get_logger
from routegen.core.contracts import require
from routegen.domain.entities import OperationContext
from routegen.domain.enums import GenerationKind
from routegen.domain.protocols.logger_protocol import LoggerProtocol
from routegen.routing.tokens import find_token


class ArrayParameterFixup:
    """Wraps collection parameter tokens of a declared template.

    Args:
        context: Operation context (operation, descriptions, generation kind).
        logger: Logger for diagnostics (defaults to the app logger).
    """

    def __init__(
        self,
        context: OperationContext,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self._context = context
        self._logger = logger or get_logger()

    def apply(self, template: str) -> str:
        """Return template with collection parameter tokens bracketed.

        Only client templates of functions are changed. Each collection
        parameter wraps the first token carrying its route-level name;
        parameters without a token in the template are skipped.

        Args:
            template: Declared route template.

        Returns:
            The fixed-up template.
        """
        operation = self._context.operation

        if (
            operation is None
            or not operation.is_function
            or self._context.generation_kind != GenerationKind.CLIENT
        ):
            return template

        if not require(bool(template), "declared template must not be empty"):
            return template

        for parameter in operation.declared_parameters():
            if not parameter.semantic_type.is_collection:
                continue

            route_name = self._context.route_parameter_name(parameter.name)
            template = self._wrap(template, route_name)

        return template

    def _wrap(self, template: str, route_name: str) -> str:
        token = find_token(template, route_name)

        if token is None:
            self._logger.debug("collection_token_not_found", parameter=route_name)
            return template

        if template[token.start - 1 : token.start] == "[" and template[
            token.end : token.end + 1
        ] == "]":
            return template

        return (
            f"{template[: token.start]}[{template[token.start : token.end]}]"
            f"{template[token.end :]}"
        )
