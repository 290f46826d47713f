"""Query string composition from query-bound parameters.

Parameters bound from the query string render as ``?a={a}&b={b}`` in caller
order, except parameters the path already covers, parameters of unknown type,
and parameters that describe the query system itself:

- bulk query option containers (QueryOptions subclasses)
- bound action payload containers (ActionParameters subclasses)
- entity key parameters
- the function's own parameters
"""

from routegen.domain.entities import OperationContext, ParameterDescription
from routegen.domain.enums import BindingSource
from routegen.domain.types import ActionParameters, QueryOptions
from routegen.routing.constants import QUERY_SEPARATOR
from routegen.routing.keys import is_key_parameter

_BUILT_IN_PARAMETER_TYPES: tuple[type, ...] = (QueryOptions, ActionParameters)


def is_built_in_parameter(parameter_type: type) -> bool:
    """Check whether a parameter type is a query options or payload marker."""
    return isinstance(parameter_type, type) and issubclass(
        parameter_type, _BUILT_IN_PARAMETER_TYPES
    )


class QueryStringComposer:
    """Builds the query suffix for one operation context.

    Args:
        context: Operation context to compose the query for.
    """

    def __init__(self, context: OperationContext) -> None:
        self._context = context

    def query_parameters(self) -> list[ParameterDescription]:
        """Return the query-eligible parameter descriptions in caller order."""
        keys = self._context.entity_keys
        operation = self._context.operation if self._context.is_function else None
        selected: list[ParameterDescription] = []

        for description in self._context.parameter_descriptions:
            if description.binding_source != BindingSource.QUERY:
                continue

            parameter_type = description.parameter_type

            if parameter_type is None or is_built_in_parameter(parameter_type):
                continue

            if is_key_parameter(keys, description.name):
                continue

            if operation is not None and operation.has_parameter(description.name):
                continue

            selected.append(description)

        return selected

    def build(self) -> str:
        """Render the query suffix.

        Returns:
            "?a={a}&b={b}", or "" when no parameter qualifies.
        """
        pairs = [
            f"{description.name}={{{description.name}}}"
            for description in self.query_parameters()
        ]

        if not pairs:
            return ""

        return "?" + QUERY_SEPARATOR.join(pairs)
