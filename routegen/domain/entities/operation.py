"""Operation (function/action) metadata.

Functions are side-effect free and take their arguments in the URL.
Actions are side-effecting and take their arguments in the request payload.
Bound operations declare an implicit receiver parameter named
BINDING_PARAMETER_NAME that never renders in a template.
"""

from dataclasses import dataclass

from routegen.domain.types import SemanticType

BINDING_PARAMETER_NAME = "bindingParameter"


@dataclass(frozen=True, slots=True, kw_only=True)
class OperationParameter:
    """Declared parameter of an operation.

    Attributes:
        name: Parameter name in metadata.
        semantic_type: Metadata type of the parameter.
    """

    name: str
    semantic_type: SemanticType

    @property
    def is_binding_parameter(self) -> bool:
        return self.name == BINDING_PARAMETER_NAME


@dataclass(frozen=True, slots=True, kw_only=True)
class Operation:
    """Function or action declared in the metadata model.

    Attributes:
        name: Short operation name (e.g., "GetTopSellers").
        qualified_name: Namespace-qualified name used when the serving
            configuration requires qualified operation names. Derived from
            namespace and name when omitted.
        namespace: Declaring namespace (e.g., "Sales").
        is_function: True for functions, False for actions.
        parameters: Declared parameters in metadata order, receiver included
            when the operation is bound.
    """

    name: str
    qualified_name: str | None = None
    namespace: str | None = None
    is_function: bool = True
    parameters: tuple[OperationParameter, ...] = ()

    @property
    def full_name(self) -> str:
        """Return the qualified name, deriving it when not declared."""
        if self.qualified_name:
            return self.qualified_name
        if self.namespace:
            return f"{self.namespace}.{self.name}"
        return self.name

    def route_name(self, *, qualified: bool) -> str:
        """Return the name used for the operation path segment."""
        return self.full_name if qualified else self.name

    def declared_parameters(self) -> list[OperationParameter]:
        """Return parameters in metadata order, receiver excluded."""
        return [p for p in self.parameters if not p.is_binding_parameter]

    def has_parameter(self, name: str) -> bool:
        """Check (case-insensitively) whether a parameter is declared."""
        lowered = name.lower()
        return any(p.name.lower() == lowered for p in self.parameters)
