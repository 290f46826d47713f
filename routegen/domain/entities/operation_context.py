"""Operation context - the single input of a route template build.

The API-description pipeline constructs one OperationContext per documented
operation. The builder consumes it exactly once and produces one template.
Identical contexts always produce identical templates.

Usage:
    from routegen.domain.entities import OperationContext, ParameterDescription
    from routegen.domain.enums import ActionType, BindingSource

    context = OperationContext(
        controller_name="Products",
        action_name="Get",
        action_type=ActionType.ENTITY_SET,
        entity_set=products,
        parameter_descriptions=(
            ParameterDescription(name="key", parameter_type=int, binding_source=BindingSource.PATH),
        ),
    )
"""

from dataclasses import dataclass, field

from routegen.domain.entities.entity_set import EntityKey, EntitySet
from routegen.domain.entities.operation import Operation
from routegen.domain.enums import (
    ActionType,
    BindingSource,
    GenerationKind,
    UrlKeyDelimiter,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class ParameterDescription:
    """Described parameter of the action implementing an operation.

    Attributes:
        name: Parameter name as described by the pipeline.
        parameter_type: Python type the value binds to (None when unknown).
        binding_source: Where the value is bound from.
        route_name: Route-level parameter name when the caller renamed the
            parameter; defaults to name.
    """

    name: str
    parameter_type: type | None = None
    binding_source: BindingSource = BindingSource.PATH
    route_name: str | None = None

    @property
    def route_parameter_name(self) -> str:
        return self.route_name or self.name


@dataclass(frozen=True, slots=True, kw_only=True)
class RouteOptions:
    """Naming options of the serving configuration.

    Attributes:
        use_qualified_operation_names: Render bound operations by their
            namespace-qualified name.
        allow_unqualified_enum_literal: Omit the enum type name in front of
            quoted enum tokens.
    """

    use_qualified_operation_names: bool = False
    allow_unqualified_enum_literal: bool = False


@dataclass(frozen=True, slots=True, kw_only=True)
class OperationContext:
    """Everything needed to build one route template.

    Routing fields:
        route_prefix: Raw configured route prefix (may carry slashes and
            inline route constraints).
        controller_route_prefix: Controller-level prefix declared next to
            attribute routes.
        is_attribute_routed: Whether the template was declared explicitly.
        raw_template: Declared template (attribute-routed only).

    Action fields:
        controller_name: Controller (entity set) name.
        action_name: Implementing action name.
        action_type: Entity set access, bound or unbound operation.

    Rendering fields:
        url_key_delimiter: Parentheses or slash key style.
        generation_kind: Server (opaque) or client (decorated) tokens.
        options: Naming options.

    Metadata:
        entity_set: Entity set the action serves (None for unbound operations).
        operation: Function/action metadata (None for entity set access).
        parameter_descriptions: Described parameters, caller order.
    """

    # Routing
    route_prefix: str | None = None
    controller_route_prefix: str | None = None
    is_attribute_routed: bool = False
    raw_template: str | None = None

    # Action
    controller_name: str
    action_name: str
    action_type: ActionType

    # Rendering
    url_key_delimiter: UrlKeyDelimiter = UrlKeyDelimiter.PARENTHESES
    generation_kind: GenerationKind = GenerationKind.SERVER
    options: RouteOptions = field(default_factory=RouteOptions)

    # Metadata
    entity_set: EntitySet | None = None
    operation: Operation | None = None
    parameter_descriptions: tuple[ParameterDescription, ...] = ()

    @property
    def entity_keys(self) -> tuple[EntityKey, ...]:
        """Key properties of the entity set's type (empty without one)."""
        if self.entity_set is None:
            return ()
        return tuple(self.entity_set.entity_type.keys)

    @property
    def is_function(self) -> bool:
        """Whether the context targets a function (not an action)."""
        return self.operation is not None and self.operation.is_function

    def find_parameter_description(self, name: str) -> ParameterDescription | None:
        """Find a described parameter by name (case-insensitive, first wins).

        Args:
            name: Metadata parameter name.

        Returns:
            The first matching description, or None.
        """
        lowered = name.lower()
        for description in self.parameter_descriptions:
            if description.name.lower() == lowered:
                return description
        return None

    def route_parameter_name(self, name: str) -> str:
        """Map a metadata parameter name to the caller's route-level name.

        Args:
            name: Metadata parameter name.

        Returns:
            The route-level name of the matching description, or name itself
            when no description matches.
        """
        description = self.find_parameter_description(name)
        if description is None:
            return name
        return description.route_parameter_name
