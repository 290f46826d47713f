"""Operation context schemas (JSON boundary).

API-description pipelines that run out of process hand operations over as
JSON. These Pydantic models validate that shape and map it to the immutable
domain OperationContext. Defaults for rendering fields come from Settings.

Type references are either a type name or an object:

    "Edm.String"
    "Collection(Edm.Int32)"
    {"name": "Sales.Color", "kind": "enum"}
    {"name": "Collection(Sales.Color)", "kind": "collection",
     "element": {"name": "Sales.Color", "kind": "enum"}}

Parameter descriptions may also name the marker types "QueryOptions" and
"ActionParameters".

Usage:
    from routegen.schemas.operation_context_schemas import parse_operation_context

    match parse_operation_context(payload):
        case Success(value=context):
            template = build_route_template(context)
        case Failure(error=error):
            logger.warning("operation_skipped", error=str(error))
"""

from collections.abc import Mapping
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from routegen.core.config import Settings, get_settings
from routegen.core.container import get_logger
from routegen.core.enums import ErrorCode
from routegen.core.errors import ValidationError
from routegen.core.result import Failure, Result, Success
from routegen.domain.entities import (
    EntityKey,
    EntitySet,
    EntityType,
    Operation,
    OperationContext,
    OperationParameter,
    ParameterDescription,
    RouteOptions,
)
from routegen.domain.enums import (
    ActionType,
    BindingSource,
    GenerationKind,
    TypeKind,
    UrlKeyDelimiter,
)
from routegen.domain.types import (
    ActionParameters,
    QueryOptions,
    SemanticType,
    resolve_type_name,
)

MARKER_TYPES: dict[str, type] = {
    "QueryOptions": QueryOptions,
    "ActionParameters": ActionParameters,
}

UNKNOWN_TYPE_NAME_ERROR = "unknown_type_name"


class _Schema(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


# =============================================================================
# Type References
# =============================================================================


class TypeReferenceSchema(_Schema):
    """Reference to a semantic type by name.

    Attributes:
        name: Type name (catalog primitive, collection, enum or complex name).
        kind: Type kind; omitted for catalog primitives and collections of them.
        element: Element type of a collection with a non-catalog element.
    """

    name: str = Field(min_length=1)
    kind: TypeKind | None = None
    element: "TypeReferenceSchema | None" = None

    @model_validator(mode="before")
    @classmethod
    def from_type_name(cls, data: Any) -> Any:
        """Accept a bare type name in place of the object form."""
        if isinstance(data, str):
            return {"name": data}
        return data

    @model_validator(mode="after")
    def check_resolvable(self) -> Self:
        """Reject names that cannot be turned into a semantic type."""
        if self.kind is None:
            if self.name not in MARKER_TYPES and resolve_type_name(self.name) is None:
                raise PydanticCustomError(
                    UNKNOWN_TYPE_NAME_ERROR,
                    "Unknown type name: {name}",
                    {"name": self.name},
                )
        elif self.kind == TypeKind.COLLECTION:
            if self.element is None and resolve_type_name(self.name) is None:
                raise ValueError(f"Collection type needs an element type: {self.name}")
        return self

    def to_semantic_type(self) -> SemanticType:
        """Map to a domain SemanticType."""
        if self.name in MARKER_TYPES:
            return SemanticType.complex(self.name, MARKER_TYPES[self.name])

        match self.kind:
            case None | TypeKind.PRIMITIVE:
                resolved = resolve_type_name(self.name)
                if resolved is not None:
                    return resolved
                return SemanticType.primitive(self.name, None)
            case TypeKind.COLLECTION:
                if self.element is not None:
                    return SemanticType.collection(self.element.to_semantic_type())
                resolved = resolve_type_name(self.name)
                if resolved is None:
                    raise ValueError(
                        f"Collection type needs an element type: {self.name}"
                    )
                return resolved
            case TypeKind.ENUM:
                return SemanticType.enum(self.name)
            case TypeKind.COMPLEX:
                return SemanticType.complex(self.name)
            case TypeKind.ENTITY:
                return SemanticType.entity(self.name)
            case _:
                return SemanticType(name=self.name, kind=self.kind)

    def to_python_type(self) -> type:
        """Map to the Python type a bound value takes."""
        if self.name in MARKER_TYPES:
            return MARKER_TYPES[self.name]
        return self.to_semantic_type().python_type or object


# =============================================================================
# Metadata
# =============================================================================


class EntityKeySchema(_Schema):
    """Entity key property."""

    name: str = Field(min_length=1)
    type: TypeReferenceSchema

    def to_domain(self) -> EntityKey:
        return EntityKey(name=self.name, semantic_type=self.type.to_semantic_type())


class EntityTypeSchema(_Schema):
    """Entity type shape relevant to routing."""

    name: str = ""
    keys: list[EntityKeySchema] = Field(default_factory=list)
    navigation_properties: list[str] = Field(default_factory=list)

    def to_domain(self) -> EntityType:
        return EntityType(
            name=self.name,
            keys=tuple(key.to_domain() for key in self.keys),
            navigation_properties=tuple(self.navigation_properties),
        )


class EntitySetSchema(_Schema):
    """Named entity collection."""

    name: str = Field(min_length=1)
    entity_type: EntityTypeSchema = Field(default_factory=EntityTypeSchema)

    def to_domain(self) -> EntitySet:
        return EntitySet(name=self.name, entity_type=self.entity_type.to_domain())


class OperationParameterSchema(_Schema):
    """Declared operation parameter."""

    name: str = Field(min_length=1)
    type: TypeReferenceSchema

    def to_domain(self) -> OperationParameter:
        return OperationParameter(
            name=self.name, semantic_type=self.type.to_semantic_type()
        )


class OperationSchema(_Schema):
    """Function or action metadata."""

    name: str = Field(min_length=1)
    qualified_name: str | None = None
    namespace: str | None = None
    is_function: bool = True
    parameters: list[OperationParameterSchema] = Field(default_factory=list)

    def to_domain(self) -> Operation:
        return Operation(
            name=self.name,
            qualified_name=self.qualified_name,
            namespace=self.namespace,
            is_function=self.is_function,
            parameters=tuple(parameter.to_domain() for parameter in self.parameters),
        )


class ParameterDescriptionSchema(_Schema):
    """Described parameter of the implementing action."""

    name: str = Field(min_length=1)
    type: TypeReferenceSchema | None = None
    binding_source: BindingSource = BindingSource.PATH
    route_name: str | None = None

    def to_domain(self) -> ParameterDescription:
        return ParameterDescription(
            name=self.name,
            parameter_type=self.type.to_python_type() if self.type else None,
            binding_source=self.binding_source,
            route_name=self.route_name,
        )


class RouteOptionsSchema(_Schema):
    """Naming options; omitted values fall back to Settings."""

    use_qualified_operation_names: bool | None = None
    allow_unqualified_enum_literal: bool | None = None

    def to_domain(self, settings: Settings) -> RouteOptions:
        return RouteOptions(
            use_qualified_operation_names=(
                settings.use_qualified_operation_names
                if self.use_qualified_operation_names is None
                else self.use_qualified_operation_names
            ),
            allow_unqualified_enum_literal=(
                settings.allow_unqualified_enum_literal
                if self.allow_unqualified_enum_literal is None
                else self.allow_unqualified_enum_literal
            ),
        )


# =============================================================================
# Operation Context
# =============================================================================


class OperationContextSchema(_Schema):
    """JSON shape of an OperationContext.

    Rendering fields left out (url_key_delimiter, generation_kind, options)
    take their values from Settings.
    """

    route_prefix: str | None = None
    controller_route_prefix: str | None = None
    is_attribute_routed: bool = False
    raw_template: str | None = None

    controller_name: str
    action_name: str
    action_type: ActionType

    url_key_delimiter: UrlKeyDelimiter | None = None
    generation_kind: GenerationKind | None = None
    options: RouteOptionsSchema = Field(default_factory=RouteOptionsSchema)

    entity_set: EntitySetSchema | None = None
    operation: OperationSchema | None = None
    parameter_descriptions: list[ParameterDescriptionSchema] = Field(
        default_factory=list
    )

    @model_validator(mode="after")
    def check_operation_present(self) -> Self:
        """Operation routes need operation metadata."""
        if self.action_type != ActionType.ENTITY_SET and self.operation is None:
            raise ValueError(f"{self.action_type.value} requires an operation")
        return self

    def to_domain(self, settings: Settings | None = None) -> OperationContext:
        """Map to the domain OperationContext.

        Args:
            settings: Settings providing rendering defaults (defaults to the
                cached application settings).

        Returns:
            The immutable operation context.
        """
        settings = settings or get_settings()
        return OperationContext(
            route_prefix=self.route_prefix,
            controller_route_prefix=self.controller_route_prefix,
            is_attribute_routed=self.is_attribute_routed,
            raw_template=self.raw_template,
            controller_name=self.controller_name,
            action_name=self.action_name,
            action_type=self.action_type,
            url_key_delimiter=self.url_key_delimiter
            or settings.default_url_key_delimiter,
            generation_kind=self.generation_kind or settings.default_generation_kind,
            options=self.options.to_domain(settings),
            entity_set=self.entity_set.to_domain() if self.entity_set else None,
            operation=self.operation.to_domain() if self.operation else None,
            parameter_descriptions=tuple(
                description.to_domain() for description in self.parameter_descriptions
            ),
        )


def parse_operation_context(
    payload: Mapping[str, Any],
    settings: Settings | None = None,
) -> Result[OperationContext, ValidationError]:
    """Validate a JSON-shaped operation description.

    Never raises for bad input: validation problems come back as a Failure
    carrying the first error's location and message. Unresolvable type
    names get their own error code so callers can report missing metadata
    types separately.

    Args:
        payload: Decoded JSON object.
        settings: Settings providing rendering defaults.

    Returns:
        Success with the OperationContext, or Failure with a ValidationError.
    """
    try:
        schema = OperationContextSchema.model_validate(payload)
    except PydanticValidationError as exc:
        errors = exc.errors()
        first = errors[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        code = (
            ErrorCode.UNKNOWN_TYPE_NAME
            if first["type"] == UNKNOWN_TYPE_NAME_ERROR
            else ErrorCode.INVALID_OPERATION_CONTEXT
        )
        error = ValidationError(
            code=code,
            message=first["msg"],
            field=field,
            details={"error_count": str(len(errors))},
        )
        get_logger().warning(
            "operation_context_invalid",
            field=field,
            reason=first["msg"],
            error_count=len(errors),
        )
        return Failure(error=error)

    return Success(value=schema.to_domain(settings))
