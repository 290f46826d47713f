"""Operation metadata entities.

Immutable model handed to the builder by the API-description pipeline.

Available Entities:
    - EntityKey, EntityType, EntitySet: Entity collection metadata
    - Operation, OperationParameter: Function/action metadata
    - ParameterDescription: One described parameter of the implementing action
    - RouteOptions: Naming options of the serving configuration
    - OperationContext: Everything needed to build one route template
"""

from routegen.domain.entities.entity_set import EntityKey, EntitySet, EntityType
from routegen.domain.entities.operation import (
    BINDING_PARAMETER_NAME,
    Operation,
    OperationParameter,
)
from routegen.domain.entities.operation_context import (
    OperationContext,
    ParameterDescription,
    RouteOptions,
)

__all__ = [
    "BINDING_PARAMETER_NAME",
    "EntityKey",
    "EntitySet",
    "EntityType",
    "Operation",
    "OperationContext",
    "OperationParameter",
    "ParameterDescription",
    "RouteOptions",
]
