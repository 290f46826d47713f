"""Kind of API operation a route template describes."""

from enum import Enum


class ActionType(str, Enum):
    """Kind of API operation a route template describes.

    Attributes:
        ENTITY_SET: List or access an entity collection (optionally by key,
            optionally through a navigation property).
        BOUND_OPERATION: Invoke an operation bound to an entity or entity set.
        UNBOUND_OPERATION: Invoke an operation imported at the service root.
    """

    ENTITY_SET = "entity_set"
    BOUND_OPERATION = "bound_operation"
    UNBOUND_OPERATION = "unbound_operation"
