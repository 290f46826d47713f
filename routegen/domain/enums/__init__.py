"""Domain enums for route template synthesis.

Available Enums:
    - ActionType: Entity set access, bound operation, unbound operation
    - BindingSource: Where a parameter value comes from (path, query, body)
    - GenerationKind: Template audience (server runtime or client generator)
    - TypeKind: Semantic type classification (primitive, enum, collection, ...)
    - UrlKeyDelimiter: Key rendering style (parentheses or path segments)
"""

from routegen.domain.enums.action_type import ActionType
from routegen.domain.enums.binding_source import BindingSource
from routegen.domain.enums.generation_kind import GenerationKind
from routegen.domain.enums.type_kind import TypeKind
from routegen.domain.enums.url_key_delimiter import UrlKeyDelimiter

__all__ = [
    "ActionType",
    "BindingSource",
    "GenerationKind",
    "TypeKind",
    "UrlKeyDelimiter",
]
