"""Semantic type classification."""

from enum import Enum


class TypeKind(str, Enum):
    """Classification of a semantic (metadata model) type.

    Only COLLECTION and ENUM change how a client-facing token is decorated;
    every other kind goes through the quoting registry.
    """

    PRIMITIVE = "primitive"
    ENUM = "enum"
    COLLECTION = "collection"
    COMPLEX = "complex"
    ENTITY = "entity"
    UNTYPED = "untyped"
