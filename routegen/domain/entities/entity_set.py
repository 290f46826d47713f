"""Entity set metadata.

An entity set is a named, browsable collection of entities. Its entity type
declares the ordered key properties (used for the key segment) and the
ordered navigation properties (used for the navigation suffix).
"""

from dataclasses import dataclass, field

from routegen.domain.types import SemanticType


@dataclass(frozen=True, slots=True, kw_only=True)
class EntityKey:
    """One key property of an entity type.

    Attributes:
        name: Key property name (e.g., "id", "categoryId").
        semantic_type: Metadata type of the key.
    """

    name: str
    semantic_type: SemanticType


@dataclass(frozen=True, slots=True, kw_only=True)
class EntityType:
    """Entity type shape relevant to routing.

    Attributes:
        name: Full entity type name.
        keys: Key properties in declared order.
        navigation_properties: Navigation property names in declared order.
    """

    name: str = ""
    keys: tuple[EntityKey, ...] = ()
    navigation_properties: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True, kw_only=True)
class EntitySet:
    """Named entity collection.

    Attributes:
        name: Entity set name (e.g., "Products").
        entity_type: Type of the entities in the set.
    """

    name: str
    entity_type: EntityType = field(default_factory=EntityType)
