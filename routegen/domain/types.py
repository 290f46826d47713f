"""Semantic types for operation metadata.

A SemanticType describes the metadata-model type of an entity key or an
operation parameter: its full name, its kind, and the Python type that bound
values take. The builder only looks at the kind (collection, enum) and at the
Python type (for literal quoting prefixes).

Also defined here:
    - Spatial value bases (Geography, Geometry) and their concrete shapes
    - Marker types for parameters that never render in a query string
      (QueryOptions, ActionParameters)
    - EDM_PRIMITIVES: catalog of primitive type names

Usage:
    from routegen.domain.types import EDM_INT32, SemanticType, resolve_type_name

    ids = SemanticType.collection(EDM_INT32)
    ids.name
    # 'Collection(Edm.Int32)'
    resolve_type_name("Collection(Edm.Int32)") == ids
    # True
"""

import io
import uuid
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from types import MappingProxyType
from typing import Self

from routegen.domain.enums import TypeKind


# =============================================================================
# Spatial Value Bases
# =============================================================================


class Geography:
    """Base class for geographic (round-earth) spatial values."""


class GeographyPoint(Geography):
    """Single geographic position."""


class GeographyLineString(Geography):
    """Geographic path of two or more positions."""


class GeographyPolygon(Geography):
    """Geographic closed ring area."""


class Geometry:
    """Base class for geometric (flat-earth) spatial values."""


class GeometryPoint(Geometry):
    """Single geometric position."""


class GeometryLineString(Geometry):
    """Geometric path of two or more positions."""


class GeometryPolygon(Geometry):
    """Geometric closed ring area."""


# =============================================================================
# Marker Types
# =============================================================================


class QueryOptions:
    """Marker for a parameter that receives all query options in bulk.

    Such a parameter is bound from the query string but describes the query
    system itself ($filter, $top, ...), so it never renders as a template
    query parameter.
    """


class ActionParameters(dict):
    """Marker for the payload container of a bound action.

    Values are read from the request body, never the query string.
    """


# =============================================================================
# Semantic Type
# =============================================================================


@dataclass(frozen=True, slots=True, kw_only=True)
class SemanticType:
    """Metadata-model type of a key or parameter.

    Attributes:
        name: Full type name (e.g., "Edm.String", "NS.Color",
            "Collection(Edm.Int32)").
        kind: Type classification.
        python_type: Python type bound values take (None when unknown).
        element_type: Element type of a collection (None otherwise).

    Examples:
        >>> SemanticType.primitive("Edm.Duration", timedelta)
        >>> SemanticType.enum("Sales.Color")
        >>> SemanticType.collection(EDM_STRING)
    """

    name: str
    kind: TypeKind = TypeKind.PRIMITIVE
    python_type: type | None = None
    element_type: "SemanticType | None" = None

    @classmethod
    def primitive(cls, name: str, python_type: type | None) -> Self:
        """Create a primitive type."""
        return cls(name=name, kind=TypeKind.PRIMITIVE, python_type=python_type)

    @classmethod
    def enum(cls, name: str, python_type: type | None = None) -> Self:
        """Create an enum type identified by its full name."""
        return cls(name=name, kind=TypeKind.ENUM, python_type=python_type)

    @classmethod
    def complex(cls, name: str, python_type: type | None = None) -> Self:
        """Create a structured (complex) type."""
        return cls(name=name, kind=TypeKind.COMPLEX, python_type=python_type)

    @classmethod
    def entity(cls, name: str, python_type: type | None = None) -> Self:
        """Create an entity type."""
        return cls(name=name, kind=TypeKind.ENTITY, python_type=python_type)

    @classmethod
    def collection(cls, element_type: "SemanticType") -> Self:
        """Create a collection of element_type."""
        return cls(
            name=f"Collection({element_type.name})",
            kind=TypeKind.COLLECTION,
            python_type=list,
            element_type=element_type,
        )

    @property
    def is_collection(self) -> bool:
        return self.kind == TypeKind.COLLECTION

    @property
    def is_enum(self) -> bool:
        return self.kind == TypeKind.ENUM


# =============================================================================
# EDM Primitive Catalog
# =============================================================================

EDM_STRING = SemanticType.primitive("Edm.String", str)
EDM_BOOLEAN = SemanticType.primitive("Edm.Boolean", bool)
EDM_BYTE = SemanticType.primitive("Edm.Byte", int)
EDM_SBYTE = SemanticType.primitive("Edm.SByte", int)
EDM_INT16 = SemanticType.primitive("Edm.Int16", int)
EDM_INT32 = SemanticType.primitive("Edm.Int32", int)
EDM_INT64 = SemanticType.primitive("Edm.Int64", int)
EDM_SINGLE = SemanticType.primitive("Edm.Single", float)
EDM_DOUBLE = SemanticType.primitive("Edm.Double", float)
EDM_DECIMAL = SemanticType.primitive("Edm.Decimal", Decimal)
EDM_GUID = SemanticType.primitive("Edm.Guid", uuid.UUID)
EDM_DATE = SemanticType.primitive("Edm.Date", date)
EDM_TIME_OF_DAY = SemanticType.primitive("Edm.TimeOfDay", time)
EDM_DATE_TIME_OFFSET = SemanticType.primitive("Edm.DateTimeOffset", datetime)
EDM_DURATION = SemanticType.primitive("Edm.Duration", timedelta)
EDM_BINARY = SemanticType.primitive("Edm.Binary", bytes)
EDM_STREAM = SemanticType.primitive("Edm.Stream", io.IOBase)
EDM_GEOGRAPHY = SemanticType.primitive("Edm.Geography", Geography)
EDM_GEOGRAPHY_POINT = SemanticType.primitive("Edm.GeographyPoint", GeographyPoint)
EDM_GEOGRAPHY_LINE_STRING = SemanticType.primitive(
    "Edm.GeographyLineString", GeographyLineString
)
EDM_GEOGRAPHY_POLYGON = SemanticType.primitive(
    "Edm.GeographyPolygon", GeographyPolygon
)
EDM_GEOMETRY = SemanticType.primitive("Edm.Geometry", Geometry)
EDM_GEOMETRY_POINT = SemanticType.primitive("Edm.GeometryPoint", GeometryPoint)
EDM_GEOMETRY_LINE_STRING = SemanticType.primitive(
    "Edm.GeometryLineString", GeometryLineString
)
EDM_GEOMETRY_POLYGON = SemanticType.primitive("Edm.GeometryPolygon", GeometryPolygon)

EDM_PRIMITIVES: MappingProxyType[str, SemanticType] = MappingProxyType(
    {
        t.name: t
        for t in (
            EDM_STRING,
            EDM_BOOLEAN,
            EDM_BYTE,
            EDM_SBYTE,
            EDM_INT16,
            EDM_INT32,
            EDM_INT64,
            EDM_SINGLE,
            EDM_DOUBLE,
            EDM_DECIMAL,
            EDM_GUID,
            EDM_DATE,
            EDM_TIME_OF_DAY,
            EDM_DATE_TIME_OFFSET,
            EDM_DURATION,
            EDM_BINARY,
            EDM_STREAM,
            EDM_GEOGRAPHY,
            EDM_GEOGRAPHY_POINT,
            EDM_GEOGRAPHY_LINE_STRING,
            EDM_GEOGRAPHY_POLYGON,
            EDM_GEOMETRY,
            EDM_GEOMETRY_POINT,
            EDM_GEOMETRY_LINE_STRING,
            EDM_GEOMETRY_POLYGON,
        )
    }
)

_COLLECTION_PREFIX = "Collection("


def resolve_type_name(name: str) -> SemanticType | None:
    """Resolve a primitive or collection type name.

    Args:
        name: Type name such as "Edm.Int32" or "Collection(Edm.String)".
            Primitive names are matched case-insensitively.

    Returns:
        The SemanticType, or None if the name (or a collection's element
        name) is not in the primitive catalog.

    Example:
        >>> resolve_type_name("edm.duration") is EDM_DURATION
        True
        >>> resolve_type_name("Sales.Color") is None
        True
    """
    name = name.strip()

    if name.startswith(_COLLECTION_PREFIX) and name.endswith(")"):
        element = resolve_type_name(name[len(_COLLECTION_PREFIX) : -1])
        return SemanticType.collection(element) if element is not None else None

    for primitive_name, semantic_type in EDM_PRIMITIVES.items():
        if primitive_name.lower() == name.lower():
            return semantic_type

    return None
