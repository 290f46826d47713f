"""Unit tests for semantic types and the primitive catalog.

Tests cover:
- SemanticType factories and kind checks
- Collection naming
- Type name resolution (case-insensitive, collections, unknown names)
"""

from datetime import timedelta

import pytest

from routegen.domain.enums import TypeKind
from routegen.domain.types import (
    EDM_DURATION,
    EDM_GEOGRAPHY_POINT,
    EDM_INT32,
    EDM_PRIMITIVES,
    EDM_STRING,
    Geography,
    GeographyPoint,
    SemanticType,
    resolve_type_name,
)


@pytest.mark.unit
class TestSemanticType:
    """Test SemanticType construction."""

    def test_primitive(self):
        duration = SemanticType.primitive("Edm.Duration", timedelta)

        assert duration.kind == TypeKind.PRIMITIVE
        assert duration.python_type is timedelta
        assert not duration.is_collection
        assert not duration.is_enum

    def test_enum(self):
        color = SemanticType.enum("Sales.Color")

        assert color.is_enum
        assert color.python_type is None

    def test_collection(self):
        ids = SemanticType.collection(EDM_INT32)

        assert ids.name == "Collection(Edm.Int32)"
        assert ids.is_collection
        assert ids.python_type is list
        assert ids.element_type == EDM_INT32

    def test_complex_and_entity(self):
        assert SemanticType.complex("Sales.Address").kind == TypeKind.COMPLEX
        assert SemanticType.entity("Sales.Product").kind == TypeKind.ENTITY

    def test_is_immutable(self):
        with pytest.raises(AttributeError):
            EDM_STRING.name = "Edm.Other"  # type: ignore[misc]

    def test_spatial_subclass(self):
        assert issubclass(EDM_GEOGRAPHY_POINT.python_type, Geography)
        assert EDM_GEOGRAPHY_POINT.python_type is GeographyPoint


@pytest.mark.unit
class TestResolveTypeName:
    """Test type name resolution."""

    def test_primitive(self):
        assert resolve_type_name("Edm.Int32") is EDM_INT32

    def test_case_insensitive(self):
        assert resolve_type_name("edm.duration") is EDM_DURATION

    def test_strips_whitespace(self):
        assert resolve_type_name("  Edm.String ") is EDM_STRING

    def test_collection(self):
        assert resolve_type_name("Collection(Edm.String)") == SemanticType.collection(
            EDM_STRING
        )

    def test_unknown(self):
        assert resolve_type_name("Sales.Color") is None

    def test_collection_of_unknown(self):
        assert resolve_type_name("Collection(Sales.Color)") is None

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            EDM_PRIMITIVES["Edm.Custom"] = EDM_STRING  # type: ignore[index]
