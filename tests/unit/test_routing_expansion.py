"""Unit tests for token expansion.

Tests cover:
- Server templates never decorate tokens
- Client decoration per type kind (collection, enum, quoted, plain)
- Enum qualification option
- Key-as-segment suppression
- Empty token name precondition
"""

from unittest.mock import MagicMock, patch

import pytest

from routegen.core.config import Settings
from routegen.core.errors import ContractViolationError
from routegen.domain.entities import RouteOptions
from routegen.domain.enums import GenerationKind
from routegen.domain.types import (
    EDM_BINARY,
    EDM_DECIMAL,
    EDM_DURATION,
    EDM_GEOGRAPHY_POINT,
    EDM_GEOMETRY_POLYGON,
    EDM_GUID,
    EDM_INT32,
    EDM_STRING,
    SemanticType,
)
from routegen.routing.expansion import expand_parameter_token
from tests.utils.factories import create_context

COLOR = SemanticType.enum("Sales.Color")


@pytest.fixture
def client_context():
    return create_context(generation_kind=GenerationKind.CLIENT)


@pytest.fixture
def server_context():
    return create_context(generation_kind=GenerationKind.SERVER)


@pytest.mark.unit
class TestServerExpansion:
    """Test server templates are opaque."""

    @pytest.mark.parametrize(
        "semantic_type",
        [EDM_STRING, EDM_INT32, EDM_DURATION, COLOR, SemanticType.collection(EDM_INT32)],
    )
    def test_server_tokens_are_plain(self, server_context, semantic_type):
        """Test no decoration regardless of type."""
        assert expand_parameter_token(server_context, semantic_type, "value") == "{value}"


@pytest.mark.unit
class TestClientExpansion:
    """Test client templates are self-describing."""

    def test_int_is_plain(self, client_context):
        assert expand_parameter_token(client_context, EDM_INT32, "key") == "{key}"

    def test_string_is_quoted(self, client_context):
        assert expand_parameter_token(client_context, EDM_STRING, "key") == "'{key}'"

    def test_duration_has_prefix(self, client_context):
        assert (
            expand_parameter_token(client_context, EDM_DURATION, "span")
            == "duration'{span}'"
        )

    def test_binary_has_prefix(self, client_context):
        assert (
            expand_parameter_token(client_context, EDM_BINARY, "hash")
            == "binary'{hash}'"
        )

    def test_spatial_types_have_prefix(self, client_context):
        """Test geography and geometry shapes use their base prefix."""
        assert (
            expand_parameter_token(client_context, EDM_GEOGRAPHY_POINT, "at")
            == "geography'{at}'"
        )
        assert (
            expand_parameter_token(client_context, EDM_GEOMETRY_POLYGON, "area")
            == "geometry'{area}'"
        )

    @pytest.mark.parametrize("semantic_type", [EDM_DECIMAL, EDM_GUID])
    def test_unregistered_types_are_plain(self, client_context, semantic_type):
        assert expand_parameter_token(client_context, semantic_type, "v") == "{v}"

    def test_collection_is_bracketed_without_element_quotes(self, client_context):
        """Test collections wrap the token only, even of quoted elements."""
        tags = SemanticType.collection(EDM_STRING)

        assert expand_parameter_token(client_context, tags, "tags") == "[{tags}]"

    def test_enum_is_qualified_by_default(self, client_context):
        assert (
            expand_parameter_token(client_context, COLOR, "color")
            == "Sales.Color'{color}'"
        )

    def test_enum_unqualified_when_allowed(self):
        context = create_context(
            generation_kind=GenerationKind.CLIENT,
            options=RouteOptions(allow_unqualified_enum_literal=True),
        )

        assert expand_parameter_token(context, COLOR, "color") == "'{color}'"

    def test_key_as_segment_suppresses_decoration(self, client_context):
        """Test keys rendered as extra segments are never decorated."""
        assert (
            expand_parameter_token(client_context, EDM_STRING, "b", key_as_segment=True)
            == "{b}"
        )


@pytest.mark.unit
class TestTokenNamePrecondition:
    """Test empty token names."""

    def test_empty_name_raises_when_contracts_enabled(self, client_context):
        with patch(
            "routegen.core.contracts.get_settings",
            return_value=Settings(verify_contracts=True),
        ):
            with pytest.raises(ContractViolationError) as exc_info:
                expand_parameter_token(client_context, EDM_STRING, "")

        assert "token name" in str(exc_info.value)

    def test_empty_name_degrades_when_contracts_disabled(self, client_context):
        """Test production behavior: warning logged, token still rendered."""
        mock_logger = MagicMock()
        with (
            patch(
                "routegen.core.contracts.get_settings",
                return_value=Settings(verify_contracts=False),
            ),
            patch("routegen.core.contracts.get_logger", return_value=mock_logger),
        ):
            token = expand_parameter_token(client_context, EDM_STRING, "")

        assert token == "'{}'"
        mock_logger.warning.assert_called_once()
