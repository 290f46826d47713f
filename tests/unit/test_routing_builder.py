"""Unit tests for RouteTemplateBuilder.

Tests cover:
- End-to-end templates (path + query) for every action type
- Server vs client templates
- Determinism and per-context isolation
- Logger binding and debug event
- Batch building
"""

from dataclasses import replace
from unittest.mock import MagicMock, patch

import pytest

from routegen import RouteTemplateBuilder, build_route_template, build_route_templates
from routegen.domain.entities import RouteOptions
from routegen.domain.enums import ActionType, GenerationKind, UrlKeyDelimiter
from routegen.domain.types import EDM_INT32, EDM_STRING, SemanticType
from tests.utils.factories import (
    create_context,
    create_entity_set,
    create_operation,
    path_param,
    query_param,
)


def build(**overrides) -> str:
    return build_route_template(create_context(**overrides), MagicMock())


@pytest.mark.unit
class TestEntitySetTemplates:
    """Test entity set access templates."""

    @pytest.mark.parametrize("kind", list(GenerationKind))
    def test_single_int_key(self, kind):
        assert build(generation_kind=kind) == "Products({key})"

    def test_single_string_key_client(self):
        result = build(
            entity_set=create_entity_set(keys=(("id", EDM_STRING),)),
            generation_kind=GenerationKind.CLIENT,
        )

        assert result == "Products('{key}')"

    def test_composite_keys_slash(self):
        result = build(
            entity_set=create_entity_set(
                keys=(("categoryId", EDM_INT32), ("productId", EDM_INT32))
            ),
            url_key_delimiter=UrlKeyDelimiter.SLASH,
            generation_kind=GenerationKind.CLIENT,
            parameter_descriptions=(path_param("categoryId"), path_param("productId")),
        )

        assert result == "Products/{categoryId}/{productId}"

    def test_key_and_query(self):
        result = build(parameter_descriptions=(path_param(), query_param("top")))

        assert result == "Products({key})?top={top}"

    def test_key_parameter_never_in_query(self):
        result = build(
            parameter_descriptions=(path_param(), query_param("top"), query_param("id")),
        )

        assert result == "Products({key})?top={top}"

    def test_untyped_query_parameter_not_rendered(self):
        result = build(parameter_descriptions=(path_param(), query_param("filter", None)))

        assert result == "Products({key})"

    def test_single_key_named_like_property_renders_no_key(self):
        result = build(parameter_descriptions=(path_param("id"),))

        assert result == "Products"

    def test_navigation_with_prefix(self):
        result = build(
            route_prefix="api",
            controller_name="Customers",
            action_name="GetOrdersForCustomer",
            entity_set=create_entity_set(
                name="Customers", navigation_properties=("Orders", "Invoices")
            ),
            parameter_descriptions=(path_param(), query_param("top")),
        )

        assert result == "api/Customers({key})/Orders?top={top}"


@pytest.mark.unit
class TestOperationTemplates:
    """Test bound and unbound operation templates."""

    def test_unbound_function(self):
        result = build(
            controller_name="Reports",
            action_name="GetTopSellers",
            action_type=ActionType.UNBOUND_OPERATION,
            entity_set=None,
            generation_kind=GenerationKind.CLIENT,
            operation=create_operation("GetTopSellers", ("count", EDM_INT32)),
            parameter_descriptions=(query_param("count"),),
        )

        assert result == "GetTopSellers(count={count})"

    @pytest.mark.parametrize(
        "kind,expected",
        [
            (GenerationKind.CLIENT, "Rename(newName='{newName}')"),
            (GenerationKind.SERVER, "Rename(newName={newName})"),
        ],
    )
    def test_unbound_string_parameter(self, kind, expected):
        result = build(
            action_name="Rename",
            action_type=ActionType.UNBOUND_OPERATION,
            entity_set=None,
            generation_kind=kind,
            operation=create_operation("Rename", ("newName", EDM_STRING)),
            parameter_descriptions=(path_param("newName", str),),
        )

        assert result == expected

    def test_unbound_enum_parameter(self):
        result = build(
            action_name="GetByColor",
            action_type=ActionType.UNBOUND_OPERATION,
            entity_set=None,
            generation_kind=GenerationKind.CLIENT,
            operation=create_operation(
                "GetByColor", ("color", SemanticType.enum("Sales.Color"))
            ),
            parameter_descriptions=(),
        )

        assert result == "GetByColor(color=Sales.Color'{color}')"

    def test_bound_function_with_query(self):
        result = build(
            action_name="Rate",
            action_type=ActionType.BOUND_OPERATION,
            options=RouteOptions(use_qualified_operation_names=True),
            operation=create_operation("Rate", ("rating", EDM_INT32), bound=True),
            parameter_descriptions=(
                path_param(),
                path_param("rating"),
                query_param("rating"),
                query_param("culture", str),
            ),
        )

        assert result == "Products({key})/Sales.Rate(rating={rating})?culture={culture}"

    def test_bound_action(self):
        result = build(
            action_name="Rate",
            action_type=ActionType.BOUND_OPERATION,
            operation=create_operation(
                "Rate", ("rating", EDM_INT32), bound=True, is_function=False
            ),
        )

        assert result == "Products({key})/Rate"


@pytest.mark.unit
class TestAttributeRoutedTemplates:
    """Test declared templates."""

    def function_context(self, **overrides):
        defaults = dict(
            is_attribute_routed=True,
            raw_template="GetByIds(ids={ids})",
            action_name="GetByIds",
            action_type=ActionType.UNBOUND_OPERATION,
            entity_set=None,
            generation_kind=GenerationKind.CLIENT,
            operation=create_operation(
                "GetByIds", ("ids", SemanticType.collection(EDM_INT32))
            ),
            parameter_descriptions=(path_param("ids", list),),
        )
        return create_context(**(defaults | overrides))

    def test_client_collection_parameter(self):
        assert build_route_template(self.function_context(), MagicMock()) == (
            "GetByIds(ids=[{ids}])"
        )

    def test_client_collection_parameter_with_prefix(self):
        context = self.function_context(route_prefix="api")

        assert build_route_template(context, MagicMock()) == "api/GetByIds(ids=[{ids}])"

    def test_renamed_collection_parameter(self):
        context = self.function_context(
            raw_template="GetByIds(ids={identifiers})",
            parameter_descriptions=(path_param("ids", list, route_name="identifiers"),),
        )

        assert build_route_template(context, MagicMock()) == (
            "GetByIds(ids=[{identifiers}])"
        )

    @pytest.mark.parametrize(
        "delimiter,expected",
        [
            (UrlKeyDelimiter.PARENTHESES, "Products({key})"),
            (UrlKeyDelimiter.SLASH, "Products/({key})"),
        ],
    )
    def test_parenthesis_template(self, delimiter, expected):
        result = build(
            is_attribute_routed=True,
            controller_route_prefix="Products",
            raw_template="({key})",
            url_key_delimiter=delimiter,
        )

        assert result == expected

    def test_declared_template_gets_query(self):
        result = build(
            is_attribute_routed=True,
            raw_template="Products({key})",
            parameter_descriptions=(path_param(), query_param("top")),
        )

        assert result == "Products({key})?top={top}"


@pytest.mark.unit
class TestRouteTemplateBuilder:
    """Test builder behavior."""

    def test_build_is_deterministic(self):
        context = create_context(parameter_descriptions=(path_param(), query_param("top")))
        builder = RouteTemplateBuilder(context, MagicMock())

        assert builder.build() == builder.build()
        assert build_route_template(replace(context), MagicMock()) == builder.build()

    def test_context_property(self):
        context = create_context()

        assert RouteTemplateBuilder(context, MagicMock()).context is context

    def test_logger_bound_to_controller_and_action(self):
        logger = MagicMock()
        bound = logger.bind.return_value

        template = RouteTemplateBuilder(create_context(), logger).build()

        logger.bind.assert_called_once_with(controller="Products", action="Get")
        bound.debug.assert_any_call(
            "route_template_built",
            action_type="entity_set",
            generation_kind="server",
            attribute_routed=False,
            template=template,
        )

    def test_defaults_to_application_logger(self):
        with patch("routegen.routing.builder.get_logger") as mock_get_logger:
            RouteTemplateBuilder(create_context()).build()

        mock_get_logger.assert_called_once()


@pytest.mark.unit
class TestBuildRouteTemplates:
    """Test batch building."""

    def test_templates_in_input_order(self):
        contexts = [
            create_context(),
            create_context(controller_name="Orders", entity_set=create_entity_set("Orders")),
            create_context(parameter_descriptions=()),
        ]

        assert build_route_templates(contexts, MagicMock()) == [
            "Products({key})",
            "Orders({key})",
            "Products",
        ]

    def test_empty_batch(self):
        assert build_route_templates([], MagicMock()) == []
