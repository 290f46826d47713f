"""routegen - canonical route template synthesis for API operations.

Converts an immutable description of one API operation (entity set access,
bound operation, unbound operation) into the route template string used for
API documentation and client-code generation.

Usage:
    from routegen import build_route_template

    template = build_route_template(context)
"""

from routegen.routing.builder import (
    RouteTemplateBuilder,
    build_route_template,
    build_route_templates,
)

__all__ = [
    "RouteTemplateBuilder",
    "build_route_template",
    "build_route_templates",
]

__version__ = "0.1.0"
