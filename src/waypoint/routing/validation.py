"""Schema validation — reject malformed route schemas before any resolution.

Walks the authored mapping in a fixed order (``"404"``, ``root``,
``default``, ``templates``, then ``routes`` recursively) and raises a
single ``SchemaError`` on the first violation.  Validation never
collects multiple errors.

Usage::

    validate_schema(
        {
            "routes": {"users/:id": {"id": "user"}},
            "404": {"id": "not-found"},
        }
    )
"""

from collections.abc import Mapping
from typing import Any

from waypoint.errors import SchemaError
from waypoint.routing.page import RESERVED_NAMES
from waypoint.routing.pattern import parse_pattern

NOT_FOUND_KEY = "404"


def validate_schema(schema: Any) -> None:
    """Validate an authored route schema.

    Raises ``SchemaError`` naming the key path of the first offending
    node.
    """
    if not isinstance(schema, Mapping):
        msg = f"route schema must be a mapping, got {type(schema).__name__}"
        raise SchemaError(msg, "schema")
    if NOT_FOUND_KEY not in schema:
        msg = "route schema must have a '404' route"
        raise SchemaError(msg, "schema")
    if "routes" not in schema:
        msg = "route schema must have a 'routes' property"
        raise SchemaError(msg, "schema")

    base_path = schema.get("base_path", False)
    if base_path is not False and not isinstance(base_path, str):
        msg = f"base_path must be a string or False, got {type(base_path).__name__}"
        raise SchemaError(msg, "schema.base_path")

    seen: set[str] = set()

    _validate_node(schema[NOT_FOUND_KEY], "schema.404", seen, nesting=False)
    path = schema[NOT_FOUND_KEY].get("path")
    if path is not None and not isinstance(path, str):
        msg = f"path must be a string, got {type(path).__name__}"
        raise SchemaError(msg, "schema.404.path")

    if "root" in schema:
        _validate_node(schema["root"], "schema.root", seen, nesting=False)

    if "default" in schema:
        _validate_node(schema["default"], "schema.default", seen, nesting=False, template=True)

    if "templates" in schema:
        templates = schema["templates"]
        if not isinstance(templates, Mapping):
            msg = f"templates must be a mapping, got {type(templates).__name__}"
            raise SchemaError(msg, "schema.templates")
        for name, template in templates.items():
            _validate_node(
                template, f"schema.templates.{name}", seen, nesting=False, template=True
            )

    _validate_routes(schema["routes"], "schema.routes", seen)


def _validate_routes(routes: Any, key_path: str, seen: set[str]) -> None:
    """Validate a ``routes`` / ``sub_routes`` mapping and recurse into it."""
    if not isinstance(routes, Mapping):
        msg = f"routes must be a mapping of pattern -> route, got {type(routes).__name__}"
        raise SchemaError(msg, key_path)
    for pattern, route in routes.items():
        node_path = f"{key_path}.{pattern}"
        if not isinstance(pattern, str):
            msg = f"route pattern must be a string, got {type(pattern).__name__}"
            raise SchemaError(msg, node_path)
        parse_pattern(pattern, node_path)
        _validate_node(route, node_path, seen, nesting=True)
        if "sub_routes" in route:
            _validate_routes(route["sub_routes"], f"{node_path}.sub_routes", seen)


def _validate_node(
    node: Any,
    key_path: str,
    seen: set[str],
    *,
    nesting: bool,
    template: bool = False,
) -> None:
    """Run the per-node checks, in order, for a route or template."""
    if not isinstance(node, Mapping):
        msg = f"must be a mapping, got {type(node).__name__}"
        raise SchemaError(msg, key_path)

    if not template:
        if "id" not in node:
            msg = "route has no 'id'"
            raise SchemaError(msg, key_path)
        route_id = node["id"]
        if not isinstance(route_id, str) or not route_id:
            msg = f"id must be a non-empty string, got {route_id!r}"
            raise SchemaError(msg, key_path)
        if route_id in seen:
            msg = f"duplicate id {route_id!r}"
            raise SchemaError(msg, key_path)
        seen.add(route_id)

    if "sub_routes" in node and not nesting:
        msg = "'sub_routes' is not allowed here"
        raise SchemaError(msg, key_path)

    if template and "templates" in node:
        msg = "templates cannot be nested"
        raise SchemaError(msg, key_path)

    redirect = node.get("redirect")
    if redirect and not _is_redirect_declaration(redirect):
        msg = (
            "redirect must be a path string, a mapping with an 'id', "
            f"or a callable, got {redirect!r}"
        )
        raise SchemaError(msg, f"{key_path}.redirect")

    reserved = RESERVED_NAMES.intersection(node)
    if reserved:
        names = ", ".join(sorted(reserved))
        msg = f"reserved property names cannot be set in a schema: {names}"
        raise SchemaError(msg, key_path)

    if "template" in node and not isinstance(node["template"], str):
        msg = f"template must name a template, got {node['template']!r}"
        raise SchemaError(msg, f"{key_path}.template")


def _is_redirect_declaration(value: Any) -> bool:
    if isinstance(value, str) or callable(value):
        return True
    return isinstance(value, Mapping) and "id" in value
