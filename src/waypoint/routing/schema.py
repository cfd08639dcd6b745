"""Route schema model — frozen route definitions compiled from a mapping.

The authored schema is a plain nested mapping.  ``RouteSchema.from_mapping``
validates it and compiles every route into an immutable ``RouteDef``
with its pattern parsed and its properties wrapped as
``Static``/``Computed`` values.  Nothing mutates a schema after that.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from waypoint.errors import ConfigurationError
from waypoint.routing.pattern import PathSegment, parse_pattern
from waypoint.routing.validation import NOT_FOUND_KEY, validate_schema
from waypoint.routing.values import PropertyValue, Static, wrap_all

_EMPTY: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class RouteDef:
    """A compiled route definition.

    Attributes:
        id: Unique id across the whole schema.
        pattern: The authored pattern (``None`` for ``root`` and ``"404"``).
        segments: Parsed pattern segments.
        properties: Authored properties (everything but ``sub_routes``),
            wrapped as ``Static``/``Computed``.
        raw: Authored properties as written, handed to computed values.
        sub_routes: Nested routes, in declaration order.
        key_path: Dotted location in the schema, for messages.
    """

    id: str
    pattern: str | None
    segments: tuple[PathSegment, ...] = ()
    properties: Mapping[str, PropertyValue] = _EMPTY
    raw: Mapping[str, Any] = _EMPTY
    sub_routes: tuple[RouteDef, ...] = ()
    key_path: str = "schema"

    @property
    def template(self) -> str | None:
        value = self.properties.get("template")
        if isinstance(value, Static):
            return value.value
        return None

    @property
    def is_static(self) -> bool:
        """True if the pattern has no parameter or wildcard segments."""
        return all(not segment.is_param and segment.regex is None for segment in self.segments)


@dataclass(frozen=True, slots=True)
class RouteSchema:
    """The immutable, compiled route schema.

    Build from an authored mapping::

        schema = RouteSchema.from_mapping(
            {
                "root": {"id": "home"},
                "routes": {"users/:id": {"id": "user"}},
                "404": {"id": "not-found", "path": "404"},
            }
        )
    """

    routes: tuple[RouteDef, ...]
    not_found: RouteDef
    root: RouteDef | None = None
    default: Mapping[str, PropertyValue] = _EMPTY
    templates: Mapping[str, Mapping[str, PropertyValue]] = _EMPTY
    base_path: str = ""

    @classmethod
    def from_mapping(cls, schema: Mapping[str, Any]) -> RouteSchema:
        """Validate *schema* and compile it.

        Raises ``SchemaError`` if the mapping is malformed.
        """
        validate_schema(schema)
        root = None
        if "root" in schema:
            root = _compile_route(schema["root"], None, "schema.root")
        templates = {
            name: MappingProxyType(wrap_all(template))
            for name, template in schema.get("templates", {}).items()
        }
        return cls(
            routes=_compile_routes(schema["routes"], "schema.routes"),
            not_found=_compile_route(schema[NOT_FOUND_KEY], None, "schema.404"),
            root=root,
            default=MappingProxyType(wrap_all(schema.get("default", {}))),
            templates=MappingProxyType(templates),
            base_path=normalize_base_path(schema.get("base_path", False)),
        )

    def require_routes(self) -> tuple[RouteDef, ...]:
        """Return the top-level routes, raising ``ConfigurationError`` if absent."""
        if self.routes is None:
            msg = "Route schema has no 'routes'."
            raise ConfigurationError(msg)
        return self.routes

    def walk(self) -> Iterator[tuple[RouteDef, tuple[RouteDef, ...]]]:
        """Yield every route in ``routes`` depth-first, parents first.

        Each item is ``(route, ancestors)`` with ancestors ordered from
        the top level down.  ``root`` and ``"404"`` are not included.
        """
        yield from _walk(self.require_routes(), ())

    def find(self, route_id: str) -> tuple[RouteDef, tuple[RouteDef, ...]] | None:
        """Look up a route by id.

        ``root`` and ``"404"`` take precedence over the route tree.
        """
        if self.root is not None and self.root.id == route_id:
            return self.root, ()
        if self.not_found.id == route_id:
            return self.not_found, ()
        for route, ancestors in self.walk():
            if route.id == route_id:
                return route, ancestors
        return None

    def join(self, path: str) -> str:
        """Prefix an app-local path with the base path."""
        return f"{self.base_path}/{path.lstrip('/')}"


def normalize_base_path(base_path: str | bool | None) -> str:
    """``"/app/"`` -> ``"/app"``; falsy or ``"/"`` -> ``""``."""
    if not base_path:
        return ""
    stripped = str(base_path).strip("/")
    return f"/{stripped}" if stripped else ""


def _walk(
    routes: tuple[RouteDef, ...],
    ancestors: tuple[RouteDef, ...],
) -> Iterator[tuple[RouteDef, tuple[RouteDef, ...]]]:
    for route in routes:
        yield route, ancestors
        if route.sub_routes:
            yield from _walk(route.sub_routes, (*ancestors, route))


def _compile_routes(routes: Mapping[str, Any], key_path: str) -> tuple[RouteDef, ...]:
    return tuple(
        _compile_route(route, pattern, f"{key_path}.{pattern}")
        for pattern, route in routes.items()
    )


def _compile_route(node: Mapping[str, Any], pattern: str | None, key_path: str) -> RouteDef:
    raw = {name: value for name, value in node.items() if name != "sub_routes"}
    sub_routes: tuple[RouteDef, ...] = ()
    if "sub_routes" in node:
        sub_routes = _compile_routes(node["sub_routes"], f"{key_path}.sub_routes")
    return RouteDef(
        id=node["id"],
        pattern=pattern,
        segments=parse_pattern(pattern, key_path) if pattern is not None else (),
        properties=MappingProxyType(wrap_all(raw)),
        raw=MappingProxyType(raw),
        sub_routes=sub_routes,
        key_path=key_path,
    )
