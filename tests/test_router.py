"""Tests for waypoint.router — the Router context object."""

from typing import Any

import pytest

from waypoint.config import RouterConfig
from waypoint.errors import SchemaError
from waypoint.router import Router
from waypoint.routing.page import PageObject
from waypoint.routing.schema import RouteSchema


class TestConstruction:
    def test_from_mapping(self, schema: dict[str, Any]) -> None:
        router = Router(schema)
        assert isinstance(router.schema, RouteSchema)
        assert router.config == RouterConfig()

    def test_from_compiled_schema(self, schema: dict[str, Any]) -> None:
        compiled = RouteSchema.from_mapping(schema)
        router = Router(compiled)
        assert router.schema is compiled

    def test_invalid_schema_aborts(self) -> None:
        with pytest.raises(SchemaError):
            Router({"routes": {}})

    def test_custom_config(self, schema: dict[str, Any]) -> None:
        config = RouterConfig(max_redirects=3)
        assert Router(schema, config).config is config

    def test_repr(self, router: Router) -> None:
        assert repr(router) == "Router(routes=7, base_path='')"

    def test_routes(self, router: Router) -> None:
        assert [route.id for route, _ in router.routes][:3] == ["about", "user", "profile"]


class TestIndependence:
    def test_multiple_instances_are_independent(self, schema: dict[str, Any]) -> None:
        first = Router(schema)
        second = Router(
            {
                "routes": {"about": {"id": "about-v2", "title": "Other"}},
                "404": {"id": "missing"},
            }
        )
        assert first.resolve("/about").id == "about"
        assert second.resolve("/about").id == "about-v2"
        assert first.resolve("/nope").id == "not-found"
        assert second.resolve("/nope").id == "missing"

    def test_same_schema_twice(self, schema: dict[str, Any]) -> None:
        assert Router(schema).resolve("/about") == Router(schema).resolve("/about")


class TestPageObjects:
    def test_idempotent(self, router: Router) -> None:
        first = router.resolve("/users/42/posts/x?y=1")
        second = router.resolve("/users/42/posts/x?y=1")
        assert first == second
        assert first is not second

    def test_mapping_access(self, router: Router) -> None:
        page = router.resolve("/about")
        assert isinstance(page, PageObject)
        assert page["title"] == "About us"
        assert page.get("missing") is None
        assert "layout" in page

    def test_immutable(self, router: Router) -> None:
        page = router.resolve("/about")
        with pytest.raises(AttributeError):
            page.title = "x"  # type: ignore[attr-defined]
        with pytest.raises(TypeError):
            page["title"] = "x"  # type: ignore[index]

    def test_evolve(self, router: Router) -> None:
        page = router.resolve("/about")
        changed = page.evolve(title="Changed")
        assert changed["title"] == "Changed"
        assert page["title"] == "About us"

    def test_repr(self, router: Router) -> None:
        assert repr(router.resolve("/about")) == "PageObject(id='about', url='/about')"

    def test_match_then_resolve(self, router: Router) -> None:
        match = router.match("/users/1")
        assert match.route.id == "user"
        assert match.params == {"id": "1"}
