"""Tests for waypoint.cli._resolve — router import resolution."""

import sys
import types
from typing import Any

import pytest

from waypoint.cli._resolve import resolve_router
from waypoint.router import Router
from waypoint.routing.schema import RouteSchema


def _broken_factory() -> Router:
    msg = "no database"
    raise RuntimeError(msg)


@pytest.fixture
def _fake_routes_module(monkeypatch: pytest.MonkeyPatch, schema: dict[str, Any]) -> None:
    """Register a fake module exposing routers and schemas on sys.modules."""
    mod = types.ModuleType("_fake_waypoint_routes")
    mod.router = Router(schema)  # type: ignore[attr-defined]
    mod.SCHEMA = schema  # type: ignore[attr-defined]
    mod.compiled = RouteSchema.from_mapping(schema)  # type: ignore[attr-defined]
    mod.create_router = lambda: Router(schema)  # type: ignore[attr-defined]
    mod.broken = _broken_factory  # type: ignore[attr-defined]
    mod.not_a_router = "just a string"  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_waypoint_routes", mod)


@pytest.mark.usefixtures("_fake_routes_module")
class TestResolveRouter:
    def test_explicit_attribute(self) -> None:
        router = resolve_router("_fake_waypoint_routes:router")
        assert router is sys.modules["_fake_waypoint_routes"].router

    def test_default_attribute(self) -> None:
        """Omitting :attr defaults to 'router'."""
        router = resolve_router("_fake_waypoint_routes")
        assert router is sys.modules["_fake_waypoint_routes"].router

    def test_schema_mapping(self) -> None:
        router = resolve_router("_fake_waypoint_routes:SCHEMA")
        assert isinstance(router, Router)
        assert router.resolve("/about").id == "about"

    def test_compiled_schema(self) -> None:
        router = resolve_router("_fake_waypoint_routes:compiled")
        assert router.schema is sys.modules["_fake_waypoint_routes"].compiled

    def test_factory(self) -> None:
        assert isinstance(resolve_router("_fake_waypoint_routes:create_router"), Router)

    def test_factory_error(self) -> None:
        with pytest.raises(TypeError, match="raised an error"):
            resolve_router("_fake_waypoint_routes:broken")

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_router("nonexistent_module_xyz:router")

    def test_missing_attribute(self) -> None:
        with pytest.raises(AttributeError):
            resolve_router("_fake_waypoint_routes:does_not_exist")

    def test_wrong_type(self) -> None:
        with pytest.raises(TypeError, match="not a waypoint Router or schema"):
            resolve_router("_fake_waypoint_routes:not_a_router")
