"""Waypoint — declarative route schemas resolved to page objects.

Match a URL against a nested route schema and get back a fully merged
page object; or go the other way and build a URL from a page id.

Basic usage::

    from waypoint import Router

    router = Router(
        {
            "root": {"id": "home"},
            "routes": {"users/:id": {"id": "user"}},
            "404": {"id": "not-found", "path": "404"},
        }
    )

    router.resolve("/users/42").params   # {"id": "42"}
    router.resolve_id("user", params={"id": 7}).url   # "/users/7"

Navigation (headless history + listeners)::

    from waypoint import MemoryHistory, Navigator

    nav = Navigator(router, MemoryHistory("/"))
    nav.navigate("/users/42")
"""

__version__ = "0.1.0-dev"
__all__ = [
    "ComputedValueError",
    "ConfigurationError",
    "Link",
    "MemoryHistory",
    "MissingParamError",
    "Navigator",
    "PageChangeEvent",
    "PageObject",
    "ParamValueError",
    "RedirectCycleError",
    "RedirectError",
    "RouteSchema",
    "Router",
    "RouterConfig",
    "SchemaError",
    "SearchParams",
    "UnknownIdError",
    "WaypointError",
    "default_script",
    "default_title",
    "validate_schema",
]

_ERRORS = frozenset(
    {
        "ComputedValueError",
        "ConfigurationError",
        "MissingParamError",
        "ParamValueError",
        "RedirectCycleError",
        "RedirectError",
        "SchemaError",
        "UnknownIdError",
        "WaypointError",
    }
)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import waypoint`` fast while providing a clean top-level API.
    """
    if name == "Router":
        from waypoint.router import Router

        return Router

    if name == "RouterConfig":
        from waypoint.config import RouterConfig

        return RouterConfig

    if name == "RouteSchema":
        from waypoint.routing.schema import RouteSchema

        return RouteSchema

    if name == "PageObject":
        from waypoint.routing.page import PageObject

        return PageObject

    if name == "SearchParams":
        from waypoint.query import SearchParams

        return SearchParams

    if name == "validate_schema":
        from waypoint.routing.validation import validate_schema

        return validate_schema

    if name in ("Link", "MemoryHistory", "Navigator", "PageChangeEvent"):
        from waypoint import navigation as _navigation

        return getattr(_navigation, name)

    if name in ("default_script", "default_title"):
        from waypoint import defaults as _defaults

        return getattr(_defaults, name)

    if name in _ERRORS:
        from waypoint import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
