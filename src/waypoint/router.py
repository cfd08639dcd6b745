"""Router — the resolution engine bound to one schema.

A ``Router`` is an explicit context object: build one per schema and
pass it to whatever needs it.  Instances share no state, so any number
of them can coexist.

Usage::

    router = Router(
        {
            "root": {"id": "home"},
            "routes": {
                "users/:id": {
                    "id": "user",
                    "sub_routes": {"profile": {"id": "profile"}},
                },
            },
            "404": {"id": "not-found", "path": "404"},
        }
    )
    router.resolve("/users/42").params        # {"id": "42"}
    router.resolve_id("profile", params={"id": 42}).url  # "/users/42/profile"
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from waypoint.config import RouterConfig
from waypoint.routing.enumerate import enumerate_pages
from waypoint.routing.matcher import match_path
from waypoint.routing.page import PageObject, RawMatch
from waypoint.routing.resolver import PageResolver
from waypoint.routing.reverse import match_id
from waypoint.routing.schema import RouteDef, RouteSchema


class Router:
    """Resolves URLs and page ids against a validated route schema."""

    __slots__ = ("_config", "_resolver", "_schema")

    def __init__(
        self,
        schema: RouteSchema | Mapping[str, Any],
        config: RouterConfig | None = None,
    ) -> None:
        if not isinstance(schema, RouteSchema):
            schema = RouteSchema.from_mapping(schema)
        self._schema = schema
        self._config = config or RouterConfig()
        self._resolver = PageResolver(self._schema, self._config)

    def __repr__(self) -> str:
        return f"Router(routes={len(self.routes)}, base_path={self._schema.base_path!r})"

    @property
    def schema(self) -> RouteSchema:
        return self._schema

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def routes(self) -> list[tuple[RouteDef, tuple[RouteDef, ...]]]:
        """Every route in the tree as ``(route, ancestors)``, parents first."""
        return list(self._schema.walk())

    def match(self, url: str) -> RawMatch:
        """Find the route for *url* without resolving it."""
        return match_path(self._schema, url)

    def resolve(self, url: str, *, redirect: bool = True) -> PageObject:
        """Resolve a URL to its page object.

        Never raises for an unknown path (the ``"404"`` page is returned).
        Raises ``RedirectError`` for a malformed redirect and
        ``RedirectCycleError`` for a looping or overlong chain.
        """
        return self._resolver.resolve(self.match(url), redirect=redirect)

    def resolve_id(
        self,
        route_id: str,
        *,
        params: Mapping[str, Any] | None = None,
        strict: bool | None = None,
        page_404: bool = False,
        search_params: Mapping[str, Any] | None = None,
        redirect: bool = True,
    ) -> PageObject | None:
        """Resolve a page id to its page object, synthesizing its URL.

        Args:
            route_id: The ``id`` of the route to resolve.
            params: Values for the path parameters of the route and its
                ancestors.  Values are percent-encoded.
            strict: Raise ``UnknownIdError``/``MissingParamError`` instead
                of returning ``None`` or keeping placeholders.  Defaults to
                ``RouterConfig.strict_ids``.
            page_404: Return the ``"404"`` page for an unknown id.
            search_params: Query string values appended to the URL.
            redirect: Follow the route's redirect, if any.

        Returns:
            The resolved page, or ``None`` for an unknown id in lenient mode.
        """
        if strict is None:
            strict = self._config.strict_ids
        match = match_id(
            self._schema,
            self._config,
            route_id,
            params=params,
            strict=strict,
            page_404=page_404,
            search_params=search_params,
        )
        if match is None:
            return None
        return self._resolver.resolve(match, redirect=redirect)

    def resolve_all(self) -> list[PageObject]:
        """Resolve every route (tree, then ``root``, then ``"404"``) without redirects."""
        return enumerate_pages(self._schema, self._resolver, self._config)
