"""Enumerate every route as a resolved page object.

Used by build-time tooling (sitemaps, static generation, precaching).
Redirects are not followed, so pure-redirect routes appear too.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from waypoint.routing.page import RawMatch
from waypoint.routing.reverse import build_path, not_found_url

if TYPE_CHECKING:
    from waypoint.config import RouterConfig
    from waypoint.routing.page import PageObject
    from waypoint.routing.resolver import PageResolver
    from waypoint.routing.schema import RouteSchema


def enumerate_pages(
    schema: RouteSchema,
    resolver: PageResolver,
    config: RouterConfig,
) -> list[PageObject]:
    """Resolve every route exactly once.

    Order: the route tree depth-first (each route before its
    ``sub_routes``), then ``root``, then ``"404"``.  Parameterised
    routes keep their placeholder tokens in ``url``.
    """
    matches: list[RawMatch] = []
    for route, ancestors in schema.walk():
        path = build_path((*ancestors, route), {}, config, quiet=True)
        matches.append(
            RawMatch(
                route=route,
                url=schema.join(path),
                depth=len(ancestors),
                parent_id=ancestors[-1].id if ancestors else None,
            )
        )
    if schema.root is not None:
        matches.append(RawMatch(route=schema.root, url=schema.join("")))
    matches.append(RawMatch(route=schema.not_found, url=not_found_url(schema)))

    return [resolver.resolve(match, redirect=False) for match in matches]
