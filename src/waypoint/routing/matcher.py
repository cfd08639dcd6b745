"""Path matching — walk the route tree and find the route for a URL.

Routes are tried in declaration order.  A route whose segments all
match but leaves path segments unconsumed recurses into its
``sub_routes``; a failed recursion falls through to the next sibling.
Matching never fails: anything unmatched lands on the ``"404"`` route.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

from waypoint.query import SearchParams
from waypoint.routing.page import RawMatch
from waypoint.routing.pattern import PathSegment, split_path

if TYPE_CHECKING:
    from waypoint.routing.schema import RouteDef, RouteSchema

logger = logging.getLogger("waypoint.routing")

_SLASHES_RE = re.compile(r"/{2,}")


@dataclass(frozen=True, slots=True)
class _Found:
    route: RouteDef
    params: dict[str, str]
    depth: int
    parent_id: str | None


def match_path(schema: RouteSchema, url: str) -> RawMatch:
    """Match a URL (path, optionally with a query string) against *schema*.

    Returns a ``RawMatch`` for the first route that fully matches, the
    ``root`` route for an empty path, or the ``"404"`` route.
    """
    if url.startswith("//"):
        # A bare path, not a scheme-relative URL.
        url = "/" + url.lstrip("/")
    parts = urlsplit(url)
    search_params = SearchParams(parts.query)
    pathname = _SLASHES_RE.sub("/", parts.path or "/")

    local = strip_base_path(pathname, schema.base_path)
    if local is not None:
        segments = split_path(local)
        found: _Found | None = None
        if not segments:
            if schema.root is not None:
                found = _Found(schema.root, {}, 0, None)
        else:
            found = _match_routes(schema.require_routes(), segments, 0, {}, 0, None)

        if found is not None:
            logger.debug("Matched %r to route %r", pathname, found.route.id)
            return RawMatch(
                route=found.route,
                url=search_params.append_to(schema.join("/".join(segments))),
                params=found.params,
                search_params=search_params,
                depth=found.depth,
                parent_id=found.parent_id,
            )

    logger.debug("No route matches %r, using %r", pathname, schema.not_found.id)
    return RawMatch(
        route=schema.not_found,
        url=search_params.append_to(pathname),
        search_params=search_params,
    )


def strip_base_path(pathname: str, base_path: str) -> str | None:
    """Remove *base_path* from *pathname*.

    Returns ``None`` when *pathname* lies outside the base path.
    """
    if not base_path:
        return pathname
    if pathname == base_path:
        return "/"
    if pathname.startswith(f"{base_path}/"):
        return pathname[len(base_path) :]
    return None


def _match_routes(
    routes: tuple[RouteDef, ...],
    segments: list[str],
    offset: int,
    params: dict[str, str],
    depth: int,
    parent_id: str | None,
) -> _Found | None:
    """Recursively match path segments against a level of the route tree."""
    for route in routes:
        bound = _match_segments(route.segments, segments, offset)
        if bound is None:
            continue

        merged = {**params, **bound}
        consumed = offset + len(route.segments)
        if consumed == len(segments):
            return _Found(route, merged, depth, parent_id)

        if route.sub_routes:
            found = _match_routes(route.sub_routes, segments, consumed, merged, depth + 1, route.id)
            if found is not None:
                return found
    return None


def _match_segments(
    pattern: tuple[PathSegment, ...],
    segments: list[str],
    offset: int,
) -> dict[str, str] | None:
    """Match one route's pattern starting at *offset*; return bound params."""
    if offset + len(pattern) > len(segments):
        return None
    bound: dict[str, str] = {}
    for i, segment in enumerate(pattern):
        raw = segments[offset + i]
        if not segment.matches(raw):
            return None
        if segment.is_param and segment.param_name is not None:
            bound[segment.param_name] = segment.bind(raw)
    return bound
