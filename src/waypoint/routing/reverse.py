"""Reverse resolution — build a URL from a route id and parameters.

The URL is rebuilt from the top of the route tree down: every
ancestor's pattern and the route's own pattern have their parameter
segments replaced by percent-encoded values from ``params``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from waypoint.errors import MissingParamError, ParamValueError, UnknownIdError
from waypoint.query import SearchParams
from waypoint.routing.page import RawMatch
from waypoint.routing.values import Static

if TYPE_CHECKING:
    from waypoint.config import RouterConfig
    from waypoint.routing.schema import RouteDef, RouteSchema

logger = logging.getLogger("waypoint.routing")


def build_path(
    chain: Sequence[RouteDef],
    params: Mapping[str, Any],
    config: RouterConfig,
    *,
    strict: bool = False,
    quiet: bool = False,
) -> str:
    """Substitute *params* into the patterns of *chain* and join them.

    *chain* runs from the top-level ancestor to the target route.  The
    returned path is app-local (no base path) and starts with ``/``.

    Raises ``MissingParamError`` for an absent parameter when *strict*,
    and ``ParamValueError`` for a value containing ``/`` when the
    config's ``param_separator`` is ``"reject"``.  Without *strict* the
    placeholder token is kept as written.
    """
    target_id = chain[-1].id if chain else ""
    parts: list[str] = []
    for route in chain:
        for segment in route.segments:
            if not segment.is_param or segment.param_name is None:
                parts.append(segment.value)
                continue

            name = segment.param_name
            if name not in params or params[name] is None:
                if strict:
                    raise MissingParamError(target_id, name)
                if not quiet:
                    logger.warning(
                        "Route %r built without parameter %r; keeping %r",
                        target_id,
                        name,
                        segment.value,
                    )
                parts.append(segment.value)
                continue

            value = str(params[name])
            if "/" in value and config.param_separator == "reject":
                raise ParamValueError(target_id, name, value)
            parts.append(quote(value, safe=""))
    return "/" + "/".join(parts)


def match_id(
    schema: RouteSchema,
    config: RouterConfig,
    route_id: str,
    *,
    params: Mapping[str, Any] | None = None,
    strict: bool = False,
    page_404: bool = False,
    search_params: Mapping[str, Any] | None = None,
) -> RawMatch | None:
    """Look up *route_id* and build its ``RawMatch`` with a synthesized URL.

    An unknown id yields the ``"404"`` route when *page_404* is set,
    raises ``UnknownIdError`` when *strict* is set, and returns ``None``
    otherwise.
    """
    params = params or {}
    query = SearchParams.from_mapping(search_params)

    found = schema.find(route_id)
    if found is None:
        if page_404:
            logger.debug("Unknown id %r, using %r", route_id, schema.not_found.id)
            return RawMatch(
                route=schema.not_found,
                url=query.append_to(not_found_url(schema)),
                search_params=query,
            )
        if strict:
            raise UnknownIdError(route_id)
        return None

    route, ancestors = found
    chain = (*ancestors, route)
    path = build_path(chain, params, config, strict=strict)
    if route is schema.not_found:
        path = not_found_url(schema)
    else:
        path = schema.join(path)

    bound = {
        segment.param_name: str(params[segment.param_name])
        for step in chain
        for segment in step.segments
        if segment.param_name is not None and params.get(segment.param_name) is not None
    }
    return RawMatch(
        route=route,
        url=query.append_to(path),
        params=bound,
        search_params=query,
        depth=len(ancestors),
        parent_id=ancestors[-1].id if ancestors else None,
    )


def not_found_url(schema: RouteSchema) -> str:
    """The ``"404"`` route's own URL: its static ``path``, else the base path root."""
    path = schema.not_found.properties.get("path")
    if isinstance(path, Static) and isinstance(path.value, str):
        return schema.join(path.value)
    return schema.join("")
