"""Page object resolution — templates, defaults, computed values, redirects.

Resolution order for a matched route:

1. The route's own properties
2. Properties from its named template, where the route has none
3. Properties from the schema ``default``, where neither has one
4. ``redirect``: if it evaluates to a target, resolve the target instead
5. Computed properties, evaluated once against the raw page

Redirect chains are followed iteratively.  Every hop is recorded; a hop
that revisits an earlier (id, url) pair, or a chain longer than
``RouterConfig.max_redirects``, raises ``RedirectCycleError``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from waypoint.errors import ComputedValueError, RedirectCycleError, RedirectError
from waypoint.routing.matcher import match_path
from waypoint.routing.page import PageObject, RawMatch, RedirectOrigin, RedirectPath
from waypoint.routing.reverse import match_id
from waypoint.routing.values import PropertyValue

if TYPE_CHECKING:
    from waypoint.config import RouterConfig
    from waypoint.routing.schema import RouteDef, RouteSchema

logger = logging.getLogger("waypoint.routing")

RedirectTarget = str | Mapping[str, Any]


class PageResolver:
    """Turns raw matches into resolved page objects for one schema."""

    __slots__ = ("_config", "_schema")

    def __init__(self, schema: RouteSchema, config: RouterConfig) -> None:
        self._schema = schema
        self._config = config

    def resolve(self, match: RawMatch, *, redirect: bool = True) -> PageObject:
        """Resolve *match* into a ``PageObject``.

        With *redirect* disabled the route is resolved as-is, even if it
        declares a redirect.
        """
        hops: list[tuple[str, str]] = []
        current = match
        while True:
            merged = self.merge(current.route)
            raw = current.raw_page()

            known: dict[str, Any] = {}
            target = None
            if redirect and "redirect" in merged:
                known["redirect"] = self._evaluate_redirect(merged["redirect"], raw, current.route)
                target = self._redirect_target(known["redirect"], current.route)
            if target is None:
                page = self._evaluate(merged, raw, current, known)
                if hops:
                    page = page.evolve(
                        redirected=True,
                        redirect_origin=RedirectOrigin(id=hops[0][0], url=hops[0][1]),
                        redirect_path=RedirectPath(
                            urls=tuple(url for _, url in hops),
                            ids=tuple(route_id for route_id, _ in hops),
                        ),
                    )
                return page

            hop = (current.route.id, current.url)
            if hop in hops:
                chain = " -> ".join(route_id for route_id, _ in (*hops, hop))
                msg = f"Redirect cycle: {chain}"
                raise RedirectCycleError(msg, hops)
            hops.append(hop)
            if len(hops) > self._config.max_redirects:
                msg = f"Redirect chain from {hops[0][0]!r} exceeded {self._config.max_redirects} hops"
                raise RedirectCycleError(msg, hops)

            logger.debug("Redirecting %r (%s) to %r", current.route.id, current.url, target)
            current = self._follow(target, current.route)

    def merge(self, route: RouteDef) -> dict[str, PropertyValue]:
        """Merge a route's properties with its template and the schema default.

        Each layer only fills properties the layers above left unset.
        """
        merged = dict(route.properties)
        template_name = route.template
        if template_name is not None:
            template = self._schema.templates.get(template_name)
            if template is None:
                logger.debug("Route %r names unknown template %r", route.id, template_name)
            else:
                for name, value in template.items():
                    merged.setdefault(name, value)
        for name, value in self._schema.default.items():
            merged.setdefault(name, value)
        return merged

    def _evaluate_redirect(
        self,
        declared: PropertyValue,
        raw: Mapping[str, Any],
        route: RouteDef,
    ) -> Any:
        """Evaluate a ``redirect`` property once; a callable result is a bad target."""
        try:
            return declared.evaluate(raw, f"{route.key_path}.redirect")
        except ComputedValueError as exc:
            msg = f"Redirect from {route.id!r} evaluated to a callable, not a target"
            raise RedirectError(msg) from exc

    def _redirect_target(self, target: Any, route: RouteDef) -> RedirectTarget | None:
        """Check an evaluated ``redirect`` value; falsy means no redirect."""
        if not target:
            return None
        if isinstance(target, str):
            return target
        if isinstance(target, Mapping):
            if "id" not in target:
                msg = f"Redirect from {route.id!r} is a mapping without an 'id': {target!r}"
                raise RedirectError(msg)
            return target
        msg = (
            f"Redirect from {route.id!r} must evaluate to a path, a mapping "
            f"with an 'id', or False; got {target!r}"
        )
        raise RedirectError(msg)

    def _follow(self, target: RedirectTarget, origin: RouteDef) -> RawMatch:
        if isinstance(target, str):
            return match_path(self._schema, self._schema.join(target))

        params = target.get("params") or {}
        found = match_id(self._schema, self._config, target["id"], params=params)
        if found is None:
            msg = f"Redirect from {origin.id!r} targets unknown id {target['id']!r}"
            raise RedirectError(msg)
        return found

    def _evaluate(
        self,
        merged: Mapping[str, PropertyValue],
        raw: Mapping[str, Any],
        match: RawMatch,
        known: Mapping[str, Any],
    ) -> PageObject:
        """Evaluate every merged property, reusing values in *known*."""
        data: dict[str, Any] = {}
        for name, value in merged.items():
            if name in known:
                data[name] = known[name]
            else:
                data[name] = value.evaluate(raw, f"{match.route.key_path}.{name}")
        data.update(
            params=dict(match.params),
            search_params=match.search_params,
            url=match.url,
            depth=match.depth,
            parent_id=match.parent_id,
        )
        return PageObject(data)
