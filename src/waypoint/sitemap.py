"""XML sitemap rendering from the enumerated route tree.

Renders with a kida environment created once per call.  A page is
listed when its URL is fully static (no parameter segments in its
route or any ancestor), it is not a redirect, it is not the ``"404"``
page, and it does not set ``sitemap=False``.

Optional page properties ``changefreq``, ``priority`` and ``lastmod``
are emitted when present.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from kida import Environment

if TYPE_CHECKING:
    from waypoint.router import Router
    from waypoint.routing.page import PageObject

SITEMAP_TEMPLATE = """\
<?xml version="1.0" encoding="UTF-8"?>
<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">
{% for entry in entries %}  <url>
    <loc>{{ entry.loc }}</loc>
{% if entry.lastmod %}    <lastmod>{{ entry.lastmod }}</lastmod>
{% end %}{% if entry.changefreq %}    <changefreq>{{ entry.changefreq }}</changefreq>
{% end %}{% if entry.priority %}    <priority>{{ entry.priority }}</priority>
{% end %}  </url>
{% end %}</urlset>
"""


@dataclass(frozen=True, slots=True)
class SitemapEntry:
    """One ``<url>`` element."""

    loc: str
    lastmod: str | None = None
    changefreq: str | None = None
    priority: str | None = None


def sitemap_entries(router: Router, base_url: str = "") -> list[SitemapEntry]:
    """Collect the sitemap entries for every listable page of *router*."""
    schema = router.schema
    origin = base_url.rstrip("/")
    entries: list[SitemapEntry] = []
    for page in router.resolve_all():
        if not _listable(router, page):
            continue
        entries.append(
            SitemapEntry(
                loc=f"{origin}{page.url}",
                lastmod=_optional_str(page.get("lastmod")),
                changefreq=_optional_str(page.get("changefreq")),
                priority=_optional_str(page.get("priority")),
            )
        )
    if schema.root is None:
        return entries
    # Root first, as crawlers expect the entry point at the top.
    root_loc = f"{origin}{schema.join('')}"
    entries.sort(key=lambda entry: entry.loc != root_loc)
    return entries


def render_sitemap(router: Router, base_url: str = "") -> str:
    """Render the sitemap XML for *router* with URLs prefixed by *base_url*."""
    env = Environment(autoescape=True)
    template = env.from_string(SITEMAP_TEMPLATE)
    return template.render({"entries": sitemap_entries(router, base_url)})


def _listable(router: Router, page: PageObject) -> bool:
    if page.id == router.schema.not_found.id:
        return False
    if page.get("redirect") or page.get("sitemap") is False:
        return False
    found = router.schema.find(page.id)
    if found is None:
        return False
    route, ancestors = found
    return all(step.is_static for step in (*ancestors, route))


def _optional_str(value: object) -> str | None:
    if value is None or value is False:
        return None
    return str(value)
