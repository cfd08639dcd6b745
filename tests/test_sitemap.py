"""Tests for waypoint.sitemap — sitemap entries and kida rendering."""

from typing import Any

from waypoint.router import Router
from waypoint.sitemap import SitemapEntry, render_sitemap, sitemap_entries


class TestSitemapEntries:
    def test_static_pages_only(self, router: Router) -> None:
        locs = [entry.loc for entry in sitemap_entries(router)]
        assert locs == ["/", "/about", "/admin"]

    def test_root_first(self, router: Router) -> None:
        assert sitemap_entries(router)[0].loc == "/"

    def test_base_url(self, router: Router) -> None:
        entries = sitemap_entries(router, "https://example.com/")
        assert entries[1].loc == "https://example.com/about"

    def test_optional_properties(self, router: Router) -> None:
        about = sitemap_entries(router)[1]
        assert about == SitemapEntry(loc="/about", changefreq="monthly")

    def test_opt_out(self, schema: dict[str, Any]) -> None:
        schema["routes"]["admin"]["sitemap"] = False
        locs = [entry.loc for entry in sitemap_entries(Router(schema))]
        assert "/admin" not in locs

    def test_base_path(self, schema: dict[str, Any]) -> None:
        schema["base_path"] = "/app"
        locs = [entry.loc for entry in sitemap_entries(Router(schema))]
        assert locs == ["/app/", "/app/about", "/app/admin"]

    def test_nested_static_pages(self) -> None:
        router = Router(
            {
                "routes": {
                    "docs": {"id": "docs", "sub_routes": {"intro": {"id": "intro"}}},
                },
                "404": {"id": "not-found"},
            }
        )
        locs = [entry.loc for entry in sitemap_entries(router)]
        assert locs == ["/docs", "/docs/intro"]


class TestRenderSitemap:
    def test_urlset(self, router: Router) -> None:
        xml = render_sitemap(router, "https://example.com")

        assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        assert "http://www.sitemaps.org/schemas/sitemap/0.9" in xml
        assert "<loc>https://example.com/about</loc>" in xml
        assert "<changefreq>monthly</changefreq>" in xml
        assert xml.count("<url>") == 3

    def test_excluded_pages_absent(self, router: Router) -> None:
        xml = render_sitemap(router)
        assert "/users" not in xml
        assert "/old-about" not in xml
        assert "/404" not in xml

    def test_escapes_values(self) -> None:
        router = Router(
            {
                "routes": {"a": {"id": "a", "changefreq": "<daily>"}},
                "404": {"id": "not-found"},
            }
        )
        xml = render_sitemap(router)
        assert "<daily>" not in xml
        assert "&lt;daily&gt;" in xml
