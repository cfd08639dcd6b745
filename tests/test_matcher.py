"""Tests for waypoint.routing.matcher — path matching against the route tree."""

from typing import Any

from waypoint.router import Router
from waypoint.routing.matcher import match_path, strip_base_path
from waypoint.routing.schema import RouteSchema


def _router(routes: dict[str, Any], **extra: Any) -> Router:
    return Router({"routes": routes, "404": {"id": "not-found"}, **extra})


class TestStaticRoutes:
    def test_simple_path(self, router: Router) -> None:
        page = router.resolve("/about")
        assert page.id == "about"
        assert page.params == {}
        assert page.url == "/about"

    def test_root(self, router: Router) -> None:
        page = router.resolve("/")
        assert page.id == "home"
        assert page.depth == 0
        assert page.parent_id is None

    def test_empty_path_is_root(self, router: Router) -> None:
        assert router.resolve("").id == "home"

    def test_no_root_falls_back_to_404(self) -> None:
        router = _router({"about": {"id": "about"}})
        assert router.resolve("/").id == "not-found"

    def test_repeated_slashes_collapse(self, router: Router) -> None:
        page = router.resolve("//users///42/")
        assert page.id == "user"
        assert page.url == "/users/42"

    def test_full_url(self, router: Router) -> None:
        assert router.resolve("https://example.com/about").id == "about"


class TestParams:
    def test_constrained_param(self, router: Router) -> None:
        page = router.resolve("/users/42")
        assert page.id == "user"
        assert page.params == {"id": "42"}

    def test_constraint_rejects(self, router: Router) -> None:
        page = router.resolve("/users/abc")
        assert page.id == "not-found"
        assert page.params == {}
        assert page.url == "/users/abc"

    def test_params_are_decoded(self, router: Router) -> None:
        page = router.resolve("/users/42/posts/hello%20world")
        assert page.id == "post"
        assert page.params == {"id": "42", "slug": "hello world"}
        assert page.url == "/users/42/posts/hello%20world"

    def test_wildcard_literal(self, router: Router) -> None:
        assert router.resolve("/docs/intro.html").id == "doc"
        assert router.resolve("/docs/intro.txt").id == "not-found"

    def test_path_shorter_than_pattern(self, router: Router) -> None:
        assert router.resolve("/users").id == "not-found"


class TestNesting:
    def test_sub_route(self, router: Router) -> None:
        page = router.resolve("/users/42/profile")
        assert page.id == "profile"
        assert page.params == {"id": "42"}
        assert page.depth == 1
        assert page.parent_id == "user"

    def test_unmatched_remainder_is_404(self, router: Router) -> None:
        assert router.resolve("/users/42/unknown").id == "not-found"

    def test_failed_recursion_continues_with_siblings(self) -> None:
        router = _router(
            {
                "a": {"id": "a", "sub_routes": {"b": {"id": "ab"}}},
                "a/c": {"id": "ac"},
            }
        )
        assert router.resolve("/a/b").id == "ab"
        assert router.resolve("/a/c").id == "ac"

    def test_sibling_params_do_not_leak(self) -> None:
        router = _router(
            {
                "x/:a": {"id": "xa", "sub_routes": {"y": {"id": "xay"}}},
                "x/:b/z": {"id": "xbz"},
            }
        )
        page = router.resolve("/x/1/z")
        assert page.id == "xbz"
        assert page.params == {"b": "1"}

    def test_deep_nesting_accumulates_params(self) -> None:
        router = _router(
            {
                "orgs/:org": {
                    "id": "org",
                    "sub_routes": {
                        "teams/:team": {
                            "id": "team",
                            "sub_routes": {"members/:member": {"id": "member"}},
                        }
                    },
                }
            }
        )
        page = router.resolve("/orgs/acme/teams/core/members/ada")
        assert page.id == "member"
        assert page.params == {"org": "acme", "team": "core", "member": "ada"}
        assert page.depth == 2
        assert page.parent_id == "team"


class TestPrecedence:
    def test_param_declared_first_wins(self) -> None:
        router = _router({"users/:id": {"id": "user"}, "users/active": {"id": "active"}})
        assert router.resolve("/users/active").id == "user"

    def test_literal_declared_first_wins(self) -> None:
        router = _router({"users/active": {"id": "active"}, "users/:id": {"id": "user"}})
        assert router.resolve("/users/active").id == "active"
        assert router.resolve("/users/7").id == "user"


class TestSearchParams:
    def test_query_parsed(self, router: Router) -> None:
        page = router.resolve("/about?tab=team&tag=a&tag=b")
        assert page.id == "about"
        assert page.search_params["tab"] == "team"
        assert page.search_params.get_list("tag") == ["a", "b"]
        assert page.url == "/about?tab=team&tag=a&tag=b"

    def test_404_keeps_query(self, router: Router) -> None:
        page = router.resolve("/missing?x=1")
        assert page.id == "not-found"
        assert page.url == "/missing?x=1"


class TestBasePath:
    def test_stripped_before_matching(self, schema: dict[str, Any]) -> None:
        router = Router({**schema, "base_path": "/app"})
        page = router.resolve("/app/about")
        assert page.id == "about"
        assert page.url == "/app/about"

    def test_base_path_alone_is_root(self, schema: dict[str, Any]) -> None:
        router = Router({**schema, "base_path": "/app"})
        assert router.resolve("/app").id == "home"
        assert router.resolve("/app/").id == "home"

    def test_outside_base_path_is_404(self, schema: dict[str, Any]) -> None:
        router = Router({**schema, "base_path": "/app"})
        page = router.resolve("/about")
        assert page.id == "not-found"
        assert page.url == "/about"

    def test_strip_base_path(self) -> None:
        assert strip_base_path("/app/x", "/app") == "/x"
        assert strip_base_path("/app", "/app") == "/"
        assert strip_base_path("/application", "/app") is None
        assert strip_base_path("/x", "") == "/x"


class TestRawMatch:
    def test_match_does_not_resolve(self, schema: dict[str, Any]) -> None:
        compiled = RouteSchema.from_mapping(schema)
        match = match_path(compiled, "/old-about")
        assert match.route.id == "old-about"
        assert match.url == "/old-about"

    def test_raw_page_exposes_authored_values(self, schema: dict[str, Any]) -> None:
        compiled = RouteSchema.from_mapping(schema)
        raw = match_path(compiled, "/users/42/profile?x=1").raw_page()
        assert raw["id"] == "profile"
        assert raw["params"] == {"id": "42"}
        assert raw["search_params"]["x"] == "1"
        assert raw["parent_id"] == "user"
        assert "title" not in raw
