"""Raw matches and resolved page objects.

``RawMatch`` is what the matcher (or reverse lookup) produces: a route
definition plus the request-specific facts about how it was reached.
``PageObject`` is the merged, evaluated result handed to callers.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from waypoint.query import SearchParams

if TYPE_CHECKING:
    from waypoint.routing.schema import RouteDef

# Property names the engine injects into every page object.
RESERVED_NAMES: frozenset[str] = frozenset(
    {
        "url",
        "redirected",
        "redirect_origin",
        "redirect_path",
        "depth",
        "parent_id",
        "search_params",
    }
)


@dataclass(frozen=True, slots=True)
class RedirectOrigin:
    """The page a redirect chain started from."""

    url: str
    id: str


@dataclass(frozen=True, slots=True)
class RedirectPath:
    """Every hop of a redirect chain, in the order they were taken."""

    urls: tuple[str, ...] = ()
    ids: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class RawMatch:
    """A route definition reached by path or by id, before resolution."""

    route: RouteDef
    url: str
    params: Mapping[str, str] = field(default_factory=dict)
    search_params: SearchParams = field(default_factory=SearchParams)
    depth: int = 0
    parent_id: str | None = None

    def raw_page(self) -> Mapping[str, Any]:
        """The read-only mapping handed to computed properties.

        Authored values are passed as written (callables included),
        alongside the facts of this match.
        """
        data = dict(self.route.raw)
        data.update(
            params=dict(self.params),
            search_params=self.search_params,
            url=self.url,
            depth=self.depth,
            parent_id=self.parent_id,
        )
        return MappingProxyType(data)


class PageObject(Mapping[str, Any]):
    """A fully resolved page. Immutable.

    Behaves as a read-only mapping of every merged property, with
    attribute accessors for the fields the engine injects::

        page = router.resolve("/users/42")
        page.id, page.params["id"], page["title"]
    """

    _data: dict[str, Any]

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any]) -> None:
        object.__setattr__(self, "_data", dict(data))

    def __setattr__(self, name: str, value: object) -> None:
        msg = "PageObject is immutable; use evolve() to derive a changed copy"
        raise AttributeError(msg)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"PageObject(id={self.id!r}, url={self.url!r})"

    def evolve(self, **changes: Any) -> PageObject:
        """Return a copy with *changes* applied."""
        return PageObject({**self._data, **changes})

    @property
    def id(self) -> str:
        return self._data["id"]

    @property
    def url(self) -> str:
        return self._data["url"]

    @property
    def params(self) -> Mapping[str, str]:
        return self._data.get("params", {})

    @property
    def search_params(self) -> SearchParams:
        return self._data.get("search_params") or SearchParams()

    @property
    def depth(self) -> int:
        return self._data.get("depth", 0)

    @property
    def parent_id(self) -> str | None:
        return self._data.get("parent_id")

    @property
    def redirected(self) -> bool:
        return bool(self._data.get("redirected", False))

    @property
    def redirect_origin(self) -> RedirectOrigin | None:
        return self._data.get("redirect_origin")

    @property
    def redirect_path(self) -> RedirectPath | None:
        return self._data.get("redirect_path")
