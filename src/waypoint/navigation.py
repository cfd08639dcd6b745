"""Headless navigation controller.

``Navigator`` is the thin layer between a host environment (browser
shell, desktop webview, test harness) and the engine: it resolves a
URL or page id, writes the canonical URL into a ``History``, records
the active page, and notifies listeners.  Engine errors are logged and
the navigation is abandoned; they never escape into the host.

Usage::

    nav = Navigator(router, MemoryHistory("/"))
    unsubscribe = nav.on_page_change(lambda event: render(event.page))
    nav.navigate("/users/42")
    nav.active_page.id   # "user"
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from waypoint.errors import UnknownIdError, WaypointError

if TYPE_CHECKING:
    from waypoint.router import Router
    from waypoint.routing.page import PageObject

logger = logging.getLogger("waypoint.navigation")


@dataclass(frozen=True, slots=True)
class PageChangeEvent:
    """Dispatched to listeners after every completed navigation."""

    page: PageObject
    previous: PageObject | None = None


PageChangeListener = Callable[[PageChangeEvent], None]


@runtime_checkable
class History(Protocol):
    """Session history the navigator writes to."""

    @property
    def location(self) -> str: ...
    def push(self, url: str, title: str = "") -> None: ...
    def replace(self, url: str, title: str = "") -> None: ...


class MemoryHistory:
    """In-process session history with back/forward support."""

    __slots__ = ("_entries", "_index", "_titles")

    def __init__(self, initial: str = "/") -> None:
        self._entries: list[str] = [initial]
        self._titles: list[str] = [""]
        self._index = 0

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def location(self) -> str:
        return self._entries[self._index]

    @property
    def title(self) -> str:
        return self._titles[self._index]

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def push(self, url: str, title: str = "") -> None:
        """Add an entry after the current one, dropping any forward entries."""
        del self._entries[self._index + 1 :]
        del self._titles[self._index + 1 :]
        self._entries.append(url)
        self._titles.append(title)
        self._index += 1

    def replace(self, url: str, title: str = "") -> None:
        self._entries[self._index] = url
        self._titles[self._index] = title

    def back(self) -> bool:
        if self._index == 0:
            return False
        self._index -= 1
        return True

    def forward(self) -> bool:
        if self._index >= len(self._entries) - 1:
            return False
        self._index += 1
        return True


class Navigator:
    """Drives navigation for one router and one history."""

    __slots__ = ("_active_page", "_history", "_listeners", "_router")

    def __init__(self, router: Router, history: History | None = None) -> None:
        self._router = router
        self._history: History = history if history is not None else MemoryHistory()
        self._listeners: list[PageChangeListener] = []
        self._active_page: PageObject | None = None

    @property
    def router(self) -> Router:
        return self._router

    @property
    def history(self) -> History:
        return self._history

    @property
    def active_page(self) -> PageObject | None:
        """The page of the last completed navigation."""
        return self._active_page

    def on_page_change(self, listener: PageChangeListener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def navigate(self, url: str, *, replace: bool = False) -> PageObject | None:
        """Resolve *url* and make it the active page.

        Returns the new page, or ``None`` if resolution failed.
        """
        try:
            page = self._router.resolve(url)
        except WaypointError:
            logger.exception("Navigation to %r failed", url)
            return None
        return self._commit(page, requested=url, replace=replace)

    def navigate_id(
        self,
        route_id: str,
        *,
        params: Mapping[str, Any] | None = None,
        search_params: Mapping[str, Any] | None = None,
        replace: bool = False,
    ) -> PageObject | None:
        """Resolve a page id and make it the active page.

        Returns the new page, or ``None`` if the id is unknown or
        resolution failed.
        """
        try:
            page = self._router.resolve_id(
                route_id,
                params=params,
                search_params=search_params,
            )
        except WaypointError:
            logger.exception("Navigation to id %r failed", route_id)
            return None
        if page is None:
            logger.warning("Navigation to unknown id %r ignored", route_id)
            return None
        requested = page.redirect_origin.url if page.redirect_origin else page.url
        return self._commit(page, requested=requested, replace=replace)

    def sync(self) -> PageObject | None:
        """Re-resolve the history's current location (back/forward, startup)."""
        return self.navigate(self._history.location)

    def _commit(self, page: PageObject, *, requested: str, replace: bool) -> PageObject:
        location = self._history.location
        if page.redirected and requested == location and page.url != location:
            replace = True

        if location != page.url or page.redirected:
            title = str(page.get("title") or "")
            if replace:
                self._history.replace(page.url, title)
            else:
                self._history.push(page.url, title)

        event = PageChangeEvent(page=page, previous=self._active_page)
        self._active_page = page
        for listener in list(self._listeners):
            listener(event)
        return page


@dataclass(frozen=True, slots=True)
class Link:
    """An href derived from a page id and parameters.

    Immutable: change parameters with ``update()``, which returns a new
    link to render.

        link = Link(router, "user", {"id": "1"})
        link.href                  # "/users/1"
        link.update(id="2").href   # "/users/2"
    """

    router: Router
    id: str
    params: Mapping[str, Any] = field(default_factory=dict)
    search_params: Mapping[str, Any] | None = None

    @property
    def page(self) -> PageObject:
        page = self.router.resolve_id(
            self.id,
            params=self.params,
            search_params=self.search_params,
            page_404=True,
        )
        if page is None:
            raise UnknownIdError(self.id)
        return page

    @property
    def href(self) -> str:
        return self.page.url

    def update(self, **params: Any) -> Link:
        """Return a link with *params* merged over the current ones."""
        return dataclasses.replace(self, params={**self.params, **params})
