"""Shared route schemas for the waypoint test suite."""

from typing import Any

import pytest

from waypoint.defaults import default_title
from waypoint.router import Router


def site_schema() -> dict[str, Any]:
    """A small site exercising templates, defaults, nesting, and redirects."""
    return {
        "default": {"title": default_title, "layout": "main"},
        "templates": {"admin": {"layout": "admin", "secure": True}},
        "root": {"id": "home"},
        "routes": {
            "about": {"id": "about", "title": "About us", "changefreq": "monthly"},
            "users/:id(\\d+)": {
                "id": "user",
                "sub_routes": {
                    "profile": {"id": "profile"},
                    "posts/:slug": {"id": "post"},
                },
            },
            "admin": {"id": "admin", "template": "admin", "layout": "custom"},
            "docs/*.html": {"id": "doc"},
            "old-about": {"id": "old-about", "redirect": "/about"},
        },
        "404": {"id": "not-found", "path": "404"},
    }


@pytest.fixture
def schema() -> dict[str, Any]:
    return site_schema()


@pytest.fixture
def router(schema: dict[str, Any]) -> Router:
    return Router(schema)
