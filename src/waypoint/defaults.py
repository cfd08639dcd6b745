"""Computed-property helpers for schema ``default`` blocks.

Usage::

    schema = {
        "default": {"title": default_title, "script": default_script},
        ...
    }
"""

from collections.abc import Mapping
from typing import Any


def default_title(page: Mapping[str, Any]) -> str:
    """Capitalize the page id: ``"about"`` -> ``"About"``."""
    page_id = page.get("id")
    if page_id:
        return page_id[0].upper() + page_id[1:]
    return "Title not found"


def default_script(page: Mapping[str, Any]) -> str | bool:
    """Script file named after the page id: ``"about"`` -> ``"about.js"``."""
    page_id = page.get("id")
    if page_id:
        return f"{page_id}.js"
    return False
