"""``waypoint resolve`` — print a resolved page object as JSON.

Resolves either a URL or (with ``--id``) a page id.  Computed values
that are not JSON-serializable are printed via ``str()``.
"""

import argparse
import dataclasses
import json
import sys
from typing import Any

from waypoint.cli._resolve import resolve_router
from waypoint.errors import SchemaError, WaypointError
from waypoint.query import SearchParams
from waypoint.routing.page import PageObject


def run_resolve(args: argparse.Namespace) -> None:
    """Resolve ``args.url`` or ``args.route_id`` and print the page as JSON."""
    if (args.url is None) == (args.route_id is None):
        print("Error: give exactly one of a URL or --id", file=sys.stderr)
        raise SystemExit(2)

    try:
        router = resolve_router(args.target)
    except (ModuleNotFoundError, AttributeError, TypeError, SchemaError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    try:
        if args.url is not None:
            page = router.resolve(args.url, redirect=not args.no_redirect)
        else:
            page = router.resolve_id(
                args.route_id,
                params=parse_params(args.param),
                strict=args.strict,
                redirect=not args.no_redirect,
            )
    except (ValueError, WaypointError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if page is None:
        print(f"Error: no route with id {args.route_id!r}", file=sys.stderr)
        raise SystemExit(1)

    print(json.dumps(page_to_dict(page), indent=2, default=str))


def parse_params(pairs: list[str]) -> dict[str, str]:
    """Parse ``NAME=VALUE`` strings into a dict."""
    params: dict[str, str] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            msg = f"parameter must look like NAME=VALUE, got {pair!r}"
            raise ValueError(msg)
        params[name] = value
    return params


def page_to_dict(page: PageObject) -> dict[str, Any]:
    """Convert a page object into JSON-friendly builtins."""
    result: dict[str, Any] = {}
    for name, value in page.items():
        if isinstance(value, SearchParams):
            result[name] = value.to_dict()
        elif dataclasses.is_dataclass(value) and not isinstance(value, type):
            result[name] = dataclasses.asdict(value)
        else:
            result[name] = value
    return result
