"""Waypoint CLI — route listing, resolution, schema checks, sitemaps.

Entry point registered as ``waypoint`` in ``pyproject.toml``::

    [project.scripts]
    waypoint = "waypoint.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``waypoint`` command."""
    parser = argparse.ArgumentParser(
        prog="waypoint",
        description="Waypoint — resolve URLs and page ids against a route schema.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log matching and redirect decisions to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- waypoint routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List every route in a schema")
    routes_parser.add_argument("target", help="Import string (e.g. myapp.routes:router)")

    # -- waypoint resolve -------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Resolve a URL or page id to JSON")
    resolve_parser.add_argument("target", help="Import string (e.g. myapp.routes:router)")
    resolve_parser.add_argument("url", nargs="?", default=None, help="URL path to resolve")
    resolve_parser.add_argument("--id", dest="route_id", default=None, help="Resolve by page id")
    resolve_parser.add_argument(
        "--param",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Path parameter for --id (repeatable)",
    )
    resolve_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on unknown ids and missing parameters",
    )
    resolve_parser.add_argument(
        "--no-redirect",
        action="store_true",
        help="Do not follow redirects",
    )

    # -- waypoint check ---------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate a route schema")
    check_parser.add_argument("target", help="Import string (e.g. myapp.routes:router)")

    # -- waypoint sitemap -------------------------------------------------
    sitemap_parser = subparsers.add_parser("sitemap", help="Render an XML sitemap")
    sitemap_parser.add_argument("target", help="Import string (e.g. myapp.routes:router)")
    sitemap_parser.add_argument(
        "--base-url",
        default="",
        help="Origin prefixed to every URL (e.g. https://example.com)",
    )
    sitemap_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write to a file instead of stdout",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "routes":
        from waypoint.cli._routes import run_routes

        run_routes(args)
    elif args.command == "resolve":
        from waypoint.cli._page import run_resolve

        run_resolve(args)
    elif args.command == "check":
        from waypoint.cli._check import run_check

        run_check(args)
    elif args.command == "sitemap":
        from waypoint.cli._sitemap import run_sitemap

        run_sitemap(args)
