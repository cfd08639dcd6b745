"""``waypoint sitemap`` — render an XML sitemap for a schema."""

import argparse
import sys
from pathlib import Path

from waypoint.cli._resolve import resolve_router
from waypoint.errors import SchemaError
from waypoint.sitemap import render_sitemap


def run_sitemap(args: argparse.Namespace) -> None:
    """Render the sitemap for ``args.target`` to stdout or ``args.output``."""
    try:
        router = resolve_router(args.target)
    except (ModuleNotFoundError, AttributeError, TypeError, SchemaError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    xml = render_sitemap(router, args.base_url)
    if args.output:
        Path(args.output).write_text(xml, encoding="utf-8")
        print(f"Wrote {args.output}")
    else:
        sys.stdout.write(xml)
