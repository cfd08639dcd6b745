"""``waypoint routes`` — list every route in a schema.

Prints a table of ID, PATTERN (full path from the root) and DEPTH,
followed by the ``root`` and ``"404"`` routes.
"""

import argparse
import sys

from waypoint.cli._resolve import resolve_router
from waypoint.errors import SchemaError


def run_routes(args: argparse.Namespace) -> None:
    """List the routes of the router at ``args.target``."""
    try:
        router = resolve_router(args.target)
    except (ModuleNotFoundError, AttributeError, TypeError, SchemaError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    schema = router.schema

    # Build rows: (id, pattern, depth)
    rows: list[tuple[str, str, str]] = []
    for route, ancestors in router.routes:
        pattern = "/".join(step.pattern.strip("/") for step in (*ancestors, route) if step.pattern)
        rows.append((route.id, schema.join(pattern), str(len(ancestors))))
    if schema.root is not None:
        rows.append((schema.root.id, schema.join(""), "0"))
    rows.append((schema.not_found.id, "(404)", "0"))

    # Column widths
    max_id = max(max(len(r[0]) for r in rows), 2)  # "ID" header
    max_pattern = max(max(len(r[1]) for r in rows), 7)  # "PATTERN" header

    fmt = f"{{:<{max_id}}}  {{:<{max_pattern}}}  {{}}"
    print(fmt.format("ID", "PATTERN", "DEPTH"))
    print("-" * min(max_id + max_pattern + 9, 80))
    for route_id, pattern, depth in rows:
        print(fmt.format(route_id, pattern, depth))
