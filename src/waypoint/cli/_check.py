"""``waypoint check`` — route schema validation command.

Resolves an import string, which builds and validates the router,
and exits with code 1 if the schema is malformed.
"""

import argparse
import sys

from waypoint.cli._resolve import resolve_router
from waypoint.errors import SchemaError


def run_check(args: argparse.Namespace) -> None:
    """Validate the schema at ``args.target`` and report the result."""
    try:
        router = resolve_router(args.target)
    except SchemaError as exc:
        print(f"Schema error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    count = len(router.routes) + 1 + (router.schema.root is not None)
    print(f"OK: {count} routes, ids unique, schema valid.")
