"""Router import resolution — resolves ``"module:attribute"`` strings to Routers.

Shared utility used by every ``waypoint`` sub-command to locate a
router (or a schema to build one from) from a user-supplied import
string.
"""

import importlib
from collections.abc import Mapping

from waypoint.router import Router
from waypoint.routing.schema import RouteSchema


def resolve_router(import_string: str) -> Router:
    """Resolve an import string to a waypoint Router.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"router"`` (e.g. ``"myapp.routes"``
    resolves to ``myapp.routes.router``).

    The attribute may be a ``Router``, a ``RouteSchema``, a schema
    mapping, or a factory function returning one of those.

    Args:
        import_string: Dotted module path with optional ``:attribute``
            suffix (e.g. ``"myapp:router"``, ``"myapp.routes:SCHEMA"``,
            ``"myapp:create_router"``).

    Returns:
        The resolved ``Router``.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not usable as a router.
        SchemaError: If the resolved schema is malformed.

    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "router"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    # Support factory functions - call them if they're not already a router or schema
    if callable(obj) and not isinstance(obj, (Router, RouteSchema)):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if isinstance(obj, Router):
        return obj
    if isinstance(obj, (RouteSchema, Mapping)):
        return Router(obj)

    msg = f"{import_string!r} resolved to {type(obj).__name__}, not a waypoint Router or schema"
    raise TypeError(msg)
