"""Waypoint exception hierarchy.

Shared across the schema builder, matcher, resolver, and navigator so
every module raises and catches the same types.
"""

from collections.abc import Sequence


class WaypointError(Exception):
    """Base for all waypoint-specific errors."""


class ConfigurationError(WaypointError):
    """Raised when router configuration is invalid.

    Typically raised while constructing a ``Router``.
    """


class SchemaError(ConfigurationError):
    """A route schema is structurally invalid.

    Carries the dotted key path of the offending node, e.g.
    ``schema.routes.users/:id.sub_routes.profile``.
    """

    def __init__(self, message: str, key_path: str = "schema") -> None:
        super().__init__(f"{key_path}: {message}")
        self.key_path = key_path
        self.reason = message


class ComputedValueError(SchemaError):
    """A computed property returned another callable.

    Not detectable at validation time, so it surfaces during resolution.
    """


class ResolutionError(WaypointError):
    """Base for errors raised while resolving a page object."""


class RedirectError(ResolutionError):
    """A redirect declaration evaluated to an unusable target."""


class RedirectCycleError(RedirectError):
    """A redirect chain looped or exceeded the configured hop limit."""

    def __init__(self, message: str, hops: Sequence[tuple[str, str]] = ()) -> None:
        super().__init__(message)
        self.hops = tuple(hops)


class MissingParamError(ResolutionError):
    """A path parameter required to build a URL was not supplied."""

    def __init__(self, route_id: str, param: str) -> None:
        super().__init__(f"Route {route_id!r} requires parameter {param!r}, which was not given.")
        self.route_id = route_id
        self.param = param


class ParamValueError(ResolutionError):
    """A path parameter value cannot be placed into a single URL segment."""

    def __init__(self, route_id: str, param: str, value: str) -> None:
        super().__init__(
            f"Parameter {param!r} for route {route_id!r} contains a path separator: {value!r}"
        )
        self.route_id = route_id
        self.param = param
        self.value = value


class UnknownIdError(ResolutionError):
    """No route in the schema carries the requested id."""

    def __init__(self, route_id: str) -> None:
        super().__init__(f"No route with id {route_id!r}.")
        self.route_id = route_id
