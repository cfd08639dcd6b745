"""Route pattern parsing.

A route pattern is a ``/``-delimited template such as
``users/:id(\\d+)/posts``.  Each token becomes a ``PathSegment``:

- literal:      ``users``     matched verbatim
- wildcard:     ``file-*``    ``*`` matches any run of characters
- param:        ``:id``       any single non-empty segment
- constrained:  ``:id(\\d+)`` segment must fully match the regex
"""

import re
from dataclasses import dataclass
from urllib.parse import unquote

from waypoint.errors import SchemaError

# :name or :name(regex)
_PARAM_RE = re.compile(r"^:(\w+)(?:\((.+)\))?$")


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route pattern.

    Literal:      ``users``       (is_param=False, regex=None)
    Wildcard:     ``*.html``      (is_param=False, regex=compiled)
    Param:        ``:id``         (is_param=True, param_name="id")
    Constrained:  ``:id(\\d+)``   (is_param=True, param_name="id", regex=compiled)
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    regex: re.Pattern[str] | None = None

    def matches(self, raw: str) -> bool:
        """Return True if the raw (still encoded) path segment fits this segment."""
        if self.regex is not None:
            return self.regex.fullmatch(raw) is not None
        if self.is_param:
            return bool(raw)
        return raw == self.value

    def bind(self, raw: str) -> str:
        """Decode a matched raw segment into its parameter value."""
        return unquote(raw)


def compile_wildcard(literal: str) -> re.Pattern[str]:
    """Compile a literal containing ``*`` into a full-match regex.

    ``*`` becomes ``.*``; every other character is escaped.
    """
    return re.compile(".*".join(re.escape(part) for part in literal.split("*")))


def parse_pattern(pattern: str, key_path: str = "schema") -> tuple[PathSegment, ...]:
    """Parse a route pattern string into segments.

    Examples::

        "users"              -> (PathSegment("users"),)
        "users/:id"          -> (PathSegment("users"), PathSegment(":id", is_param=True, ...))
        "users/:id(\\d+)"    -> (..., PathSegment(":id(\\d+)", is_param=True, regex=...))
        "docs/*.html"        -> (PathSegment("docs"), PathSegment("*.html", regex=...))
        ""                   -> ()

    Raises ``SchemaError`` for a constrained parameter whose regex does
    not compile.
    """
    segments: list[PathSegment] = []
    for part in pattern.split("/"):
        if not part:
            continue
        param = _PARAM_RE.match(part)
        if param is not None:
            name, constraint = param.groups()
            regex = None
            if constraint is not None:
                try:
                    regex = re.compile(constraint)
                except re.error as exc:
                    msg = f"invalid regex for parameter {name!r} in pattern {pattern!r}: {exc}"
                    raise SchemaError(msg, key_path) from exc
            segments.append(PathSegment(value=part, is_param=True, param_name=name, regex=regex))
        elif "*" in part:
            segments.append(PathSegment(value=part, regex=compile_wildcard(part)))
        else:
            segments.append(PathSegment(value=part))
    return tuple(segments)


def split_path(path: str) -> list[str]:
    """Split a URL path into its non-empty segments (``//`` collapses)."""
    return [part for part in path.split("/") if part]
