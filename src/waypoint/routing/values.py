"""Static and computed route properties.

Every authored property is wrapped once, at schema build time, into
either ``Static`` (a plain value) or ``Computed`` (a callable of the raw
page).  The resolver evaluates both through the same ``evaluate()``
call.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from waypoint.errors import ComputedValueError


@dataclass(frozen=True, slots=True)
class Static:
    """A property whose value is fixed in the schema."""

    value: Any

    def evaluate(self, raw: Mapping[str, Any], key_path: str = "schema") -> Any:
        return self.value


@dataclass(frozen=True, slots=True)
class Computed:
    """A property derived from the raw page at resolution time.

    The callable receives the raw page mapping and must return a plain
    value. Returning another callable raises ``ComputedValueError``.
    """

    func: Callable[[Mapping[str, Any]], Any]

    def evaluate(self, raw: Mapping[str, Any], key_path: str = "schema") -> Any:
        """Call the function on *raw*; *key_path* locates the property in errors."""
        result = self.func(raw)
        if callable(result):
            name = getattr(self.func, "__name__", repr(self.func))
            msg = f"computed property {name!r} returned a callable; it must return a value"
            raise ComputedValueError(msg, key_path)
        return result


PropertyValue = Static | Computed


def wrap(value: Any) -> PropertyValue:
    """Wrap an authored value as ``Static`` or ``Computed``.

    Values that are already wrapped pass through unchanged.
    """
    if isinstance(value, (Static, Computed)):
        return value
    if callable(value):
        return Computed(value)
    return Static(value)


def wrap_all(properties: Mapping[str, Any]) -> dict[str, PropertyValue]:
    """Wrap every value of *properties*, preserving key order."""
    return {name: wrap(value) for name, value in properties.items()}
