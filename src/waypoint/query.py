"""Immutable search (query string) parameters.

Implements ``Mapping[str, str]`` with multi-value access via ``get_list``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any
from urllib.parse import parse_qs, urlencode


class SearchParams(Mapping[str, str]):
    """Immutable query string parameters.

    Attributes:
        _data: Parsed query string as field name -> list of values.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values for a key.
    """

    _data: dict[str, list[str]]

    __slots__ = ("_data",)

    def __init__(self, query_string: str = "") -> None:
        parsed = parse_qs(query_string.lstrip("?"), keep_blank_values=True)
        object.__setattr__(self, "_data", parsed)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any] | None) -> SearchParams:
        """Build from a mapping whose values are strings or iterables of strings.

        Passing an existing ``SearchParams`` returns it unchanged.
        """
        if isinstance(values, SearchParams):
            return values
        params = cls()
        if not values:
            return params
        data: dict[str, list[str]] = {}
        for key, value in values.items():
            if isinstance(value, str) or not isinstance(value, Iterable):
                data[key] = [str(value)]
            else:
                data[key] = [str(item) for item in value]
        object.__setattr__(params, "_data", data)
        return params

    def __setattr__(self, name: str, value: object) -> None:
        msg = "SearchParams is immutable"
        raise AttributeError(msg)

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"SearchParams({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        values = self._data.get(key)
        if values:
            return values[0]
        return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        return list(self._data.get(key, []))

    def to_dict(self) -> dict[str, list[str]]:
        """Return a plain copy: field name -> list of values."""
        return {key: list(values) for key, values in self._data.items()}

    def encode(self) -> str:
        """Encode back to a query string (without the leading ``?``)."""
        return urlencode(self._data, doseq=True)

    def append_to(self, path: str) -> str:
        """Return *path* with this query string attached, if there is one."""
        query = self.encode()
        return f"{path}?{query}" if query else path
