"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass

from waypoint.errors import ConfigurationError

_SEPARATOR_POLICIES = frozenset({"encode", "reject"})


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(max_redirects=8, param_separator="reject")
    """

    # Redirects
    max_redirects: int = 32  # Hops followed before RedirectCycleError

    # Reverse resolution
    param_separator: str = "encode"  # "encode" -> %2F, "reject" -> ParamValueError
    strict_ids: bool = False  # Default for resolve_id(strict=...)

    def __post_init__(self) -> None:
        if self.max_redirects < 0:
            msg = f"max_redirects must be >= 0, got {self.max_redirects}"
            raise ConfigurationError(msg)
        if self.param_separator not in _SEPARATOR_POLICIES:
            allowed = ", ".join(sorted(_SEPARATOR_POLICIES))
            msg = f"param_separator must be one of {allowed}, got {self.param_separator!r}"
            raise ConfigurationError(msg)
