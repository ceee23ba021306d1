"""
Theme model and theme lookups.

A Theme carries ordered breakpoints, named scale/variant tables and optional
named transformers. The resolution engine only reads it; a new Theme instance
means a fresh cache (see themestyle.cache).

Example:
    Theme(
        name="brand",
        breakpoints={"xs": 0, "sm": 576, "md": 768},
        scales={
            "colors": {"primary": "#0066cc", "default": "#212529"},
            "space": {"sm": 4, "md": 8, "lg": 16},
        },
    )
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Props bag: prop name -> raw value, always carrying "theme"
Props = Mapping[str, Any]

DEFAULT_BREAKPOINTS: dict[str, int] = {
    "xs": 0,
    "sm": 576,
    "md": 768,
    "lg": 992,
    "xl": 1200,
}


class Theme(BaseModel):
    """Theme consumed by style resolution."""

    name: str = Field(default="default", description="Theme name")
    breakpoints: dict[str, int] = Field(
        default_factory=lambda: dict(DEFAULT_BREAKPOINTS),
        description="Ordered breakpoints (name -> minimum width in px)",
    )
    scales: dict[str, Any] = Field(
        default_factory=dict,
        description="Scale/variant tables (name -> mapping or list)",
    )
    transformers: dict[str, Callable[..., Any]] = Field(
        default_factory=dict,
        description="Transform overrides keyed by resolver name",
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("breakpoints")
    @classmethod
    def validate_breakpoints(cls, v: dict[str, int]) -> dict[str, int]:
        """Ensure breakpoint minimums are non-negative."""
        for name, minimum in v.items():
            if minimum < 0:
                raise ValueError(f"Breakpoint '{name}' must be >= 0, got {minimum}")
        return v

    def get_transformer(self, name: str | None) -> Callable[..., Any] | None:
        if name is None:
            return None
        return self.transformers.get(name)


def get_theme(props: Props) -> Theme | None:
    return props.get("theme")


def theme_field(theme: Any, name: str, default: Any = None) -> Any:
    """Read a theme field from a Theme or a plain mapping (e.g. parsed JSON)."""
    if theme is None:
        return default
    if isinstance(theme, Mapping):
        return theme.get(name, default)
    return getattr(theme, name, default)


def get_path(source: Any, path: Any) -> Any:
    """Look up a (possibly dotted) path in nested mappings and lists.

    An exact key match wins over dotted traversal, so numeric keys and keys
    containing dots still resolve. Returns None when any step is missing.

    Examples:
        >>> get_path({"red": {"500": "#f00"}}, "red.500")
        '#f00'

        >>> get_path([0, 4, 8], 2)
        8
    """
    if source is None:
        return None
    found, value = _get_step(source, path)
    if found:
        return value
    if not isinstance(path, str | int | float) or isinstance(path, bool):
        return None

    result = source
    for part in str(path).split("."):
        if result is None:
            return None
        found, result = _get_step(result, part)
        if not found:
            return None
    return result


def _get_step(source: Any, key: Any) -> tuple[bool, Any]:
    if isinstance(source, Mapping):
        try:
            if key in source:
                return True, source[key]
        except TypeError:
            return False, None
        # YAML/JSON tables may key numbers as strings or vice versa
        if isinstance(key, str) and key.isdigit() and int(key) in source:
            return True, source[int(key)]
        if isinstance(key, int) and not isinstance(key, bool) and str(key) in source:
            return True, source[str(key)]
        return False, None
    if isinstance(source, Sequence) and not isinstance(source, str):
        if isinstance(key, int) and not isinstance(key, bool):
            index = key
        elif isinstance(key, str) and key.isdigit():
            index = int(key)
        else:
            return False, None
        if not 0 <= index < len(source):
            return False, None
        return True, source[index]
    return False, None


_THEME_SCALES = object()


def get_theme_value(props: Props, path: Any, initial: Any = _THEME_SCALES) -> Any:
    """Look up path in initial (default: the theme's scale tables).

    Callable values are invoked with the props bag.
    """
    if initial is _THEME_SCALES:
        initial = theme_field(get_theme(props), "scales")
    value = get_path(initial, path)
    return value(props) if callable(value) else value


def get_breakpoints(props: Props) -> dict[str, int]:
    breakpoints = theme_field(get_theme(props), "breakpoints")
    if breakpoints is None:
        return DEFAULT_BREAKPOINTS
    return breakpoints


def get_breakpoint_min(breakpoints: Mapping[str, int], name: str) -> int | None:
    """Minimum width for a breakpoint; None for the base (zero) tier."""
    minimum = breakpoints.get(name)
    return minimum if minimum else None


def media_min_width(value: int | None) -> str | None:
    if value is None:
        return None
    return f"@media (min-width: {value}px)"


def get_medias(props: Props) -> dict[str, str | None]:
    """Map every theme breakpoint to its media query (None for the base tier)."""
    breakpoints = get_breakpoints(props)
    return {
        name: media_min_width(get_breakpoint_min(breakpoints, name))
        for name in breakpoints
    }


__all__ = [
    "DEFAULT_BREAKPOINTS",
    "Props",
    "Theme",
    "get_theme",
    "theme_field",
    "get_path",
    "get_theme_value",
    "get_breakpoints",
    "get_breakpoint_min",
    "media_min_width",
    "get_medias",
]
