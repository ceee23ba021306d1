"""
Theme getters: resolve one raw prop value into a final CSS value.

A ThemeGetter looks the raw value up in a theme scale (e.g. "primary" in
theme.scales["colors"]), applies a transform, optionally splits shorthand
values ("sm lg" -> "4px 8px") and memoizes the result per theme.

Usage:
    get_color = theme_getter(name="color", key="colors")
    get_color("primary")(props)  # -> "#0066cc"
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial
from typing import Any

from .cache import MISSING, get_cache_namespace
from .theme import Props, get_theme, get_theme_value, theme_field
from .values import ValueKind, classify


@dataclass(frozen=True)
class TransformContext:
    """Extra arguments handed to a transform alongside the looked-up value."""

    raw_value: Any
    variants: Any
    props: Props


TransformValue = Callable[[Any, TransformContext], Any]

_getter_ids = itertools.count()


def _join_token(value: Any) -> str:
    return "" if value is None else str(value)


class ThemeGetter:
    """Resolver for raw prop values against a theme scale."""

    def __init__(
        self,
        *,
        name: str | None = None,
        key: str | None = None,
        transform: TransformValue | None = None,
        default_variants: Mapping[str, Any] | None = None,
        compose: ThemeGetter | None = None,
        shorthand: bool = False,
    ):
        """
        Args:
            name: Resolver name; theme.transformers[name] overrides transform
            key: Scale key in the theme (e.g. "colors", "space")
            transform: Default transform applied after lookup
            default_variants: Table used when the theme has no `key` scale
            compose: Getter fed with this getter's output
            shorthand: Resolve each whitespace-separated token independently
        """
        self.id = next(_getter_ids)
        self.name = name
        self.key = key
        self.transform = transform
        self.default_variants = default_variants
        self.compose = compose
        self.shorthand = shorthand
        self.namespace = f"__themeGetter{self.id}"

    @property
    def meta(self) -> dict[str, Any]:
        return {"name": self.name, "transform": self.transform}

    def __call__(self, value: Any) -> Callable[[Props], Any]:
        return partial(self.resolve, value)

    def __repr__(self) -> str:
        return f"ThemeGetter(id={self.id}, name={self.name!r}, key={self.key!r})"

    def resolve(self, value: Any, props: Props) -> Any:
        """Resolve value against the theme in props. Non-scalars pass through."""
        if classify(value) is not ValueKind.SCALAR:
            return value

        cache = get_cache_namespace(get_theme(props), self.namespace)
        cached = cache.lookup(value)
        if cached is not MISSING:
            return cached

        if self.shorthand and isinstance(value, str):
            result: Any = " ".join(
                _join_token(self._resolve_token(token, props)) for token in value.split()
            )
        else:
            result = self._resolve_token(value, props)

        cache.store(value, result)
        return result

    def _resolve_token(self, value: Any, props: Props) -> Any:
        variants = get_theme_value(props, self.key) if self.key is not None else None
        if variants is None:
            variants = self.default_variants

        result = None
        if variants is not None:
            result = get_theme_value(props, "default" if value is True else value, variants)
        if result is None:
            result = value

        transform = self._get_transform(props)
        if transform is not None:
            result = transform(
                result, TransformContext(raw_value=value, variants=variants, props=props)
            )

        if self.compose is not None:
            return self.compose(result)(props)
        return result

    def _get_transform(self, props: Props) -> TransformValue | None:
        if self.name is not None:
            transformers = theme_field(get_theme(props), "transformers") or {}
            override = transformers.get(self.name)
            if override is not None:
                return override
        return self.transform


def theme_getter(
    *,
    name: str | None = None,
    key: str | None = None,
    transform: TransformValue | None = None,
    default_variants: Mapping[str, Any] | None = None,
    compose: ThemeGetter | None = None,
    shorthand: bool = False,
) -> ThemeGetter:
    """Create a ThemeGetter. See ThemeGetter.__init__ for arguments."""
    return ThemeGetter(
        name=name,
        key=key,
        transform=transform,
        default_variants=default_variants,
        compose=compose,
        shorthand=shorthand,
    )


__all__ = ["ThemeGetter", "TransformContext", "TransformValue", "theme_getter"]
