"""
themestyle - responsive, theme-aware style resolution.

Turns declarative prop values into style objects: values are looked up in
theme scales, responsive values are split into media-query buckets, pseudo
states are expanded automatically, and everything is memoized per theme.

    from themestyle import Theme, compose, style

    color = style(prop="color", key="colors")
    margin = style(prop=["m", "margin"], css_property="margin", key="space")
    generator = compose(color, margin)

    generator({"theme": theme, "color": "primary", "m": {"xs": 1, "md": 2}})
"""

from ._version import __version__
from .breakpoints import order_media_keys, reduce_breakpoints
from .cache import CacheStats, ThemeCache, get_cache_namespace, get_theme_cache
from .errors import ThemeLoadError, ThemeStyleError
from .generator import Style, StyleGenerator, create_style_generator
from .getter import ThemeGetter, TransformContext, theme_getter
from .loader import dump_theme, load_theme, theme_from_dict
from .states import STATES
from .style import compose, style
from .system import StyleSystem, create_system
from .theme import DEFAULT_BREAKPOINTS, Props, Theme, get_theme_value
from .values import ValueKind, classify

__all__ = [
    "__version__",
    # Theme
    "DEFAULT_BREAKPOINTS",
    "Props",
    "Theme",
    "get_theme_value",
    "load_theme",
    "theme_from_dict",
    "dump_theme",
    # Cache
    "CacheStats",
    "ThemeCache",
    "get_theme_cache",
    "get_cache_namespace",
    # Resolution
    "ThemeGetter",
    "TransformContext",
    "theme_getter",
    "ValueKind",
    "classify",
    "reduce_breakpoints",
    "order_media_keys",
    # Generators
    "STATES",
    "Style",
    "StyleGenerator",
    "create_style_generator",
    "compose",
    "style",
    "StyleSystem",
    "create_system",
    # Errors
    "ThemeStyleError",
    "ThemeLoadError",
]
