"""
Breakpoint reduction and media-query ordering.

Responsive prop values map breakpoint names to raw values:

    {"xs": "1rem", "md": "2rem"}

reduce_breakpoints() turns such a map into one style object: base-tier
styles merged at the top level, every other tier nested under its
`@media (min-width: ...px)` key. Media keys follow the order of the input
map; order_media_keys() later restores theme breakpoint order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from .cache import CacheNamespace, get_cache_namespace
from .generator import Style
from .theme import Props, get_medias, get_theme
from .values import assign, deep_merge

logger = logging.getLogger(__name__)

MEDIAS_KEY = "_medias"
MEDIAS_NAMESPACE = "__medias"


def get_cached_medias(props: Props, cache: CacheNamespace) -> dict[str, str | None]:
    """Breakpoint name -> media query, computed once per theme and namespace."""
    return cache.derived(MEDIAS_KEY, lambda: get_medias(props))


def _identity(value: Any) -> Any:
    return value


def reduce_breakpoints(
    props: Props,
    values: Mapping[str, Any],
    get_style: Callable[[Any], Style | None] = _identity,
    cache: CacheNamespace | None = None,
) -> Style:
    """
    Reduce a responsive value map into a style object.

    Args:
        props: Props bag (provides the theme)
        values: Breakpoint name -> raw value
        get_style: Turns one raw value into a style object (None to skip)
        cache: Namespace used to memoize the theme's media lookup

    Returns:
        Style object with base-tier declarations and media-query buckets
    """
    medias = get_cached_medias(props, cache) if cache is not None else get_medias(props)
    styles: Style = {}
    for breakpoint, value in values.items():
        style = get_style(value)
        if style is None:
            continue
        if breakpoint not in medias:
            logger.debug(f"Unknown breakpoint {breakpoint!r} ignored")
            continue
        media = medias[breakpoint]
        if media is None:
            styles = deep_merge(styles, style)
        else:
            styles[media] = assign(dict(styles.get(media, {})), style)
    return styles


def order_media_keys(styles: Style, props: Props) -> Style:
    """
    Move breakpoint media keys after plain declarations, in theme order.

    Keys that are not breakpoint media queries (declarations, pseudo-selectors,
    other at-rules) keep their relative order at the front.
    """
    theme = get_theme(props)
    medias = get_cached_medias(props, get_cache_namespace(theme, MEDIAS_NAMESPACE))
    ordered_medias = [media for media in dict.fromkeys(medias.values()) if media is not None]
    present = [media for media in ordered_medias if media in styles]
    if not present:
        return styles

    media_keys = set(present)
    result: Style = {key: value for key, value in styles.items() if key not in media_keys}
    for media in present:
        result[media] = styles[media]
    return result


__all__ = [
    "MEDIAS_KEY",
    "get_cached_medias",
    "reduce_breakpoints",
    "order_media_keys",
]
