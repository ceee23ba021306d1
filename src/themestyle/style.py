"""
Style generator construction and composition.

style() builds the generator for one CSS concern, including automatic
pseudo-state variants:

    color = style(prop="color", key="colors")
    color({"theme": theme, "color": "primary"})
    # -> {"color": "#0066cc"}
    color({"theme": theme, "hoverColor": "primary"})
    # -> {"&:hover": {"color": "#0066cc"}}

compose() merges many generators into one that dispatches each present prop
to the generator declaring it.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from .breakpoints import order_media_keys, reduce_breakpoints
from .cache import MISSING, CacheNamespace, get_cache_namespace
from .generator import Style, StyleGenerator, StyleGetter, create_style_generator
from .getter import ThemeGetter, TransformValue, theme_getter
from .states import STATE_NAMES, STATES, state_prop_name
from .theme import Props, get_theme
from .values import ValueKind, classify, deep_merge, is_number, is_string

logger = logging.getLogger(__name__)


def style_from_value(
    css_properties: Sequence[str],
    value: Any,
    props: Props,
    theme_get: ThemeGetter,
    cache: CacheNamespace,
) -> Style | None:
    """Resolve one scalar value into {css_property: resolved, ...}."""
    if classify(value) is not ValueKind.SCALAR:
        return None
    cached = cache.lookup(value)
    if cached is not MISSING:
        return cached

    computed = theme_get(value)(props)
    if not is_string(computed) and not is_number(computed):
        return None
    style = {css_property: computed for css_property in css_properties}
    cache.store(value, style)
    return style


def get_style_factory(
    prop: str,
    css_properties: Sequence[str],
    theme_get: ThemeGetter,
) -> StyleGetter:
    """Build the style function reading a single prop."""
    # Per-prop namespace, qualified so generators sharing a prop name but not
    # their declarations or resolver never share entries
    namespace = f"{prop}|{theme_get.namespace}|{','.join(css_properties)}"

    def get_style(props: Props) -> Style | None:
        value = props.get(prop)
        kind = classify(value)
        if kind is ValueKind.ABSENT:
            return None
        cache = get_cache_namespace(get_theme(props), namespace)

        if kind is ValueKind.RESPONSIVE:
            return reduce_breakpoints(
                props,
                value,
                lambda breakpoint_value: style_from_value(
                    css_properties, breakpoint_value, props, theme_get, cache
                ),
                cache,
            )

        return style_from_value(css_properties, value, props, theme_get, cache)

    return get_style


def get_state_style_factory(state: str, get_style: StyleGetter) -> StyleGetter:
    """Wrap a style function's output under the state's selector."""
    selector = STATES[state]

    def get_state_style(props: Props) -> Style | None:
        result = get_style(props)
        if result is None:
            return None
        return {selector: result}

    return get_state_style


def index_generators_by_prop(generators: Sequence[StyleGenerator]) -> dict[str, StyleGenerator]:
    """Prop name -> generator declaring it. The last declaration wins."""
    index: dict[str, StyleGenerator] = {}
    for generator in generators:
        for prop in generator.props:
            index[prop] = generator
    return index


def compose(*generators: StyleGenerator | None) -> StyleGenerator:
    """
    Compose style generators into one.

    Composed inputs contribute their own generators instead of themselves, so
    the result only ever holds leaf generators. None inputs are skipped with a
    warning.

    Args:
        *generators: Generators to compose, in precedence order

    Returns:
        Composed StyleGenerator
    """
    flat_generators: list[StyleGenerator] = []
    for generator in generators:
        if generator is None:
            logger.warning('Undefined generator in "compose" method')
            continue
        if generator.generators is not None:
            flat_generators.extend(generator.generators)
        else:
            flat_generators.append(generator)

    generators_by_prop = index_generators_by_prop(flat_generators)

    def get_style(props: Props) -> Style:
        styles: Style = {}
        for prop in props:
            generator = generators_by_prop.get(prop)
            if generator is not None:
                deep_merge(styles, generator(props))
        return order_media_keys(styles, props)

    prop_names = [prop for generator in flat_generators for prop in generator.props]
    return create_style_generator(get_style, prop_names, flat_generators)


def _as_list(value: str | Sequence[str]) -> list[str]:
    if isinstance(value, str):
        return [value]
    return list(value)


def style(
    *,
    prop: str | Sequence[str],
    css_property: str | Sequence[str] | None = None,
    key: str | None = None,
    transform: TransformValue | None = None,
    theme_get: ThemeGetter | None = None,
) -> StyleGenerator:
    """
    Create the style generator for one CSS concern.

    Args:
        prop: Prop name, or several prop names writing the same declarations
        css_property: Declaration key(s) written (default: the prop name(s))
        key: Theme scale key used when no theme_get is given
        transform: Transform used when no theme_get is given
        theme_get: Ready-made resolver

    Returns:
        Composed generator handling the prop and all its state variants
    """
    if not isinstance(prop, str):
        css_properties = _as_list(css_property) if css_property else list(prop)
        return compose(
            *(
                style(
                    prop=single_prop,
                    css_property=css_properties,
                    key=key,
                    transform=transform,
                    theme_get=theme_get,
                )
                for single_prop in prop
            )
        )

    css_properties = _as_list(css_property) if css_property else [prop]
    theme_get = theme_get or theme_getter(key=key, transform=transform)

    generators: list[StyleGenerator] = []
    for state in STATE_NAMES:
        state_prop = state_prop_name(state, prop)
        get_style = get_state_style_factory(
            state, get_style_factory(state_prop, css_properties, theme_get)
        )
        generators.append(create_style_generator(get_style, [state_prop]))

    generators.append(
        create_style_generator(get_style_factory(prop, css_properties, theme_get), [prop])
    )
    return compose(*generators)


__all__ = [
    "compose",
    "get_style_factory",
    "get_state_style_factory",
    "index_generators_by_prop",
    "style",
    "style_from_value",
]
