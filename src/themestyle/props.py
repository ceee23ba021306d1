"""
Built-in themed getters and style generators.

Scale keys follow the usual theme layout:

- colors: color tokens
- space: spacing scale (numbers become px)
- radii, fontSizes: px scales
- fonts, shadows, zIndices: plain lookups

Declarations are written with kebab-case CSS names.
"""

from __future__ import annotations

from typing import Any

from .getter import TransformContext, theme_getter
from .style import compose, style
from .theme import get_theme_value
from .values import is_number

# =============================================================================
# Transforms
# =============================================================================


def px(value: Any, context: TransformContext | None = None) -> Any:
    """
    Examples:
        >>> px(4)
        '4px'

        >>> px(0)
        0

        >>> px("1rem")
        '1rem'
    """
    if is_number(value) and value != 0:
        return f"{value}px"
    return value


def _negate(value: Any) -> Any:
    if is_number(value):
        return -value
    if isinstance(value, str):
        return value[1:] if value.startswith("-") else f"-{value}"
    return value


def space(value: Any, context: TransformContext) -> Any:
    """Spacing transform: "-sm" negates the "sm" scale value; numbers become px."""
    raw = context.raw_value
    if value == raw and isinstance(raw, str) and raw.startswith("-") and context.variants is not None:
        base = get_theme_value(context.props, raw[1:], context.variants)
        if base is not None:
            return px(_negate(base))
    return px(value)


# =============================================================================
# Getters
# =============================================================================

get_px = theme_getter(name="px", transform=px)
get_color = theme_getter(name="color", key="colors")
get_space = theme_getter(name="space", key="space", transform=space, shorthand=True)
get_radius = theme_getter(name="radius", key="radii", transform=px)
get_font_size = theme_getter(name="fontSize", key="fontSizes", transform=px)
get_font = theme_getter(name="font", key="fonts")
get_shadow = theme_getter(name="shadow", key="shadows")
get_z_index = theme_getter(name="zIndex", key="zIndices")

# =============================================================================
# Generators
# =============================================================================

color = style(prop="color", theme_get=get_color)
background_color = style(
    prop=["bg", "backgroundColor"], css_property="background-color", theme_get=get_color
)

margin = style(prop=["m", "margin"], css_property="margin", theme_get=get_space)
margin_x = style(prop="mx", css_property=["margin-left", "margin-right"], theme_get=get_space)
margin_y = style(prop="my", css_property=["margin-top", "margin-bottom"], theme_get=get_space)
padding = style(prop=["p", "padding"], css_property="padding", theme_get=get_space)
padding_x = style(prop="px", css_property=["padding-left", "padding-right"], theme_get=get_space)
padding_y = style(prop="py", css_property=["padding-top", "padding-bottom"], theme_get=get_space)

font_size = style(prop="fontSize", css_property="font-size", theme_get=get_font_size)
font_family = style(prop="fontFamily", css_property="font-family", theme_get=get_font)
border_radius = style(prop="borderRadius", css_property="border-radius", theme_get=get_radius)
box_shadow = style(prop="boxShadow", css_property="box-shadow", theme_get=get_shadow)
width = style(prop=["w", "width"], css_property="width", theme_get=get_px)
height = style(prop=["h", "height"], css_property="height", theme_get=get_px)
z_index = style(prop="zIndex", css_property="z-index", theme_get=get_z_index)

system = compose(
    color,
    background_color,
    margin,
    margin_x,
    margin_y,
    padding,
    padding_x,
    padding_y,
    font_size,
    font_family,
    border_radius,
    box_shadow,
    width,
    height,
    z_index,
)


__all__ = [
    "px",
    "space",
    "get_px",
    "get_color",
    "get_space",
    "get_radius",
    "get_font_size",
    "get_font",
    "get_shadow",
    "get_z_index",
    "color",
    "background_color",
    "margin",
    "margin_x",
    "margin_y",
    "padding",
    "padding_x",
    "padding_y",
    "font_size",
    "font_family",
    "border_radius",
    "box_shadow",
    "width",
    "height",
    "z_index",
    "system",
]
