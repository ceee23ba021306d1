"""Tests for style() generators."""

import pytest

from themestyle.cache import CacheStats, get_theme_cache
from themestyle.getter import theme_getter
from themestyle.states import STATE_NAMES, STATES, state_prop_name
from themestyle.style import get_style_factory, style

MD = "@media (min-width: 768px)"


@pytest.fixture
def color():
    return style(prop="color", key="colors")


class TestStyleGenerator:
    def test_flat_value(self, color, make_props):
        assert color(make_props(color="primary")) == {"color": "#0066cc"}

    def test_unmapped_value(self, color, make_props):
        assert color(make_props(color="tomato")) == {"color": "tomato"}

    def test_absent_prop(self, color, make_props):
        assert color(make_props()) == {}

    @pytest.mark.parametrize("value", [False, ["primary"]])
    def test_unresolvable_values_contribute_nothing(self, color, make_props, value):
        assert color(make_props(color=value)) == {}

    def test_css_property_override(self, make_props):
        margin_x = style(prop="mx", css_property=["margin-left", "margin-right"], key="space")
        assert margin_x(make_props(mx="md")) == {"margin-left": 8, "margin-right": 8}

    def test_transform(self, make_props):
        radius = style(prop="radius", css_property="border-radius", key="radii",
                       transform=lambda value, ctx: f"{value}px")
        assert radius(make_props(radius="md")) == {"border-radius": "4px"}

    def test_explicit_theme_get(self, make_props):
        getter = theme_getter(key="colors")
        fill = style(prop="fill", theme_get=getter)
        assert fill(make_props(fill="secondary")) == {"fill": "#6c757d"}

    def test_declared_props(self, color):
        assert len(color.props) == len(STATES) + 1
        assert color.props[-1] == "color"
        assert "hoverColor" in color.props
        assert "focusVisibleColor" in color.props
        assert all(not generator.is_composed for generator in color.generators)


class TestMultiProp:
    def test_all_props_write_same_declarations(self, make_props):
        bg = style(prop=["bg", "backgroundColor"], css_property="background-color", key="colors")
        assert bg(make_props(bg="primary")) == {"background-color": "#0066cc"}
        assert bg(make_props(backgroundColor="primary")) == {"background-color": "#0066cc"}

    def test_defaults_to_all_prop_names(self, make_props):
        gen = style(prop=["a", "b"])
        assert gen(make_props(a=1)) == {"a": 1, "b": 1}

    def test_later_prop_wins(self, make_props):
        margin = style(prop=["m", "margin"], css_property="margin")
        assert margin(make_props(m="1px", margin="2px")) == {"margin": "2px"}

    def test_props_cover_every_name(self):
        bg = style(prop=["bg", "backgroundColor"], css_property="background-color")
        assert "hoverBg" in bg.props
        assert "hoverBackgroundColor" in bg.props


class TestStates:
    def test_hover_wraps_declaration(self, color, make_props):
        assert color(make_props(hoverColor="tomato")) == {"&:hover": {"color": "tomato"}}

    def test_nested_scale_entry_yields_nothing(self, color, make_props):
        # colors.red is a table, not a value
        assert color(make_props(hoverColor="red")) == {}

    @pytest.mark.parametrize("state", STATE_NAMES)
    def test_every_state(self, color, make_props, state):
        props = make_props(**{state_prop_name(state, "color"): "primary"})
        assert color(props) == {STATES[state]: {"color": "#0066cc"}}

    def test_base_and_state_together(self, color, make_props):
        assert color(make_props(color="primary", hoverColor="secondary")) == {
            "color": "#0066cc",
            "&:hover": {"color": "#6c757d"},
        }

    def test_responsive_state(self, color, make_props):
        assert color(make_props(hoverColor={"xs": "primary", "md": "secondary"})) == {
            "&:hover": {"color": "#0066cc", MD: {"color": "#6c757d"}},
        }

    def test_state_prop_capitalization(self):
        assert state_prop_name("hover", "backgroundColor") == "hoverBackgroundColor"
        assert state_prop_name("motionSafe", "m") == "motionSafeM"


class TestResponsive:
    def test_breakpoint_values(self, color, make_props):
        styles = color(make_props(color={"xs": "primary", "md": "secondary"}))
        assert styles == {"color": "#0066cc", MD: {"color": "#6c757d"}}

    def test_nested_responsive_skipped(self, color, make_props):
        styles = color(make_props(color={"xs": {"md": "primary"}, "md": "secondary"}))
        assert styles == {MD: {"color": "#6c757d"}}

    def test_media_keys_in_theme_order(self, media_theme):
        color = style(prop="color")
        styles = color({"theme": media_theme, "color": {"lg": "x", "sm": "y"}})
        assert list(styles) == ["@media (min-width: 576px)", "@media (min-width: 992px)"]

    def test_cache_keyed_by_raw_value(self, color, make_props, theme):
        color(make_props(color={"xs": "primary", "md": "primary"}))
        # style miss + getter miss for xs, style hit for md
        assert get_theme_cache(theme).stats() == CacheStats(hits=1, misses=2)


class TestCaching:
    def test_repeat_resolution_hits_cache(self, color, make_props, theme):
        props = make_props(color="primary")
        first = color(props)
        second = color(props)
        assert first == second
        assert get_theme_cache(theme).stats() == CacheStats(hits=1, misses=2)

    def test_results_do_not_alias_cache(self, color, make_props):
        first = color(make_props(hoverColor="primary"))
        first["&:hover"]["color"] = "mutated"
        assert color(make_props(hoverColor="primary")) == {"&:hover": {"color": "#0066cc"}}

    def test_no_theme_still_resolves(self):
        color = style(prop="color")
        assert color({"theme": None, "color": "red"}) == {"color": "red"}

    def test_plain_mapping_theme_resolves_uncached(self):
        color = style(prop="color", key="colors")
        theme = {
            "breakpoints": {"xs": 0, "md": 768},
            "scales": {"colors": {"primary": "#000000"}},
        }
        props = {"theme": theme, "color": {"xs": "primary", "md": "tomato"}}
        expected = {"color": "#000000", MD: {"color": "tomato"}}
        assert color(props) == expected
        assert color(props) == expected
        assert get_theme_cache(theme) is None

    def test_same_prop_different_declarations(self, make_props):
        getter = theme_getter(key="colors")
        text = get_style_factory("color", ["color"], getter)
        fill = get_style_factory("color", ["fill"], getter)
        props = make_props(color="primary")
        assert text(props) == {"color": "#0066cc"}
        assert fill(props) == {"fill": "#0066cc"}
