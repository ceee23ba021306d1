"""Shared pytest fixtures for themestyle tests."""

from typing import Any

import pytest

from themestyle import Theme


@pytest.fixture
def theme() -> Theme:
    """Return a theme with a base tier and the usual scales."""
    return Theme(
        name="test",
        breakpoints={"xs": 0, "sm": 576, "md": 768, "lg": 992},
        scales={
            "colors": {
                "primary": "#0066cc",
                "secondary": "#6c757d",
                "default": "#212529",
                "red": {"500": "#ef4444"},
            },
            "space": {"sm": 4, "md": 8, "lg": 16},
            "radii": {"sm": 2, "md": 4},
            "fontSizes": {"sm": 12, "base": 16},
            "shadows": {"card": "0 1px 2px rgba(0, 0, 0, 0.1)"},
        },
    )


@pytest.fixture
def media_theme() -> Theme:
    """Return a theme without a base tier: every breakpoint is a media query."""
    return Theme(name="media", breakpoints={"sm": 576, "md": 768, "lg": 992})


@pytest.fixture
def make_props(theme: Theme):
    """Return a helper building a props bag bound to the theme fixture."""

    def _make(**props: Any) -> dict[str, Any]:
        return {"theme": theme, **props}

    return _make
