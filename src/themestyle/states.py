"""
Pseudo-states expanded automatically by style().

Each state name prefixes the capitalized base prop to form a derived prop
(`hover` + `color` -> `hoverColor`) whose styles are nested under the state's
selector.
"""

from __future__ import annotations

from typing import Final

STATES: Final[dict[str, str]] = {
    "motionSafe": "@media (prefers-reduced-motion: no-preference)",
    "motionReduce": "@media (prefers-reduced-motion: reduce)",
    "first": "&:first-child",
    "last": "&:last-child",
    "odd": "&:odd",
    "even": "&:even",
    "visited": "&:visited",
    "checked": "&:checked",
    "focusWithin": "&:focus-within",
    "hover": "&:hover",
    "focus": "&:focus",
    "focusVisible": "&:focus-visible",
    "active": "&:active",
    "disabled": "&:disabled",
    "placeholder": "&::placeholder",
}

STATE_NAMES: Final[tuple[str, ...]] = tuple(STATES)


def capitalize_prop(prop: str) -> str:
    # str.capitalize() would lowercase the rest ("backgroundColor")
    return prop[:1].upper() + prop[1:]


def state_prop_name(state: str, prop: str) -> str:
    """
    Examples:
        >>> state_prop_name("hover", "backgroundColor")
        'hoverBackgroundColor'
    """
    return f"{state}{capitalize_prop(prop)}"


__all__ = ["STATES", "STATE_NAMES", "capitalize_prop", "state_prop_name"]
