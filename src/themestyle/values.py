"""
Raw prop value classification and style object merging.

Prop values arrive untyped from the props bag. Every branch in the resolver
and the reducer goes through classify() so the handling is exhaustive:

- ABSENT: None, the prop was not given
- SCALAR: str, int/float (not bool) or the literal True
- RESPONSIVE: a mapping of breakpoint name -> raw value
- OTHER: anything else (False, lists, objects); never resolved
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any


class ValueKind(StrEnum):
    """Kinds of raw prop values."""

    ABSENT = "absent"
    SCALAR = "scalar"
    RESPONSIVE = "responsive"
    OTHER = "other"


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    # bool is an int subclass but never a CSS number
    return isinstance(value, int | float) and not isinstance(value, bool)


def classify(value: Any) -> ValueKind:
    """Classify a raw prop value.

    Examples:
        >>> classify("primary")
        <ValueKind.SCALAR: 'scalar'>

        >>> classify({"xs": 1, "md": 2})
        <ValueKind.RESPONSIVE: 'responsive'>

        >>> classify(False)
        <ValueKind.OTHER: 'other'>
    """
    if value is None:
        return ValueKind.ABSENT
    if isinstance(value, Mapping):
        return ValueKind.RESPONSIVE
    if value is True or is_string(value) or is_number(value):
        return ValueKind.SCALAR
    return ValueKind.OTHER


def assign(acc: dict[str, Any], item: Mapping[str, Any] | None) -> dict[str, Any]:
    """Shallow-assign item into acc (later keys overwrite). Mutates acc."""
    if item is None:
        return acc
    acc.update(item)
    return acc


def deep_merge(acc: dict[str, Any], item: Mapping[str, Any] | None) -> dict[str, Any]:
    """Deep-merge item into acc. Mutates and returns acc.

    When both sides hold a mapping at the same key they are merged key by key;
    otherwise the right side wins. Nested mappings from item are copied, never
    shared, so cached style objects are never mutated through the result.
    """
    if item is None:
        return acc
    for key, value in item.items():
        if isinstance(value, Mapping):
            current = acc.get(key)
            base = dict(current) if isinstance(current, Mapping) else {}
            acc[key] = deep_merge(base, value)
        else:
            acc[key] = value
    return acc


__all__ = [
    "ValueKind",
    "classify",
    "is_string",
    "is_number",
    "assign",
    "deep_merge",
]
