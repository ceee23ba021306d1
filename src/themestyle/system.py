"""
Extensible style system facade.

A StyleSystem wraps one composed generator. extend() never mutates: it
returns a new system around compose(current, *generators).

Usage:
    base = StyleSystem(compose(color, margin))
    extended = base.extend(font_size)
    extended({"theme": theme, "color": "primary", "fontSize": "lg"})
"""

from __future__ import annotations

from .generator import Style, StyleGenerator
from .style import compose
from .theme import Props


class StyleSystem:
    """Facade over a composed StyleGenerator, for component bindings."""

    def __init__(self, generator: StyleGenerator):
        self._generator = generator
        self._prop_names = frozenset(generator.props)

    @property
    def generator(self) -> StyleGenerator:
        return self._generator

    @property
    def prop_names(self) -> frozenset[str]:
        """Props consumed by the system (a binding should not forward them)."""
        return self._prop_names

    def handles(self, prop: str) -> bool:
        return prop in self._prop_names

    def extend(self, *generators: StyleGenerator | None) -> StyleSystem:
        """Return a new system composing the current generator with generators."""
        return StyleSystem(compose(self._generator, *generators))

    def __call__(self, props: Props) -> Style | None:
        return self._generator(props)


def create_system(*generators: StyleGenerator | None) -> StyleSystem:
    return StyleSystem(compose(*generators))


__all__ = ["StyleSystem", "create_system"]
