"""
Style generators: props bag -> style object, plus the prop names they read.

A StyleGenerator is an immutable record built once at setup time. Leaf
generators read a single prop; composed generators also carry the flat list
of leaf generators they dispatch to (see themestyle.style.compose).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from .theme import Props

Style = dict[str, Any]
StyleGetter = Callable[[Props], Style | None]


@dataclass(frozen=True, eq=False)
class StyleGenerator:
    """A style function paired with its metadata. Compared by identity."""

    get_style: StyleGetter
    props: tuple[str, ...]
    generators: tuple[StyleGenerator, ...] | None = None

    def __call__(self, props: Props) -> Style | None:
        return self.get_style(props)

    @property
    def is_composed(self) -> bool:
        return self.generators is not None

    def __repr__(self) -> str:
        kind = (
            f"composed, {len(self.generators)} generators"
            if self.is_composed
            else "leaf"
        )
        return f"StyleGenerator({kind}, {len(self.props)} props)"


def create_style_generator(
    get_style: StyleGetter,
    props: Iterable[str],
    generators: Iterable[StyleGenerator] | None = None,
) -> StyleGenerator:
    return StyleGenerator(
        get_style=get_style,
        props=tuple(props),
        generators=tuple(generators) if generators is not None else None,
    )


__all__ = ["Style", "StyleGetter", "StyleGenerator", "create_style_generator"]
