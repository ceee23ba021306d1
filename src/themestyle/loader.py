"""
Theme loading from YAML or JSON files.

File layout (JSON is accepted too, it is a YAML subset):

    name: brand
    breakpoints:
      xs: 0
      sm: 576
      md: 768
    scales:
      colors:
        primary: "#0066cc"
        default: "#212529"
      space: [0, 4, 8, 16, 32]

Transformers are callables and can only be attached in code:
`theme.model_copy(update={"transformers": {...}})`.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import ThemeLoadError
from .theme import Theme

logger = logging.getLogger(__name__)


def theme_from_dict(data: dict[str, Any]) -> Theme:
    """Build a Theme from raw file data.

    Raises:
        ThemeLoadError: If the data does not describe a valid theme.
    """
    if not isinstance(data, dict):
        raise ThemeLoadError(f"Theme data must be a mapping, got {type(data).__name__}")
    if "transformers" in data:
        raise ThemeLoadError("Theme files cannot define transformers")
    try:
        return Theme(**data)
    except ValidationError as e:
        raise ThemeLoadError(f"Invalid theme: {e}") from e
    except TypeError as e:
        raise ThemeLoadError(f"Failed to parse theme: {e}") from e


def load_theme(path: Path) -> Theme:
    """Load a Theme from a YAML or JSON file.

    Args:
        path: Theme file path.

    Returns:
        Theme instance. Each call returns a new instance (and so a new cache).

    Raises:
        ThemeLoadError: If the file is missing, unparsable or invalid.
    """
    if not path.exists():
        raise ThemeLoadError(f"Theme file not found: {path}")

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ThemeLoadError(f"Invalid YAML in {path}: {e}") from e

    if not data:
        raise ThemeLoadError(f"Empty theme file: {path}")

    theme = theme_from_dict(data)
    logger.debug(f"Loaded theme {theme.name!r} from {path} ({len(theme.scales)} scales)")
    return theme


def dump_theme(theme: Theme) -> str:
    """Serialize a Theme (without transformers) back to YAML."""
    data = theme.model_dump(mode="json", exclude={"transformers"})
    return yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)


__all__ = ["load_theme", "theme_from_dict", "dump_theme"]
