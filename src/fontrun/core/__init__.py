"""Core value types and the error taxonomy shared by every layer."""

from __future__ import annotations

from fontrun.core.exceptions import (
    ConfigError,
    FontContractError,
    FontrunError,
    FontTableError,
    LayoutError,
    NoSuitableFontError,
)
from fontrun.core.size import Size, Size2D


__all__ = [
    "ConfigError",
    "FontContractError",
    "FontTableError",
    "FontrunError",
    "LayoutError",
    "NoSuitableFontError",
    "Size",
    "Size2D",
]
