"""Primary public API for fontrun."""

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
from fontrun.fonts import (
    FontLoader,
    FontQuery,
    FontSource,
    SharedFontLoader,
    TTFontFace,
    load_manifest,
)
from fontrun.layout import (
    Layout,
    LayoutAction,
    SetFont,
    TextContext,
    TextStyle,
    WriteText,
    layout_text,
    load_style,
)
from fontrun.version import get_version


__version__ = get_version()

__all__ = [
    "ConfigError",
    "FontContractError",
    "FontLoader",
    "FontQuery",
    "FontSource",
    "FontTableError",
    "FontrunError",
    "Layout",
    "LayoutAction",
    "LayoutError",
    "NoSuitableFontError",
    "SetFont",
    "SharedFontLoader",
    "Size",
    "Size2D",
    "TTFontFace",
    "TextContext",
    "TextStyle",
    "WriteText",
    "__version__",
    "layout_text",
    "load_manifest",
    "load_style",
]
