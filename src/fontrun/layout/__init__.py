"""Text layout: styles, actions, and the font-fallback layouter."""

from fontrun.layout.actions import (
    LayoutAction,
    LayoutActionList,
    SetFont,
    WriteText,
    action_to_dict,
    serialize_action,
    serialize_actions,
)
from fontrun.layout.result import Layout
from fontrun.layout.style import TextStyle, TextStyleConfig, load_style
from fontrun.layout.text import TextContext, TextLayouter, char_width, layout_text


__all__ = [
    "Layout",
    "LayoutAction",
    "LayoutActionList",
    "SetFont",
    "TextContext",
    "TextLayouter",
    "TextStyle",
    "TextStyleConfig",
    "WriteText",
    "action_to_dict",
    "char_width",
    "layout_text",
    "load_style",
    "serialize_action",
    "serialize_actions",
]
