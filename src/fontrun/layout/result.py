"""The finished layout of a run of text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TextIO

from fontrun.core.size import Size, Size2D
from fontrun.layout.actions import (
    LayoutAction,
    WriteText,
    action_to_dict,
    format_number,
    serialize_actions,
)


@dataclass(frozen=True, slots=True)
class Layout:
    """Dimensions plus the ordered actions that render the text."""

    dimensions: Size2D
    actions: tuple[LayoutAction, ...] = ()
    debug_render: bool = False

    @property
    def width(self) -> Size:
        return self.dimensions.x

    @property
    def height(self) -> Size:
        return self.dimensions.y

    def text(self) -> str:
        """Concatenate every written run; equals the laid-out input."""
        return "".join(action.text for action in self.actions if isinstance(action, WriteText))

    def serialize(self, stream: TextIO) -> None:
        """Write the dimensions line followed by one line per action."""
        width = format_number(self.width.to_pt())
        height = format_number(self.height.to_pt())
        stream.write(f"{width} {height}\n")
        serialize_actions(self.actions, stream)

    def to_dict(self) -> dict[str, Any]:
        return {
            "width": self.width.to_pt(),
            "height": self.height.to_pt(),
            "debug_render": self.debug_render,
            "actions": [action_to_dict(action) for action in self.actions],
        }


__all__ = ["Layout"]
