"""Layout actions replayed by renderers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, TextIO

from fontrun.fonts.source import FontHandle


@dataclass(frozen=True, slots=True)
class SetFont:
    """Switch the active rendering font."""

    handle: FontHandle
    size: float


@dataclass(frozen=True, slots=True)
class WriteText:
    """Write a run of characters with the active font."""

    text: str


LayoutAction = SetFont | WriteText


class LayoutActionList:
    """Accumulate actions while skipping font switches that change nothing."""

    def __init__(self) -> None:
        self._actions: list[LayoutAction] = []
        self._active_font: SetFont | None = None

    def add(self, action: LayoutAction) -> None:
        match action:
            case SetFont():
                if action == self._active_font:
                    return
                self._active_font = action
            case WriteText(text=""):
                return
        self._actions.append(action)

    def extend(self, actions: Iterable[LayoutAction]) -> None:
        for action in actions:
            self.add(action)

    def is_empty(self) -> bool:
        return not self._actions

    def into_tuple(self) -> tuple[LayoutAction, ...]:
        return tuple(self._actions)

    def __len__(self) -> int:
        return len(self._actions)


def format_number(value: float) -> str:
    """Shortest round-tripping form of ``value``, without a trailing ``.0``."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def serialize_action(action: LayoutAction) -> str:
    """Return the single-line textual form of ``action``."""
    match action:
        case SetFont(handle=handle, size=size):
            return f"f {handle} {format_number(size)}"
        case WriteText(text=text):
            return f"w {text}"
    raise TypeError(f"Unsupported layout action: {action!r}")


def serialize_actions(actions: Iterable[LayoutAction], stream: TextIO) -> None:
    for action in actions:
        stream.write(serialize_action(action))
        stream.write("\n")


def action_to_dict(action: LayoutAction) -> dict[str, Any]:
    match action:
        case SetFont(handle=handle, size=size):
            return {"action": "set_font", "handle": handle, "size": size}
        case WriteText(text=text):
            return {"action": "write_text", "text": text}
    raise TypeError(f"Unsupported layout action: {action!r}")


__all__ = [
    "LayoutAction",
    "LayoutActionList",
    "SetFont",
    "WriteText",
    "action_to_dict",
    "format_number",
    "serialize_action",
    "serialize_actions",
]
