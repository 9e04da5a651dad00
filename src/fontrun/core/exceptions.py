"""Exception hierarchy for the text layout pipeline."""

from __future__ import annotations


class FontrunError(RuntimeError):
    """Base exception for fontrun failures."""


class LayoutError(FontrunError):
    """Raised when a piece of text cannot be laid out."""


class NoSuitableFontError(LayoutError):
    """Raised when no font in the fallback chain supports a character."""

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"no suitable font for character {char!r} (U+{ord(char):04X})")


class FontTableError(FontrunError):
    """Raised when a font file lacks a table or carries a malformed one."""


class ConfigError(FontrunError):
    """Raised when a style or font manifest cannot be parsed."""


class FontContractError(AssertionError):
    """Raised when a font claims support for a character it cannot measure.

    This signals a defect in the font collaborator rather than a user error
    and is not a ``FontrunError``.
    """


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


def exception_hint(exc: BaseException) -> str | None:
    """Return the most specific message available for an exception chain."""
    messages = exception_messages(exc)
    return messages[-1] if messages else None


__all__ = [
    "ConfigError",
    "FontContractError",
    "FontTableError",
    "FontrunError",
    "LayoutError",
    "NoSuitableFontError",
    "exception_hint",
    "exception_messages",
]
