"""Lay out a run of text left to right, one font per character.

There is no complex layout involved: each character is assigned the first
font of the fallback chain that supports it, advances are summed, and
consecutive characters sharing a font are written as a single run.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
import logging

from fontrun.core.exceptions import FontContractError, NoSuitableFontError
from fontrun.core.size import Size, Size2D
from fontrun.fonts.loader import SharedFontLoader
from fontrun.fonts.query import FontQuery
from fontrun.fonts.source import Font, FontHandle, FontSource
from fontrun.layout.actions import LayoutActionList, SetFont, WriteText
from fontrun.layout.result import Layout
from fontrun.layout.style import TextStyle


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TextContext:
    """Collaborators borrowed for the duration of one layout call."""

    loader: SharedFontLoader | FontSource
    style: TextStyle


def layout_text(text: str, ctx: TextContext) -> Layout:
    """Lay out ``text`` with the fonts and style held by ``ctx``.

    Raises ``NoSuitableFontError`` for the first character no font supports;
    nothing is returned for the characters laid out before it.
    """
    return TextLayouter(text, ctx).layout()


def char_width(font: Font, char: str, font_size: float) -> Size:
    """Advance of ``char`` in ``font`` scaled to ``font_size`` points."""
    font_unit_ratio = 1.0 / font.metrics().units_per_em

    glyph = font.character_map().get(char)
    if glyph is None:
        raise FontContractError(f"font should have char {char!r}")

    glyph_metrics = font.horizontal_metrics().get(glyph)
    if glyph_metrics is None:
        raise FontContractError(f"font should have glyph {glyph!r} for char {char!r}")

    return Size.pt(font_unit_ratio * glyph_metrics.advance_width) * font_size


class TextLayouter:
    """Single-use state machine turning characters into layout actions."""

    def __init__(self, text: str, ctx: TextContext) -> None:
        self.ctx = ctx
        self.text = text
        self.actions = LayoutActionList()
        self.buffer: list[str] = []
        self.active_font: FontHandle | None = None
        self.width = Size.zero()

    def layout(self) -> Layout:
        font_size = self.ctx.style.font_size

        for char in self.text:
            handle, width = self.select_font(char)

            self.width += width

            if self.active_font != handle:
                self._flush()
                self.actions.add(SetFont(handle, font_size))
                self.active_font = handle

            self.buffer.append(char)

        self._flush()

        layout = Layout(
            dimensions=Size2D(self.width, Size.pt(font_size)),
            actions=self.actions.into_tuple(),
            debug_render=False,
        )
        logger.debug(
            "Laid out %d chars into %d actions (%s)",
            len(self.text),
            len(layout.actions),
            layout.width,
        )
        return layout

    def _flush(self) -> None:
        if self.buffer:
            self.actions.add(WriteText("".join(self.buffer)))
            self.buffer = []

    def select_font(self, char: str) -> tuple[FontHandle, Size]:
        """Return the handle of the first font supporting ``char`` and its width."""
        style = self.ctx.style
        candidates: tuple[str | None, ...] = style.fallback or (None,)

        with _borrow(self.ctx.loader) as source:
            for extra in candidates:
                query = FontQuery.for_char(char, style.classes, extra)
                resolved = source.resolve(query)
                if resolved is None:
                    continue
                font, handle = resolved
                return handle, char_width(font, char, style.font_size)

        raise NoSuitableFontError(char)


@contextmanager
def _borrow(loader: SharedFontLoader | FontSource) -> Iterator[FontSource]:
    if isinstance(loader, SharedFontLoader):
        with loader.borrow() as borrowed:
            yield borrowed
    else:
        yield loader


__all__ = ["TextContext", "TextLayouter", "char_width", "layout_text"]
