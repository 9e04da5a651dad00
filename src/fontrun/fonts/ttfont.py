"""fontTools-backed implementation of the ``Font`` contract."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
import logging
from pathlib import Path
from typing import Any

from fontTools.ttLib import TTFont, TTLibError

from fontrun.core.exceptions import FontTableError
from fontrun.fonts.source import FontMetrics, GlyphId, GlyphMetrics


logger = logging.getLogger(__name__)


class _HorizontalMetricsView(Mapping[GlyphId, GlyphMetrics]):
    """Expose an ``hmtx`` table as glyph name -> ``GlyphMetrics``."""

    def __init__(self, table: Any) -> None:
        self._metrics: dict[str, tuple[int, int]] = table.metrics

    def __getitem__(self, glyph: GlyphId) -> GlyphMetrics:
        advance, _lsb = self._metrics[glyph]  # type: ignore[index]
        return GlyphMetrics(advance_width=int(advance))

    def __iter__(self) -> Iterator[GlyphId]:
        return iter(self._metrics)

    def __len__(self) -> int:
        return len(self._metrics)


class TTFontFace:
    """A single face loaded through ``fontTools.ttLib.TTFont``.

    The underlying file is opened on first access and tables are decoded
    lazily, so registering many faces in a loader stays cheap until one of
    them is actually selected.
    """

    def __init__(
        self,
        path: Path | str | None = None,
        *,
        font: TTFont | None = None,
        font_number: int = -1,
        name: str | None = None,
    ) -> None:
        if path is None and font is None:
            raise ValueError("TTFontFace requires either a path or a TTFont instance.")
        self.path = Path(path) if path is not None else None
        self.font_number = font_number
        self._font = font
        self._name = name
        self._metrics: FontMetrics | None = None
        self._cmap: dict[str, GlyphId] | None = None
        self._hmtx: _HorizontalMetricsView | None = None

    @classmethod
    def from_ttfont(cls, font: TTFont, *, name: str | None = None) -> TTFontFace:
        return cls(font=font, name=name)

    @property
    def name(self) -> str:
        if self._name:
            return self._name
        if self.path is not None:
            return self.path.stem
        family = self.ttfont["name"].getBestFamilyName() if "name" in self.ttfont else None
        return family or "<memory>"

    @property
    def ttfont(self) -> TTFont:
        if self._font is None:
            assert self.path is not None
            logger.debug("Opening font file %s", self.path)
            try:
                self._font = TTFont(self.path, lazy=True, fontNumber=self.font_number)
            except (OSError, TTLibError) as exc:
                raise FontTableError(f"Unable to open font '{self.path}': {exc}") from exc
        return self._font

    def _table(self, tag: str) -> Any:
        font = self.ttfont
        if tag not in font:
            raise FontTableError(f"Font '{self.name}' has no '{tag}' table.")
        try:
            return font[tag]
        except (TTLibError, ValueError, KeyError) as exc:
            raise FontTableError(f"Font '{self.name}' has a malformed '{tag}' table.") from exc

    def metrics(self) -> FontMetrics:
        if self._metrics is None:
            units_per_em = int(self._table("head").unitsPerEm)
            if units_per_em <= 0:
                raise FontTableError(
                    f"Font '{self.name}' declares an invalid unitsPerEm of {units_per_em}."
                )
            self._metrics = FontMetrics(units_per_em=units_per_em)
        return self._metrics

    def character_map(self) -> Mapping[str, GlyphId]:
        if self._cmap is None:
            self._table("cmap")
            best = self.ttfont.getBestCmap() or {}
            self._cmap = {chr(codepoint): glyph for codepoint, glyph in best.items()}
        return self._cmap

    def horizontal_metrics(self) -> Mapping[GlyphId, GlyphMetrics]:
        if self._hmtx is None:
            self._hmtx = _HorizontalMetricsView(self._table("hmtx"))
        return self._hmtx

    def supports(self, chars: Iterable[str]) -> bool:
        """Return True when the character map covers every character."""
        cmap = self.character_map()
        return all(char in cmap for char in chars)

    def close(self) -> None:
        if self._font is not None and self.path is not None:
            self._font.close()
            self._font = None
            self._cmap = None
            self._hmtx = None

    def __repr__(self) -> str:
        return f"TTFontFace({self.name!r})"


__all__ = ["TTFontFace"]
