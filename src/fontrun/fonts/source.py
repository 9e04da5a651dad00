"""Collaborator contracts between the layouter and font backends."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from fontrun.fonts.query import FontQuery


GlyphId = str | int
FontHandle = int


@dataclass(frozen=True, slots=True)
class FontMetrics:
    """Font-wide metrics; advances are expressed against ``units_per_em``."""

    units_per_em: int


@dataclass(frozen=True, slots=True)
class GlyphMetrics:
    """Horizontal metrics for a single glyph, in font units."""

    advance_width: int


@runtime_checkable
class Font(Protocol):
    """Read-only view over the tables the layouter needs."""

    def metrics(self) -> FontMetrics: ...

    def character_map(self) -> Mapping[str, GlyphId]: ...

    def horizontal_metrics(self) -> Mapping[GlyphId, GlyphMetrics]: ...


@runtime_checkable
class FontSource(Protocol):
    """Resolve a query to a font and a handle that is stable for the session."""

    def resolve(self, query: FontQuery) -> tuple[Font, FontHandle] | None: ...


__all__ = ["Font", "FontHandle", "FontMetrics", "FontSource", "GlyphId", "GlyphMetrics"]
