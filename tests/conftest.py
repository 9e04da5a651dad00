from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
import pytest

from fontrun.fonts.query import FontQuery
from fontrun.fonts.source import FontMetrics, GlyphMetrics


@dataclass
class FakeFont:
    """In-memory font: ``advances`` maps characters to advance widths."""

    name: str
    advances: Mapping[str, int]
    units_per_em: int = 1000
    drop_metrics: bool = False

    def metrics(self) -> FontMetrics:
        return FontMetrics(units_per_em=self.units_per_em)

    def character_map(self) -> Mapping[str, str]:
        return {char: f"{self.name}.{ord(char):04X}" for char in self.advances}

    def horizontal_metrics(self) -> Mapping[str, GlyphMetrics]:
        if self.drop_metrics:
            return {}
        return {
            f"{self.name}.{ord(char):04X}": GlyphMetrics(advance_width=advance)
            for char, advance in self.advances.items()
        }


@dataclass
class RecordingSource:
    """Font source resolving through a callback and recording every query."""

    pick: Callable[[FontQuery], tuple[FakeFont, int] | None]
    queries: list[FontQuery] = field(default_factory=list)

    def resolve(self, query: FontQuery) -> tuple[FakeFont, int] | None:
        self.queries.append(query)
        return self.pick(query)


@pytest.fixture
def lower_font() -> FakeFont:
    return FakeFont("lower", {char: 500 for char in "abcdefghijklmnopqrstuvwxyz "})


@pytest.fixture
def upper_font() -> FakeFont:
    advances = {char: 700 for char in "ABCDEFGHIJKLMNOPQRSTUVWXYZ"}
    return FakeFont("upper", advances, units_per_em=2000)


def build_ttf(
    path: Path,
    advances: Mapping[str, int],
    *,
    units_per_em: int = 1000,
    family: str = "Fixture",
) -> Path:
    """Write a minimal TrueType font covering ``advances`` to ``path``."""
    glyph_names = {char: f"uni{ord(char):04X}" for char in advances}
    glyph_order = [".notdef", *glyph_names.values()]

    builder = FontBuilder(units_per_em, isTTF=True)
    builder.setupGlyphOrder(glyph_order)
    builder.setupCharacterMap({ord(char): name for char, name in glyph_names.items()})
    builder.setupGlyf({name: TTGlyphPen(None).glyph() for name in glyph_order})
    metrics = {".notdef": (units_per_em // 2, 0)}
    metrics.update({glyph_names[char]: (advance, 0) for char, advance in advances.items()})
    builder.setupHorizontalMetrics(metrics)
    builder.setupHorizontalHeader(ascent=int(units_per_em * 0.8), descent=-int(units_per_em * 0.2))
    builder.setupNameTable({"familyName": family, "styleName": "Regular"})
    builder.setupOS2()
    builder.setupPost()
    builder.setupMaxp()
    builder.save(str(path))
    return path


@pytest.fixture
def font_dir(tmp_path: Path) -> Path:
    """Directory with a lowercase font, an uppercase font and a manifest."""
    directory = tmp_path / "fonts"
    directory.mkdir()
    build_ttf(
        directory / "Lower-Regular.ttf",
        {char: 500 for char in "abcdefghijklmnopqrstuvwxyz "},
        family="Lower",
    )
    build_ttf(
        directory / "Upper-Regular.ttf",
        {char: 1400 for char in "ABCDEFGHIJKLMNOPQRSTUVWXYZ"},
        units_per_em=2048,
        family="Upper",
    )
    (tmp_path / "fonts.yaml").write_text(
        """\
directory: fonts
fonts:
  - file: Lower-Regular.ttf
    classes: [regular, lower]
  - file: Upper-Regular.ttf
    classes: [regular, upper]
""",
        encoding="utf-8",
    )
    return directory
