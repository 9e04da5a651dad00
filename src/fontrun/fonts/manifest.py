"""Font manifests: YAML files listing font files and their class tags.

A manifest is either a list of entries or a mapping with a ``fonts`` list and
an optional ``directory`` that relative file names are resolved against::

    directory: fonts
    fonts:
      - file: NotoSans-Regular.ttf
        classes: [sans-serif, regular]
      - file: NotoSansMath-Regular.ttf
        classes: [math, regular]

Entry order is the priority order used by ``FontLoader``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from fontrun.core.config import read_yaml, validate_payload
from fontrun.core.exceptions import ConfigError
from fontrun.fonts.loader import FontEntry, FontLoader
from fontrun.fonts.ttfont import TTFontFace


class FontManifestEntry(BaseModel):
    """One font file and the class tags it advertises."""

    model_config = ConfigDict(extra="forbid")

    file: str = Field(min_length=1)
    classes: list[str] = Field(default_factory=list)
    font_number: int = -1


class FontManifest(BaseModel):
    """Top-level manifest payload."""

    model_config = ConfigDict(extra="forbid")

    directory: str | None = None
    fonts: list[FontManifestEntry] = Field(default_factory=list)


def parse_manifest(payload: Any, *, origin: str = "font manifest") -> FontManifest:
    if isinstance(payload, list):
        payload = {"fonts": payload}
    return validate_payload(FontManifest, payload, origin=origin)


def manifest_entries(manifest: FontManifest, base_dir: Path) -> list[FontEntry]:
    root = base_dir
    if manifest.directory:
        root = (base_dir / manifest.directory).expanduser()
    entries: list[FontEntry] = []
    for item in manifest.fonts:
        path = Path(item.file).expanduser()
        if not path.is_absolute():
            path = root / path
        if not path.exists():
            raise ConfigError(f"Font file '{path}' listed in the manifest does not exist.")
        face = TTFontFace(path, font_number=item.font_number)
        entries.append(FontEntry.create(face, item.classes))
    return entries


def load_manifest(path: Path | str) -> FontLoader:
    """Read a manifest file and return a loader over its fonts."""
    source = Path(path)
    manifest = parse_manifest(read_yaml(source), origin=str(source))
    return FontLoader(manifest_entries(manifest, source.parent))


__all__ = [
    "FontManifest",
    "FontManifestEntry",
    "load_manifest",
    "manifest_entries",
    "parse_manifest",
]
