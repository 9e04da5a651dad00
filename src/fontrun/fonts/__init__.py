"""Font collaborators consumed by the text layouter.

Architecture
: `FontQuery` carries the characters a font must cover and the class tags it
  must advertise. Queries are cheap, hashable values built per attempt.
: `FontSource` and `Font` are the structural contracts the layouter relies on.
  Any object exposing ``resolve`` (respectively ``metrics``/``character_map``/
  ``horizontal_metrics``) can take part.
: `TTFontFace` implements `Font` on top of fontTools, and `FontLoader`
  implements `FontSource` over an ordered list of tagged faces.
  `SharedFontLoader` guards a loader with a lock so several layout calls can
  share it.
: `load_manifest` builds a loader from a YAML manifest.
"""

from fontrun.fonts.loader import FontEntry, FontLoader, SharedFontLoader
from fontrun.fonts.manifest import FontManifest, load_manifest, parse_manifest
from fontrun.fonts.query import FontQuery
from fontrun.fonts.source import Font, FontHandle, FontMetrics, FontSource, GlyphId, GlyphMetrics
from fontrun.fonts.ttfont import TTFontFace


__all__ = [
    "Font",
    "FontEntry",
    "FontHandle",
    "FontLoader",
    "FontManifest",
    "FontMetrics",
    "FontQuery",
    "FontSource",
    "GlyphId",
    "GlyphMetrics",
    "SharedFontLoader",
    "TTFontFace",
    "load_manifest",
    "parse_manifest",
]
