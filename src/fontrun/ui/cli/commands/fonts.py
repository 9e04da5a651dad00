"""CLI helper listing the fonts registered in a manifest."""

from __future__ import annotations

import typer

from fontrun.core.exceptions import ConfigError, FontTableError
from fontrun.fonts.manifest import load_manifest
from fontrun.fonts.ttfont import TTFontFace

from .._options import FontsManifestOption
from ..state import emit_error, emit_warning, get_cli_state


def _format_list(values: list[str]) -> str:
    return ", ".join(values) if values else "-"


def fonts(manifest: FontsManifestOption) -> None:
    """Print the fonts of a manifest in priority order."""
    from rich import box
    from rich.table import Table

    try:
        loader = load_manifest(manifest)
    except ConfigError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=2) from exc

    table = Table(
        title="Registered Fonts",
        box=box.SQUARE,
        show_edge=True,
        header_style="bold cyan",
    )
    table.add_column("#", justify="right")
    table.add_column("Font", style="magenta")
    table.add_column("Classes", style="green")
    table.add_column("Units/em", justify="right")

    if not len(loader):
        table.add_row("-", "-", "No fonts registered", "-")
    for index, entry in enumerate(loader.entries):
        face = entry.face
        name = face.name if isinstance(face, TTFontFace) else repr(face)
        try:
            units = str(face.metrics().units_per_em)
        except FontTableError as exc:
            emit_warning(str(exc), exception=exc)
            units = "?"
        table.add_row(str(index), name, _format_list(sorted(entry.classes)), units)

    get_cli_state().console.print(table)


__all__ = ["fonts"]
