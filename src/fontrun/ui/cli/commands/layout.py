"""Implementation of the ``fontrun layout`` command."""

from __future__ import annotations

import json
from pathlib import Path
import sys
from typing import Annotated

import typer

from fontrun.core.exceptions import ConfigError, FontTableError, NoSuitableFontError
from fontrun.fonts.loader import SharedFontLoader
from fontrun.fonts.manifest import load_manifest
from fontrun.layout.actions import SetFont, WriteText
from fontrun.layout.result import Layout
from fontrun.layout.style import TextStyle, load_style
from fontrun.layout.text import TextContext, layout_text

from .._options import (
    ClassOption,
    FallbackOption,
    FontSizeOption,
    FontsManifestOption,
    FormatOption,
    OutputFormat,
    StyleFileOption,
)
from ..state import emit_error, get_cli_state


def _resolve_style(
    style_file: Path | None,
    size: float | None,
    classes: list[str] | None,
    fallback: list[str] | None,
) -> TextStyle:
    if size is not None and size <= 0:
        raise typer.BadParameter("font size must be positive", param_hint="--size")
    base = load_style(style_file)
    return TextStyle.create(
        font_size=size if size is not None else base.font_size,
        classes=classes if classes else base.classes,
        fallback=fallback if fallback else base.fallback,
    )


def _print_table(layout: Layout) -> None:
    from rich import box
    from rich.table import Table

    console = get_cli_state().console
    table = Table(
        title=f"Layout {layout.width} x {layout.height}",
        box=box.SQUARE,
        header_style="bold cyan",
    )
    table.add_column("#", justify="right")
    table.add_column("Action", style="magenta")
    table.add_column("Payload")
    for index, action in enumerate(layout.actions):
        match action:
            case SetFont(handle=handle, size=font_size):
                table.add_row(str(index), "set font", f"handle {handle} at {font_size:g}pt")
            case WriteText(text=text):
                table.add_row(str(index), "write", repr(text))
    console.print(table)


def layout(
    text: Annotated[str, typer.Argument(help="Text to lay out.")],
    fonts: FontsManifestOption,
    style_file: StyleFileOption = None,
    size: FontSizeOption = None,
    classes: ClassOption = None,
    fallback: FallbackOption = None,
    output_format: FormatOption = OutputFormat.text,
) -> None:
    """Lay out TEXT with the fonts of a manifest and print the resulting actions."""
    try:
        style = _resolve_style(style_file, size, classes, fallback)
        loader = SharedFontLoader(load_manifest(fonts))
        result = layout_text(text, TextContext(loader=loader, style=style))
    except NoSuitableFontError as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=1) from exc
    except (ConfigError, FontTableError) as exc:
        emit_error(str(exc), exception=exc)
        raise typer.Exit(code=2) from exc

    if output_format is OutputFormat.json:
        typer.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    elif output_format is OutputFormat.table:
        _print_table(result)
    else:
        result.serialize(sys.stdout)


__all__ = ["layout"]
