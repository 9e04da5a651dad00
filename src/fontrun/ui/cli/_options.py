"""Shared Typer option definitions for CLI commands."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer


FONTS_PANEL = "Fonts"
STYLE_PANEL = "Style"
OUTPUT_PANEL = "Output"
DIAGNOSTICS_PANEL = "Diagnostics"


class OutputFormat(str, Enum):
    """Renderings available for a finished layout."""

    text = "text"
    json = "json"
    table = "table"


FontsManifestOption = Annotated[
    Path,
    typer.Option(
        "--fonts",
        "-f",
        help="YAML manifest listing font files and their class tags.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
        rich_help_panel=FONTS_PANEL,
    ),
]

StyleFileOption = Annotated[
    Path | None,
    typer.Option(
        "--style",
        "-s",
        help="YAML file providing font_size, classes and fallback.",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
        rich_help_panel=STYLE_PANEL,
    ),
]

FontSizeOption = Annotated[
    float | None,
    typer.Option(
        "--size",
        help="Font size in points (overrides the style file).",
        rich_help_panel=STYLE_PANEL,
    ),
]

ClassOption = Annotated[
    list[str] | None,
    typer.Option(
        "--class",
        "-c",
        help="Primary class tag; repeat to add several (overrides the style file).",
        rich_help_panel=STYLE_PANEL,
    ),
]

FallbackOption = Annotated[
    list[str] | None,
    typer.Option(
        "--fallback",
        "-F",
        help="Fallback class tag, tried in order; repeat to extend the chain.",
        rich_help_panel=STYLE_PANEL,
    ),
]

FormatOption = Annotated[
    OutputFormat,
    typer.Option(
        "--format",
        help="How to print the resulting layout.",
        case_sensitive=False,
        rich_help_panel=OUTPUT_PANEL,
    ),
]

VerbosityOption = Annotated[
    int,
    typer.Option(
        "--verbose",
        "-v",
        count=True,
        help="Increase CLI verbosity. Combine multiple times for additional diagnostics.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]

DebugOption = Annotated[
    bool,
    typer.Option(
        "--debug",
        help="Show full tracebacks when an unexpected error occurs.",
        rich_help_panel=DIAGNOSTICS_PANEL,
    ),
]


__all__ = [
    "ClassOption",
    "DebugOption",
    "FallbackOption",
    "FontSizeOption",
    "FontsManifestOption",
    "FormatOption",
    "OutputFormat",
    "StyleFileOption",
    "VerbosityOption",
]
