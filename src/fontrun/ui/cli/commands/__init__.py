"""CLI command implementations exposed via `fontrun.ui.cli`."""

from __future__ import annotations

from .fonts import fonts
from .layout import layout


__all__ = ["fonts", "layout"]
