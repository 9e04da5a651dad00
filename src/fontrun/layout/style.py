"""Text styles and their YAML configuration."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from fontrun.core.config import read_yaml, validate_payload


DEFAULT_FONT_SIZE = 11.0


@dataclass(frozen=True, slots=True)
class TextStyle:
    """Font preferences applied to a run of text."""

    font_size: float = DEFAULT_FONT_SIZE
    classes: tuple[str, ...] = ()
    fallback: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.font_size > 0:
            raise ValueError(f"font_size must be positive, got {self.font_size!r}")

    @classmethod
    def create(
        cls,
        font_size: float = DEFAULT_FONT_SIZE,
        classes: Iterable[str] = (),
        fallback: Iterable[str] = (),
    ) -> TextStyle:
        return cls(float(font_size), tuple(classes), tuple(fallback))


class TextStyleConfig(BaseModel):
    """Style payload accepted from YAML files or CLI overrides."""

    model_config = ConfigDict(extra="forbid")

    font_size: float = Field(default=DEFAULT_FONT_SIZE, gt=0)
    classes: list[str] = Field(default_factory=list)
    fallback: list[str] = Field(default_factory=list)

    def to_style(self) -> TextStyle:
        return TextStyle.create(self.font_size, self.classes, self.fallback)


def load_style(source: Path | str | Mapping[str, Any] | None = None) -> TextStyle:
    """Build a ``TextStyle`` from a YAML file, a mapping, or defaults."""
    if source is None:
        return TextStyleConfig().to_style()
    if isinstance(source, Mapping):
        return validate_payload(TextStyleConfig, source, origin="style").to_style()
    path = Path(source)
    return validate_payload(TextStyleConfig, read_yaml(path), origin=str(path)).to_style()


__all__ = ["DEFAULT_FONT_SIZE", "TextStyle", "TextStyleConfig", "load_style"]
