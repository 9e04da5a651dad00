"""YAML loading shared by the style and font manifest parsers."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError
import yaml

from fontrun.core.exceptions import ConfigError


ModelT = TypeVar("ModelT", bound=BaseModel)


def read_yaml(path: Path | str) -> Any:
    """Parse a YAML document, wrapping I/O and syntax failures in ``ConfigError``."""
    source = Path(path)
    try:
        raw = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Unable to read '{source}': {exc.strerror or exc}") from exc
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in '{source}': {exc}") from exc


def validate_payload(model: type[ModelT], payload: Any, *, origin: str) -> ModelT:
    """Validate ``payload`` against ``model`` and report errors with their origin."""
    if payload is None:
        payload = {}
    if not isinstance(payload, Mapping):
        raise ConfigError(f"{origin}: expected a mapping, got {type(payload).__name__}.")
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or '<root>'}: {error['msg']}"
            for error in exc.errors()
        )
        raise ConfigError(f"{origin}: {details}") from exc


__all__ = ["read_yaml", "validate_payload"]
