"""Font queries issued by the text layouter."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FontQuery:
    """Characters a font must cover plus the class tags it must carry."""

    chars: frozenset[str]
    classes: tuple[str, ...] = ()

    @classmethod
    def create(cls, chars: Iterable[str], classes: Iterable[str] = ()) -> FontQuery:
        return cls(frozenset(chars), tuple(classes))

    @classmethod
    def for_char(cls, char: str, base: tuple[str, ...], extra: str | None = None) -> FontQuery:
        """Build the query for one character and one fallback attempt.

        ``base`` is never modified; the candidate tag is appended to a fresh
        tuple.
        """
        classes = base if extra is None else (*base, extra)
        return cls(frozenset((char,)), classes)


__all__ = ["FontQuery"]
