"""Font loading, class-tag matching, and the lock guarding shared access."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass
import logging
from threading import RLock

from fontrun.fonts.query import FontQuery
from fontrun.fonts.source import Font, FontHandle


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FontEntry:
    """A font face together with the class tags it advertises."""

    face: Font
    classes: frozenset[str]

    @classmethod
    def create(cls, face: Font, classes: Iterable[str]) -> FontEntry:
        return cls(face=face, classes=frozenset(classes))

    def matches(self, query: FontQuery) -> bool:
        if not self.classes.issuperset(query.classes):
            return False
        cmap = self.face.character_map()
        return all(char in cmap for char in query.chars)


class FontLoader:
    """Resolve font queries against an ordered list of registered faces.

    Faces are tried in registration order and the first one carrying every
    queried class tag and covering every queried character wins. Handles are
    handed out the first time a face is selected and stay fixed for the
    lifetime of the loader.
    """

    def __init__(self, entries: Iterable[FontEntry] = ()) -> None:
        self._entries: list[FontEntry] = list(entries)
        self._handles: dict[int, FontHandle] = {}
        self._resolved: dict[FontQuery, int | None] = {}

    @property
    def entries(self) -> Sequence[FontEntry]:
        return tuple(self._entries)

    def add(self, face: Font, classes: Iterable[str]) -> FontEntry:
        entry = FontEntry.create(face, classes)
        self._entries.append(entry)
        # A new face may satisfy queries that previously failed.
        self._resolved = {
            query: position for query, position in self._resolved.items() if position is not None
        }
        return entry

    def handle_for(self, position: int) -> FontHandle:
        handle = self._handles.get(position)
        if handle is None:
            handle = len(self._handles)
            self._handles[position] = handle
            logger.debug(
                "Assigned handle %d to font #%d (%s)",
                handle,
                position,
                sorted(self._entries[position].classes),
            )
        return handle

    def resolve(self, query: FontQuery) -> tuple[Font, FontHandle] | None:
        if query in self._resolved:
            position = self._resolved[query]
        else:
            position = next(
                (index for index, entry in enumerate(self._entries) if entry.matches(query)),
                None,
            )
            self._resolved[query] = position
        if position is None:
            logger.debug("No font matches %s", query)
            return None
        return self._entries[position].face, self.handle_for(position)

    def __len__(self) -> int:
        return len(self._entries)


class SharedFontLoader:
    """Serialise access to a ``FontLoader`` shared between layout calls."""

    def __init__(self, loader: FontLoader | None = None) -> None:
        self._loader = loader if loader is not None else FontLoader()
        self._lock = RLock()

    @contextmanager
    def borrow(self) -> Iterator[FontLoader]:
        """Hold the loader exclusively for the duration of the block."""
        with self._lock:
            yield self._loader

    def resolve(self, query: FontQuery) -> tuple[Font, FontHandle] | None:
        with self.borrow() as loader:
            return loader.resolve(query)


__all__ = ["FontEntry", "FontLoader", "SharedFontLoader"]
