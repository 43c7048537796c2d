"""Command history kept by the shell."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class HistoryEntry:
    """One command line as typed, together with its words."""

    line: str
    parts: tuple[str, ...]

    def __str__(self) -> str:
        return " ".join(self.parts)


class History:
    """Ordered record of the command lines the shell has run."""

    def __init__(self) -> None:
        self._entries: list[HistoryEntry] = []

    def append(self, line: str, parts: Iterable[str]) -> HistoryEntry:
        """Record a command line at the end of the history."""
        entry = HistoryEntry(line, tuple(parts))
        self._entries.append(entry)
        return entry

    def _index_of(self, line: str) -> int | None:
        return next(
            (index for index, entry in enumerate(self._entries) if entry.line == line),
            None,
        )

    def remove(self, line: str) -> None:
        """Drop the first entry whose line matches; do nothing if none does."""
        index = self._index_of(line)
        if index is not None:
            del self._entries[index]

    def find(self, line: str) -> HistoryEntry | None:
        """Return the first entry whose line matches, or None."""
        index = self._index_of(line)
        return None if index is None else self._entries[index]

    def get(self, n: int) -> HistoryEntry | None:
        """Return the entry at position n (counting from 0), or None."""
        if 0 <= n < len(self._entries):
            return self._entries[n]
        return None

    def first(self) -> HistoryEntry | None:
        return self._entries[0] if self._entries else None

    def last(self) -> HistoryEntry | None:
        return self._entries[-1] if self._entries else None

    def clear(self) -> None:
        self._entries.clear()

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[HistoryEntry]:
        return iter(self._entries)

    def format(self, limit: int | None = -1) -> str:
        """Render the history as numbered lines.

        A limit of -1 (or None) shows every entry; otherwise the entries at
        positions 0 through limit are shown.
        """
        if limit is None or limit == -1:
            selected = self._entries
        elif limit < 0:
            selected = []
        else:
            selected = self._entries[: limit + 1]
        return "".join(
            f"{index}->{''.join(part + ' ' for part in entry.parts)}\n"
            for index, entry in enumerate(selected)
        )