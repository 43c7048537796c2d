"""Table of file descriptors opened by the shell."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class FileEntry:
    """An open descriptor and the mode it was opened with."""

    fd: int
    mode: int


class FileList:
    """Ordered collection of open file descriptors."""

    def __init__(self) -> None:
        self._entries: list[FileEntry] = []

    def insert(self, fd: int, mode: int) -> bool:
        """Add a descriptor at the end of the list."""
        self._entries.append(FileEntry(fd, mode))
        return True

    def remove(self, fd: int) -> None:
        """Remove the descriptor; raise KeyError if it is not in the list."""
        position = self.find(fd)
        if position is None:
            raise KeyError(f"There is not such descriptor on the file list: {fd}")
        del self._entries[position]

    def find(self, fd: int) -> int | None:
        """Return the position of the descriptor, or None."""
        return next(
            (pos for pos, entry in enumerate(self._entries) if entry.fd == fd),
            None,
        )

    def get(self, position: int) -> FileEntry:
        if not 0 <= position < len(self._entries):
            raise IndexError(f"no file entry at position {position}")
        return self._entries[position]

    def first(self) -> int | None:
        return 0 if self._entries else None

    def last(self) -> int | None:
        return len(self._entries) - 1 if self._entries else None

    def clear(self) -> None:
        self._entries.clear()

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[FileEntry]:
        return iter(self._entries)