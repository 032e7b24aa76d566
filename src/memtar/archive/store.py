"""In-memory archive store implementation."""

import logging
from typing import Iterator, Optional, assert_never

from .models import ArchiveStats, Entry, FileType

logger = logging.getLogger(__name__)


class Archive:
    """Ordered, append-only collection of archive entries.

    Entries keep their insertion order and names are not required to be
    unique. Lookups resolve to the first matching entry. The archive has no
    internal locking; callers sharing one instance across threads must
    serialize access themselves.
    """

    def __init__(self) -> None:
        """Initialize an empty archive."""
        self._entries: list[Entry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.get_entries())

    def __repr__(self) -> str:
        return f"Archive(entries={len(self._entries)})"

    def _append(self, entry: Entry) -> Entry:
        self._entries.append(entry)
        logger.debug(
            "Added %s entry %r (%d bytes)",
            entry.file_type.value,
            entry.name,
            entry.size,
        )
        return entry

    def add_file(self, name: str, content: str) -> Entry:
        """Append a regular file entry.

        Args:
            name: Entry name, stored as given
            content: File content

        Returns:
            The appended entry
        """
        return self._append(Entry.file(name, content))

    def add_directory(self, name: str) -> Entry:
        """Append a directory entry.

        Args:
            name: Entry name, stored as given

        Returns:
            The appended entry
        """
        return self._append(Entry.directory(name))

    def add_symlink(self, name: str) -> Entry:
        """Append a symlink placeholder entry (no target, no data)."""
        return self._append(Entry.symlink(name))

    def count(self) -> int:
        """Return the number of entries."""
        return len(self._entries)

    def get_entries(self) -> tuple[Entry, ...]:
        """Return an immutable snapshot of all entries in insertion order."""
        return tuple(self._entries)

    def list_names(self) -> list[str]:
        """Return entry names in insertion order."""
        return [entry.name for entry in self._entries]

    def find_entry(self, name: str) -> Optional[Entry]:
        """Find the first entry with exactly the given name.

        Args:
            name: Entry name (case-sensitive, no normalization)

        Returns:
            Matching entry, or None if no entry has that name
        """
        for entry in self._entries:
            if entry.name == name:
                return entry
        return None

    def get_stats(self) -> ArchiveStats:
        """Compute archive statistics from the current entries.

        Symlink entries count toward ``total_entries`` only.

        Returns:
            ArchiveStats snapshot
        """
        file_count = 0
        directory_count = 0
        total_size = 0

        for entry in self._entries:
            file_type = entry.file_type
            if file_type is FileType.NORMAL:
                file_count += 1
                total_size += entry.size
            elif file_type is FileType.DIRECTORY:
                directory_count += 1
            elif file_type is FileType.SYMLINK:
                pass
            else:
                assert_never(file_type)

        return ArchiveStats(
            total_entries=len(self._entries),
            file_count=file_count,
            directory_count=directory_count,
            total_size=total_size,
        )
