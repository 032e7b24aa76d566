"""Data models for archive entries."""

from dataclasses import dataclass
from enum import Enum


class FileType(Enum):
    """Entry type tag."""

    NORMAL = "normal"
    DIRECTORY = "directory"
    SYMLINK = "symlink"  # Placeholder only, carries no link target


@dataclass(frozen=True)
class EntryHeader:
    """Metadata describing an entry, independent of its payload."""

    name: str
    size: int
    file_type: FileType


@dataclass(frozen=True)
class Entry:
    """A named unit held by an archive.

    Use the ``file``/``directory``/``symlink`` constructors so that
    ``header.size`` always matches ``data``.
    """

    header: EntryHeader
    data: str = ""

    def __post_init__(self) -> None:
        if self.header.file_type is FileType.NORMAL:
            expected = len(self.data)
        else:
            expected = 0
            if self.data:
                raise ValueError(f"{self.header.file_type.value} entry cannot hold data")
        if self.header.size != expected:
            raise ValueError(
                f"Header size {self.header.size} does not match content size {expected}"
            )

    @classmethod
    def file(cls, name: str, content: str) -> "Entry":
        """Create a regular file entry sized from its content."""
        return cls(EntryHeader(name, len(content), FileType.NORMAL), content)

    @classmethod
    def directory(cls, name: str) -> "Entry":
        """Create a directory entry with empty data."""
        return cls(EntryHeader(name, 0, FileType.DIRECTORY))

    @classmethod
    def symlink(cls, name: str) -> "Entry":
        """Create a symlink placeholder entry."""
        return cls(EntryHeader(name, 0, FileType.SYMLINK))

    @property
    def name(self) -> str:
        return self.header.name

    @property
    def size(self) -> int:
        return self.header.size

    @property
    def file_type(self) -> FileType:
        return self.header.file_type


@dataclass(frozen=True)
class ArchiveStats:
    """Summary of an archive, computed on demand."""

    total_entries: int = 0
    file_count: int = 0
    directory_count: int = 0
    total_size: int = 0
