"""Archive inspection utilities."""

from typing import Optional

from ..archive.models import Entry, FileType
from ..archive.store import Archive
from ..models import ArchiveInspect, EntryInspect
from .digest import entry_digest
from .validator import find_duplicate_names


def get_file_entries(archive: Archive) -> list[Entry]:
    """Return regular file entries in archive order."""
    return [e for e in archive.get_entries() if e.file_type is FileType.NORMAL]


def get_directory_entries(archive: Archive) -> list[Entry]:
    """Return directory entries in archive order."""
    return [e for e in archive.get_entries() if e.file_type is FileType.DIRECTORY]


def get_largest_entry(archive: Archive) -> Optional[Entry]:
    """Return the largest regular file, the earliest one on ties."""
    largest = None
    for entry in get_file_entries(archive):
        if largest is None or entry.size > largest.size:
            largest = entry
    return largest


def inspect_entry(index: int, entry: Entry, algorithm: str = "sha256") -> EntryInspect:
    """Build inspection details for one entry."""
    digest = None
    if entry.file_type is FileType.NORMAL:
        digest = entry_digest(entry, algorithm)

    return EntryInspect(
        index=index,
        name=entry.name,
        file_type=entry.file_type,
        size=entry.size,
        digest=digest,
    )


def inspect_archive(archive: Archive, algorithm: str = "sha256") -> ArchiveInspect:
    """
    Inspect an archive and return per-entry details and summary statistics.

    Args:
        archive: Archive to inspect
        algorithm: Digest algorithm for file contents

    Returns:
        ArchiveInspect report

    Raises:
        ValueError: If algorithm is not supported
    """
    entries = [
        inspect_entry(index, entry, algorithm)
        for index, entry in enumerate(archive.get_entries())
    ]

    return ArchiveInspect(
        entries=entries,
        stats=archive.get_stats(),
        duplicate_names=find_duplicate_names(archive),
    )
