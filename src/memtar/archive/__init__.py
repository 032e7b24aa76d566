"""In-memory archive model."""

from .models import ArchiveStats, Entry, EntryHeader, FileType
from .simple import create_simple_archive, extract_simple_archive
from .store import Archive

__all__ = [
    "Archive",
    "ArchiveStats",
    "Entry",
    "EntryHeader",
    "FileType",
    "create_simple_archive",
    "extract_simple_archive",
]
