"""Data models for archive inspection reports."""

from dataclasses import dataclass, field
from typing import List, Optional

from .archive.models import ArchiveStats, FileType


@dataclass
class EntryInspect:
    """Inspection details for a single entry."""

    index: int  # Position in insertion order
    name: str
    file_type: FileType
    size: int
    digest: Optional[str] = None  # Only set for regular files


@dataclass
class ArchiveInspect:
    """Inspection report for a whole archive."""

    entries: List[EntryInspect]
    stats: ArchiveStats
    duplicate_names: List[str] = field(default_factory=list)
