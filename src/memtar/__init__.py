"""memtar - In-memory archive model loosely inspired by TAR."""

__version__ = "0.1.0"

from .archive import (
    Archive,
    ArchiveStats,
    Entry,
    EntryHeader,
    FileType,
    create_simple_archive,
    extract_simple_archive,
)
from .exceptions import (
    ArchiveReadError,
    ArchiveWriteError,
    MemtarError,
    ValidationError,
)
from .fs import extract_to_directory, load_directory, read_pairs
from .models import ArchiveInspect, EntryInspect
from .utils import (
    ValidationConfig,
    calculate_digest,
    inspect_archive,
    validate_archive,
    validate_entry_name,
)

__all__ = [
    # Archive model
    "Archive",
    "ArchiveStats",
    "Entry",
    "EntryHeader",
    "FileType",
    "create_simple_archive",
    "extract_simple_archive",
    # Filesystem helpers
    "extract_to_directory",
    "load_directory",
    "read_pairs",
    # Inspection and validation
    "ArchiveInspect",
    "EntryInspect",
    "ValidationConfig",
    "calculate_digest",
    "inspect_archive",
    "validate_archive",
    "validate_entry_name",
    # Exceptions
    "MemtarError",
    "ValidationError",
    "ArchiveReadError",
    "ArchiveWriteError",
]
