"""Custom exceptions for memtar.

The archive core never raises these; they belong to the layers built on top
of it (validation and filesystem loading).
"""


class MemtarError(Exception):
    """Base exception for all memtar errors."""

    pass


class ValidationError(MemtarError):
    """Raised when an entry or archive fails stricter validation."""

    pass


class ArchiveReadError(MemtarError):
    """Raised when unable to read source files into an archive."""

    pass


class ArchiveWriteError(MemtarError):
    """Raised when unable to write archive entries to disk."""

    pass
