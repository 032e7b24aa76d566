"""Utility functions for memtar."""

from .digest import calculate_digest, validate_digest, verify_digest
from .inspect import inspect_archive
from .validator import ValidationConfig, validate_archive, validate_entry_name

__all__ = [
    "calculate_digest",
    "validate_digest",
    "verify_digest",
    "inspect_archive",
    "ValidationConfig",
    "validate_archive",
    "validate_entry_name",
]
