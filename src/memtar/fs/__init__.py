"""Filesystem helpers for memtar archives."""

from .loader import extract_to_directory, load_directory, read_pairs

__all__ = ["extract_to_directory", "load_directory", "read_pairs"]
