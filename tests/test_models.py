"""Tests for archive entry models."""

import dataclasses

import pytest

from memtar import ArchiveStats, Entry, EntryHeader, FileType


def test_file_type_variants():
    """Test FileType is limited to the three known variants."""
    assert {t.name for t in FileType} == {"NORMAL", "DIRECTORY", "SYMLINK"}


def test_file_entry_size_derived_from_content():
    """Test file entries take their size from the content length."""
    entry = Entry.file("notes.txt", "hello")

    assert entry.header == EntryHeader("notes.txt", 5, FileType.NORMAL)
    assert entry.data == "hello"
    assert entry.size == 5


def test_file_entry_size_counts_characters():
    """Test size is the text length, not the encoded length."""
    entry = Entry.file("greeting.txt", "héllo")
    assert entry.size == 5


def test_directory_entry():
    """Test directory entries have empty data and zero size."""
    entry = Entry.directory("docs")

    assert entry.name == "docs"
    assert entry.file_type is FileType.DIRECTORY
    assert entry.data == ""
    assert entry.size == 0


def test_symlink_entry_is_placeholder():
    """Test symlink entries carry only a name and the tag."""
    entry = Entry.symlink("link")

    assert entry.file_type is FileType.SYMLINK
    assert entry.data == ""
    assert entry.size == 0
    assert [f.name for f in dataclasses.fields(entry.header)] == [
        "name",
        "size",
        "file_type",
    ]


def test_entries_are_immutable():
    """Test entries and headers cannot be modified after creation."""
    entry = Entry.file("a.txt", "hi")

    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.data = "changed"

    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.header.size = 100


def test_empty_stats_defaults():
    """Test ArchiveStats defaults to all zeros."""
    assert ArchiveStats() == ArchiveStats(0, 0, 0, 0)


def test_entry_rejects_mismatched_size():
    """Test a header size that disagrees with the data is refused."""
    with pytest.raises(ValueError, match="does not match"):
        Entry(EntryHeader("a.txt", 99, FileType.NORMAL), "hi")

    with pytest.raises(ValueError, match="cannot hold data"):
        Entry(EntryHeader("d", 0, FileType.DIRECTORY), "oops")

    with pytest.raises(ValueError, match="does not match"):
        Entry(EntryHeader("d", 3, FileType.DIRECTORY))
