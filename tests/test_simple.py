"""Tests for simple archive conversion helpers."""

import pytest

from memtar import Archive, create_simple_archive, extract_simple_archive


def test_create_simple_archive_preserves_order():
    """Test entries follow the input pair order."""
    archive = create_simple_archive([("z", "1"), ("a", "2"), ("m", "3")])

    assert archive.list_names() == ["z", "a", "m"]
    assert archive.get_stats().file_count == 3


def test_create_simple_archive_empty():
    """Test an empty pair list builds an empty archive."""
    archive = create_simple_archive([])
    assert archive.count() == 0


def test_create_simple_archive_accepts_iterators():
    """Test any iterable of pairs is accepted."""
    pairs = (("f%d" % i, str(i)) for i in range(3))
    archive = create_simple_archive(pairs)

    assert archive.list_names() == ["f0", "f1", "f2"]


def test_extract_skips_directories(sample_archive):
    """Test extraction returns only regular files in archive order."""
    assert extract_simple_archive(sample_archive) == [
        ("a.txt", "hi"),
        ("b.txt", "bye"),
    ]


def test_extract_skips_symlinks():
    """Test symlink placeholders are not extracted."""
    archive = Archive()
    archive.add_symlink("link")
    archive.add_file("real", "data")

    assert extract_simple_archive(archive) == [("real", "data")]


def test_extract_keeps_duplicates():
    """Test duplicate names are all extracted in order."""
    archive = create_simple_archive([("x", "1"), ("x", "2")])
    assert extract_simple_archive(archive) == [("x", "1"), ("x", "2")]


@pytest.mark.parametrize(
    "pairs",
    [
        [],
        [("a.txt", "hi")],
        [("", ""), ("dup", "1"), ("dup", "2")],
        [("dir/nested.txt", "line1\nline2\r\n"), ("ünï.txt", "ß∂ƒ")],
    ],
)
def test_round_trip(pairs):
    """Test extracting a freshly created archive returns the input pairs."""
    assert extract_simple_archive(create_simple_archive(pairs)) == pairs
