"""Tests for content digest utilities."""

import hashlib

import pytest

from memtar import Entry
from memtar.utils.digest import (
    calculate_digest,
    entry_digest,
    validate_digest,
    verify_digest,
)


def test_calculate_digest_text_is_utf8():
    """Test text is hashed as its UTF-8 encoding."""
    expected = hashlib.sha256("héllo".encode("utf-8")).hexdigest()
    assert calculate_digest("héllo") == f"sha256:{expected}"


def test_calculate_digest_bytes():
    """Test bytes and text with the same encoding hash identically."""
    assert calculate_digest(b"abc") == calculate_digest("abc")
    assert calculate_digest(bytearray(b"abc"), "md5") == (
        "md5:" + hashlib.md5(b"abc").hexdigest()
    )


def test_calculate_digest_rejects_bad_input():
    """Test unsupported algorithms and data types raise ValueError."""
    with pytest.raises(ValueError, match="Unsupported algorithm"):
        calculate_digest("abc", "crc32")

    with pytest.raises(ValueError, match="must be str"):
        calculate_digest(123)


def test_validate_digest():
    """Test digest format validation."""
    assert validate_digest(calculate_digest("x")) is True
    assert validate_digest("sha256:ABC") is False
    assert validate_digest("blake2:abcd") is False
    assert validate_digest("no-colon") is False
    assert validate_digest(None) is False


def test_verify_digest():
    """Test verifying data against a digest."""
    digest = calculate_digest("payload", "sha512")

    assert verify_digest("payload", digest) is True
    assert verify_digest("other", digest) is False

    with pytest.raises(ValueError, match="Invalid digest format"):
        verify_digest("payload", "bogus")


def test_entry_digest():
    """Test entry digests cover the entry payload."""
    assert entry_digest(Entry.file("a", "hi")) == calculate_digest("hi")
    assert entry_digest(Entry.directory("d")) == calculate_digest("")
