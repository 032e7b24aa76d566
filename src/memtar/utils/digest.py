"""Content digest utilities for archive entries."""

import hashlib
import re
from typing import Union

from ..archive.models import Entry

# Regex pattern for valid digest format (algorithm:hex)
DIGEST_PATTERN = re.compile(r"^[a-z0-9]+:[a-f0-9]+$")

SUPPORTED_ALGORITHMS = ["sha256", "sha512", "sha1", "md5"]


def _to_bytes(data: Union[str, bytes, bytearray]) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    raise ValueError("Data must be str, bytes or bytearray")


def calculate_digest(
    data: Union[str, bytes, bytearray], algorithm: str = "sha256"
) -> str:
    """Calculate digest of data.

    Text is encoded as UTF-8 before hashing.

    Args:
        data: Data to hash
        algorithm: Hash algorithm (default: sha256)

    Returns:
        Digest string in format "algorithm:hex"

    Raises:
        ValueError: If algorithm is not supported
        ValueError: If data is not text or bytes-like
    """
    payload = _to_bytes(data)

    if algorithm not in SUPPORTED_ALGORITHMS:
        raise ValueError(f"Unsupported algorithm: {algorithm}")

    hasher = hashlib.new(algorithm)
    hasher.update(payload)
    return f"{algorithm}:{hasher.hexdigest()}"


def validate_digest(digest: str) -> bool:
    """Validate digest format.

    Args:
        digest: Digest string to validate

    Returns:
        True if valid digest format
    """
    if not isinstance(digest, str):
        return False

    if not DIGEST_PATTERN.match(digest):
        return False

    algorithm, _ = digest.split(":", 1)
    return algorithm in SUPPORTED_ALGORITHMS


def verify_digest(data: Union[str, bytes, bytearray], expected_digest: str) -> bool:
    """Verify data matches expected digest.

    Args:
        data: Data to verify
        expected_digest: Expected digest string

    Returns:
        True if data matches digest

    Raises:
        ValueError: If digest format is invalid
    """
    if not validate_digest(expected_digest):
        raise ValueError(f"Invalid digest format: {expected_digest}")

    algorithm, _ = expected_digest.split(":", 1)
    actual_digest = calculate_digest(data, algorithm)
    return actual_digest == expected_digest


def entry_digest(entry: Entry, algorithm: str = "sha256") -> str:
    """Calculate digest of an entry's payload."""
    return calculate_digest(entry.data, algorithm)
