"""Optional stricter validation for archive entries.

The archive itself accepts any name. These helpers let callers reject
entries they consider malformed without changing the archive.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Optional

from ..archive.store import Archive
from ..exceptions import ValidationError


@dataclass
class ValidationConfig:
    """Rules applied by the validation helpers."""

    allow_empty_names: bool = True
    allow_duplicates: bool = True
    allow_absolute: bool = True
    allow_parent_refs: bool = True
    max_name_length: Optional[int] = None

    @classmethod
    def strict(cls, max_name_length: Optional[int] = 255) -> "ValidationConfig":
        """Preset rejecting empty, duplicate, absolute and escaping names."""
        return cls(
            allow_empty_names=False,
            allow_duplicates=False,
            allow_absolute=False,
            allow_parent_refs=False,
            max_name_length=max_name_length,
        )


def is_empty_name(name: str) -> bool:
    """Check if name is empty."""
    return name == ""


def is_absolute_name(name: str) -> bool:
    """Check if name starts at a filesystem root."""
    return name.startswith("/") or name.startswith("\\")


def has_parent_refs(name: str) -> bool:
    """Check if any path component of name is '..'."""
    return ".." in name.replace("\\", "/").split("/")


def is_name_too_long(name: str, max_length: Optional[int]) -> bool:
    """Check if name exceeds the configured length limit."""
    return max_length is not None and len(name) > max_length


def find_duplicate_names(archive: Archive) -> list[str]:
    """Return names used by more than one entry, in order of first use."""
    counts = Counter(archive.list_names())
    duplicates = []
    for name in archive.list_names():
        if counts[name] > 1 and name not in duplicates:
            duplicates.append(name)
    return duplicates


def validate_entry_name(name: str, config: Optional[ValidationConfig] = None) -> None:
    """Validate a single entry name.

    Args:
        name: Entry name to check
        config: Validation rules (default: permissive)

    Raises:
        ValidationError: If the name breaks a configured rule
    """
    config = config or ValidationConfig()

    if not config.allow_empty_names and is_empty_name(name):
        raise ValidationError("Entry name must not be empty")

    if not config.allow_absolute and is_absolute_name(name):
        raise ValidationError(f"Entry name must be relative: {name!r}")

    if not config.allow_parent_refs and has_parent_refs(name):
        raise ValidationError(f"Entry name must not contain '..': {name!r}")

    if is_name_too_long(name, config.max_name_length):
        raise ValidationError(
            f"Entry name longer than {config.max_name_length} characters: {name!r}"
        )


def validate_archive(archive: Archive, config: Optional[ValidationConfig] = None) -> bool:
    """아카이브의 모든 엔트리가 검증 규칙을 만족하는지 확인합니다.

    Args:
        archive: 검증할 아카이브
        config: 검증 규칙 (기본값: 모든 이름 허용)
            - 엄격한 검증: ValidationConfig.strict()

    Returns:
        bool: 모든 엔트리가 유효하면 True

    Raises:
        ValidationError: 첫 번째로 발견된 규칙 위반

    Examples:
        archive = create_simple_archive([("x", "1"), ("x", "2")])
        validate_archive(archive, ValidationConfig.strict())
        # ValidationError: Duplicate entry names: ['x']
    """
    config = config or ValidationConfig()

    for entry in archive.get_entries():
        validate_entry_name(entry.name, config)

    if not config.allow_duplicates:
        duplicates = find_duplicate_names(archive)
        if duplicates:
            raise ValidationError(f"Duplicate entry names: {duplicates}")

    return True
