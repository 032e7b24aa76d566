"""Simple demonstration of building, querying and extracting an archive."""

import logging
import sys

# Add parent directory to path
sys.path.insert(0, "src")

from memtar import (
    Archive,
    ValidationConfig,
    ValidationError,
    create_simple_archive,
    extract_simple_archive,
    inspect_archive,
    validate_archive,
)

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main():
    """Run the demo."""
    archive = Archive()
    archive.add_file("a.txt", "hi")
    archive.add_directory("d")
    archive.add_file("b.txt", "bye")

    logger.info(f"Entries: {archive.list_names()}")
    logger.info(f"Stats: {archive.get_stats()}")

    entry = archive.find_entry("b.txt")
    if entry:
        logger.info(f"Found {entry.name}: {entry.data!r} ({entry.size} bytes)")

    logger.info(f"Extracted files: {extract_simple_archive(archive)}")

    report = inspect_archive(archive)
    for details in report.entries:
        logger.info(
            f"  [{details.index}] {details.file_type.value:<9} "
            f"{details.name} {details.digest or ''}"
        )

    # Duplicates are fine for the archive but not for strict validation
    duplicated = create_simple_archive([("x", "1"), ("x", "2")])
    logger.info(f"First 'x' holds: {duplicated.find_entry('x').data!r}")
    try:
        validate_archive(duplicated, ValidationConfig.strict())
    except ValidationError as e:
        logger.warning(f"Strict validation failed: {e}")


if __name__ == "__main__":
    main()
