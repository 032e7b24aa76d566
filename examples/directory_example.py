"""Example: load a directory into an archive and extract it elsewhere."""

import asyncio
import logging
import sys
import tempfile
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, "src")

from memtar import ArchiveReadError, extract_to_directory, load_directory

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def main():
    """Copy a directory tree through an in-memory archive."""
    source = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("src")

    try:
        archive = await load_directory(source)
    except ArchiveReadError as e:
        logger.error(f"Could not load {source}: {e}")
        return

    stats = archive.get_stats()
    logger.info(
        f"Loaded {stats.total_entries} entries "
        f"({stats.file_count} files, {stats.directory_count} directories, "
        f"{stats.total_size} characters)"
    )

    with tempfile.TemporaryDirectory() as temp_dir:
        written = await extract_to_directory(archive, temp_dir)
        logger.info(f"Extracted {len(written)} paths into {temp_dir}")


if __name__ == "__main__":
    asyncio.run(main())
