"""Async helpers moving archive contents to and from the filesystem.

These sit on top of the archive and only exchange (name, content) pairs
through its public methods. Nothing here reads or writes TAR bytes.
"""

import asyncio
import logging
from pathlib import Path
from typing import Iterable, Optional, Union

import aiofiles
import aiofiles.os

from ..archive.models import FileType
from ..archive.store import Archive
from ..exceptions import ArchiveReadError, ArchiveWriteError, ValidationError
from ..utils.validator import ValidationConfig, validate_entry_name

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Rules every entry must satisfy before it is written under a destination
EXTRACT_NAME_RULES = ValidationConfig(
    allow_empty_names=False,
    allow_absolute=False,
    allow_parent_refs=False,
)


def _entry_name(path: Path, root: Optional[Path]) -> str:
    if root is None:
        return path.name
    return path.relative_to(root).as_posix()


async def _read_text(path: Path) -> str:
    try:
        async with aiofiles.open(path, "r", encoding="utf-8", newline="") as f:
            return await f.read()
    except UnicodeDecodeError as e:
        raise ArchiveReadError(f"File is not valid UTF-8 text: {path}") from e
    except OSError as e:
        raise ArchiveReadError(f"Failed to read {path}: {e}") from e


async def read_pairs(
    paths: Iterable[PathLike], root: Optional[PathLike] = None
) -> list[tuple[str, str]]:
    """Read files into (name, content) pairs.

    Args:
        paths: Files to read, in the order the pairs should appear
        root: Directory names are made relative to (default: bare file name)

    Returns:
        List of (name, content) pairs

    Raises:
        ArchiveReadError: If a file cannot be read as UTF-8 text
    """
    root_path = Path(root) if root is not None else None
    file_paths = [Path(p) for p in paths]

    try:
        names = [_entry_name(p, root_path) for p in file_paths]
    except ValueError as e:
        raise ArchiveReadError(f"Path outside of root {root_path}: {e}") from e

    # Read concurrently; gather keeps input order
    contents = await asyncio.gather(*(_read_text(p) for p in file_paths))
    return list(zip(names, contents))


def _collect_tree(root: Path) -> list[tuple[FileType, Path]]:
    """List entries under root depth-first in name order (sync helper)."""
    tree: list[tuple[FileType, Path]] = []

    def visit(directory: Path) -> None:
        for path in sorted(directory.iterdir()):
            if path.is_symlink():
                tree.append((FileType.SYMLINK, path))
            elif path.is_dir():
                tree.append((FileType.DIRECTORY, path))
                visit(path)
            elif path.is_file():
                tree.append((FileType.NORMAL, path))

    visit(root)
    return tree


async def load_directory(root: PathLike) -> Archive:
    """디렉터리 트리를 읽어 새 아카이브를 만듭니다.

    하위 디렉터리는 디렉터리 엔트리로, 일반 파일은 파일 엔트리로,
    심볼릭 링크는 대상 없는 심볼릭 링크 엔트리로 추가됩니다.

    Args:
        root: 읽을 디렉터리 경로
            - 문자열 경로: "/Users/user/project"
            - Path 객체: Path("./docs")

    Returns:
        Archive: root 기준 상대 이름(POSIX 구분자)을 가진 아카이브

    Raises:
        ArchiveReadError: root가 디렉터리가 아니거나 파일을 읽을 수 없는 경우

    Examples:
        archive = await load_directory("./docs")
        print(archive.get_stats())
    """
    root_path = Path(root)
    if not await aiofiles.os.path.isdir(root_path):
        raise ArchiveReadError(f"Not a directory: {root}")

    loop = asyncio.get_running_loop()
    try:
        tree = await loop.run_in_executor(None, _collect_tree, root_path)
    except OSError as e:
        raise ArchiveReadError(f"Failed to walk {root}: {e}") from e

    file_paths = [path for kind, path in tree if kind is FileType.NORMAL]
    contents = dict(await read_pairs(file_paths, root_path))

    archive = Archive()
    for kind, path in tree:
        name = _entry_name(path, root_path)
        if kind is FileType.NORMAL:
            archive.add_file(name, contents[name])
        elif kind is FileType.DIRECTORY:
            archive.add_directory(name)
        else:
            archive.add_symlink(name)

    logger.debug("Loaded %d entries from %s", archive.count(), root_path)
    return archive


def _resolve_target(dest: Path, name: str) -> Path:
    """Map an entry name to a path inside dest."""
    validate_entry_name(name, EXTRACT_NAME_RULES)

    target = (dest / name).resolve()
    if not target.is_relative_to(dest.resolve()):
        raise ValidationError(f"Entry escapes destination directory: {name!r}")
    return target


async def extract_to_directory(archive: Archive, dest: PathLike) -> list[Path]:
    """Write directory and file entries of an archive under dest.

    Symlink placeholders are skipped. When several entries share a name,
    the first one wins and later ones are skipped.

    Args:
        archive: Archive to extract
        dest: Destination directory, created if missing

    Returns:
        Paths created, in archive order

    Raises:
        ValidationError: If an entry name is unsafe to write
        ArchiveWriteError: If a directory or file cannot be written
    """
    dest_path = Path(dest)
    written: list[Path] = []
    seen: set[str] = set()

    try:
        await aiofiles.os.makedirs(dest_path, exist_ok=True)

        for entry in archive.get_entries():
            if entry.file_type is FileType.SYMLINK:
                logger.debug("Skipping symlink placeholder %r", entry.name)
                continue

            if entry.name in seen:
                logger.warning("Skipping duplicate entry %r", entry.name)
                continue
            seen.add(entry.name)

            target = _resolve_target(dest_path, entry.name)

            if entry.file_type is FileType.DIRECTORY:
                await aiofiles.os.makedirs(target, exist_ok=True)
            else:
                await aiofiles.os.makedirs(target.parent, exist_ok=True)
                async with aiofiles.open(
                    target, "w", encoding="utf-8", newline=""
                ) as f:
                    await f.write(entry.data)

            written.append(target)
    except OSError as e:
        raise ArchiveWriteError(f"Failed to extract into {dest_path}: {e}") from e

    logger.debug("Extracted %d entries into %s", len(written), dest_path)
    return written
