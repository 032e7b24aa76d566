"""Functional helpers converting between archives and (name, content) pairs."""

from typing import Iterable, assert_never

from .models import FileType
from .store import Archive


def create_simple_archive(pairs: Iterable[tuple[str, str]]) -> Archive:
    """(name, content) 쌍 목록으로 새 아카이브를 만듭니다.

    Args:
        pairs: 순서가 있는 (이름, 내용) 쌍
            - 예: [("a.txt", "hi"), ("b.txt", "bye")]

    Returns:
        Archive: 입력 순서대로 파일 엔트리가 추가된 아카이브

    Examples:
        archive = create_simple_archive([("a.txt", "hi"), ("b.txt", "bye")])
        print(archive.list_names())
        # 출력: ['a.txt', 'b.txt']
    """
    archive = Archive()
    for name, content in pairs:
        archive.add_file(name, content)
    return archive


def extract_simple_archive(archive: Archive) -> list[tuple[str, str]]:
    """아카이브에서 일반 파일 엔트리를 (name, content) 쌍으로 추출합니다.

    디렉터리와 심볼릭 링크 엔트리는 건너뜁니다.

    Args:
        archive: 추출할 아카이브

    Returns:
        list[tuple[str, str]]: 아카이브 순서의 (이름, 내용) 쌍 목록

    Examples:
        pairs = [("a.txt", "hi"), ("b.txt", "bye")]
        assert extract_simple_archive(create_simple_archive(pairs)) == pairs
    """
    pairs = []
    for entry in archive.get_entries():
        file_type = entry.file_type
        if file_type is FileType.NORMAL:
            pairs.append((entry.name, entry.data))
        elif file_type is FileType.DIRECTORY or file_type is FileType.SYMLINK:
            continue
        else:
            assert_never(file_type)
    return pairs
