"""Test configuration and fixtures."""

import pytest

from memtar import Archive


@pytest.fixture
def sample_archive():
    """Archive with two files and a directory between them."""
    archive = Archive()
    archive.add_file("a.txt", "hi")
    archive.add_directory("d")
    archive.add_file("b.txt", "bye")
    return archive


@pytest.fixture
def make_tree(tmp_path):
    """Create files and directories under tmp_path from a mapping.

    Keys are relative paths; a value of None creates a directory.
    """

    def _make_tree(layout: dict, root_name: str = "src"):
        root = tmp_path / root_name
        root.mkdir()
        for rel_path, content in layout.items():
            path = root / rel_path
            if content is None:
                path.mkdir(parents=True, exist_ok=True)
            else:
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(content, encoding="utf-8", newline="")
        return root

    return _make_tree


# Pytest configuration
def pytest_configure(config):
    """Configure pytest markers and settings."""
    config.addinivalue_line("markers", "fs: mark test as touching the filesystem")
    config.addinivalue_line("markers", "unit: mark test as unit test (default)")
