"""Shared test fixtures for dirdiff."""

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

TreeFactory = Callable[[str, dict[str, str | bytes]], Path]


@pytest.fixture
def cli_runner():
    """Click CLI test runner."""
    return CliRunner()


def write_tree(root: Path, files: dict[str, str | bytes]) -> Path:
    """Create files under root from a {relative_path: content} dict.

    Args:
        root: Directory to populate (created if missing)
        files: Relative POSIX paths mapped to text or bytes content

    Returns:
        The root path
    """
    root.mkdir(parents=True, exist_ok=True)
    for rel, content in files.items():
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            target.write_bytes(content)
        else:
            target.write_text(content)
    return root


@pytest.fixture
def make_tree(tmp_path: Path) -> TreeFactory:
    """Factory building a named tree under tmp_path."""

    def _make(name: str, files: dict[str, str | bytes]) -> Path:
        return write_tree(tmp_path / name, files)

    return _make


@pytest.fixture
def project_tree() -> dict[str, str]:
    """A small nested project layout used as a baseline tree."""
    return {
        "README.md": "# Sample\n",
        "app/__init__.py": "",
        "app/models.py": "class User:\n    pass\n",
        "app/utils/helpers.py": "def slugify(s):\n    return s.lower()\n",
        "assets/logo.bin": "\x00\x01\x02binary",
    }
