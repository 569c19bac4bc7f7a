"""Shared fixtures."""

import os
from pathlib import Path

import pytest


@pytest.fixture
def deny_directory(monkeypatch):
    """Make os.scandir fail with PermissionError for the given directories."""
    denied: set[Path] = set()
    real_scandir = os.scandir

    def fake_scandir(path="."):
        if Path(path).resolve() in denied:
            raise PermissionError(13, "Permission denied", str(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", fake_scandir)

    def deny(path: Path) -> None:
        denied.add(path.resolve())

    return deny


@pytest.fixture
def make_tree():
    """Create files below a root; keys are relative paths."""

    def _make_tree(root: Path, files: dict[str, bytes | str]) -> None:
        for relative, content in files.items():
            path = root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, str):
                content = content.encode()
            path.write_bytes(content)

    return _make_tree
