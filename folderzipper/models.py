"""Data models shared by the crawler and the writers."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class FileRecord:
    """A file as listed in a manifest."""

    path: Path
    created_at: float
    size: int


@dataclass
class DirectoryListing:
    """Direct children of one source directory, in crawl order."""

    files: list[Path] = field(default_factory=list)
    subdirectories: list[Path] = field(default_factory=list)
