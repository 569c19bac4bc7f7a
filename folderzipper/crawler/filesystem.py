"""Filesystem helpers shared by the pre-scan and the crawl."""

import logging
import os
from collections.abc import Callable, Iterator
from pathlib import Path

from folderzipper.models import DirectoryListing, FileRecord

logger = logging.getLogger(__name__)


class AccessError(Exception):
    """Raised when a directory cannot be read."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot read directory {path}: {reason}")
        self.path = path
        self.reason = reason


def enumerate_files(
    root: Path,
    predicate: Callable[[Path], bool] | None = None,
    skip_unreadable: bool = False,
) -> Iterator[Path]:
    """Yield every regular file below root, in no particular order.

    Symbolic links are neither yielded nor followed. An unreadable directory
    raises AccessError, unless skip_unreadable is set and the directory is
    not root itself, in which case its subtree is logged and skipped.
    """
    pending = [root]
    while pending:
        directory = pending.pop()
        try:
            entries = _read_entries(directory)
        except AccessError as e:
            if not skip_unreadable or directory == root:
                raise
            logger.warning("Skipping unreadable directory during pre-scan: %s", e.path)
            continue

        for entry in entries:
            if entry.is_symlink():
                continue
            if entry.is_dir(follow_symlinks=False):
                pending.append(Path(entry.path))
            elif entry.is_file(follow_symlinks=False):
                path = Path(entry.path)
                if predicate is None or predicate(path):
                    yield path


def list_directory(directory: Path) -> DirectoryListing:
    """List the direct files and subdirectories of one directory."""
    listing = DirectoryListing()
    for entry in _read_entries(directory):
        if entry.is_symlink():
            logger.debug("Skipping symlink: %s", entry.path)
            continue
        if entry.is_dir(follow_symlinks=False):
            listing.subdirectories.append(Path(entry.path))
        elif entry.is_file(follow_symlinks=False):
            listing.files.append(Path(entry.path))

    listing.files.sort(key=str)
    listing.subdirectories.sort(key=lambda p: p.name)
    return listing


def read_file_record(path: Path) -> FileRecord:
    stat_result = path.stat()
    return FileRecord(
        path=path,
        created_at=_get_creation_time(stat_result),
        size=stat_result.st_size,
    )


def claim_target(path: Path, overwrite: bool) -> bool:
    """Decide whether an output file may be (re)written.

    An existing file is deleted when overwrite is set, otherwise it is left
    untouched and False is returned.
    """
    if not path.exists():
        return True
    if not overwrite:
        logger.debug("Keeping existing file: %s", path)
        return False
    path.unlink()
    return True


def _read_entries(directory: Path) -> list[os.DirEntry]:
    try:
        with os.scandir(directory) as entries:
            return list(entries)
    except PermissionError as e:
        raise AccessError(directory, "permission denied") from e
    except OSError as e:
        raise AccessError(directory, e.strerror or str(e)) from e


def _get_creation_time(stat_result: os.stat_result) -> float:
    try:
        return stat_result.st_birthtime
    except AttributeError:
        return stat_result.st_ctime
