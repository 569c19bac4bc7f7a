"""Zip archive creation for a single directory."""

import logging
import zipfile
from collections.abc import Sequence
from pathlib import Path

from folderzipper.config import CompressionLevel

logger = logging.getLogger(__name__)


class ArchiveWriteError(Exception):
    """Raised when an archive cannot be written completely."""


def write_archive(
    target_path: Path,
    files: Sequence[Path],
    compression: CompressionLevel = CompressionLevel.DEFAULT,
) -> None:
    """Create a flat zip at target_path holding files under their base names.

    Members are added in the given order. On failure the partial archive is
    removed before ArchiveWriteError is raised.
    """
    level = compression.zlib_level
    if level == 0:
        method, compresslevel = zipfile.ZIP_STORED, None
    else:
        method, compresslevel = zipfile.ZIP_DEFLATED, level

    try:
        with zipfile.ZipFile(
            target_path,
            "w",
            compression=method,
            compresslevel=compresslevel,
            strict_timestamps=False,
        ) as zf:
            for path in files:
                zf.write(path, arcname=path.name)
    except (OSError, UnicodeError) as e:
        # zip member names must encode as UTF-8
        _remove_partial(target_path)
        raise ArchiveWriteError(f"Failed to write archive {target_path}: {e}") from e

    logger.debug("Wrote %s (%d files, %s)", target_path, len(files), compression.value)


def _remove_partial(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.error("Could not remove partial file %s: %s", path, e)
