"""Plain-text manifests listing archived files."""

import logging
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path
from typing import Literal

from folderzipper.models import FileRecord

logger = logging.getLogger(__name__)

NameField = Literal["full", "base"]

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class ManifestWriteError(Exception):
    """Raised when a manifest cannot be written completely."""


def format_manifest(records: Sequence[FileRecord], name_field: NameField = "base") -> list[str]:
    """Build manifest lines: one per record, then a total line."""
    lines = []
    total_bytes = 0
    for record in records:
        name = record.path.name if name_field == "base" else str(record.path)
        created = datetime.fromtimestamp(record.created_at).strftime(TIMESTAMP_FORMAT)
        lines.append(f"{created}\t{record.size:,}\t{name}")
        total_bytes += record.size

    lines.append(f"Total {len(records)} file(s)\t{total_bytes:,} bytes")
    return lines


def write_manifest(
    target_path: Path,
    records: Sequence[FileRecord],
    name_field: NameField = "base",
) -> None:
    lines = format_manifest(records, name_field)
    try:
        with open(target_path, "w", encoding="utf-8", errors="surrogateescape", newline="\n") as f:
            for line in lines:
                f.write(line + "\n")
    except (OSError, UnicodeError) as e:
        try:
            target_path.unlink(missing_ok=True)
        except OSError:
            logger.error("Could not remove partial manifest %s", target_path)
        raise ManifestWriteError(f"Failed to write manifest {target_path}: {e}") from e

    logger.debug("Wrote %s (%d entries)", target_path, len(records))
