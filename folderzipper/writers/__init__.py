"""Archive and manifest writers."""

from .archive import ArchiveWriteError, write_archive
from .manifest import ManifestWriteError, format_manifest, write_manifest

__all__ = [
    "ArchiveWriteError",
    "ManifestWriteError",
    "format_manifest",
    "write_archive",
    "write_manifest",
]
