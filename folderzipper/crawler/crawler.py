"""Depth-first crawl that archives each directory's own files."""

import logging
from pathlib import Path

from folderzipper.config import RunConfiguration
from folderzipper.crawler.filesystem import AccessError, claim_target, list_directory, read_file_record
from folderzipper.crawler.progress import CrawlStats, ProgressState, ProgressTracker
from folderzipper.models import FileRecord
from folderzipper.writers import ArchiveWriteError, ManifestWriteError, write_archive, write_manifest

logger = logging.getLogger(__name__)


class DirectoryCrawler:
    """Mirrors a source tree as one zip (and manifest) per directory.

    Each directory is handled before its subdirectories; subdirectories are
    visited in name order. Every file handed to the writers is also appended
    to all_files, which backs the summary manifest and the progress count.
    """

    def __init__(
        self,
        config: RunConfiguration,
        progress: ProgressState | None = None,
        tracker: ProgressTracker | None = None,
        stats: CrawlStats | None = None,
    ):
        self.config = config
        self.progress = progress or ProgressState(total_files=0)
        self.tracker = tracker or ProgressTracker(blocks=config.progress_blocks)
        self.stats = stats or CrawlStats()
        self.all_files: list[FileRecord] = []
        self._excluded_dir = config.destination_root.resolve()

    def crawl(self, source_path: Path, dest_path: Path) -> None:
        try:
            listing = list_directory(source_path)
        except AccessError as e:
            logger.warning("%s", e)
            self.stats.directories_unreadable += 1
            return

        self.stats.directories_visited += 1

        if listing.files:
            self._process_directory(source_path, dest_path, listing.files)

        for subdir in listing.subdirectories:
            if subdir.resolve() == self._excluded_dir:
                logger.debug("Not crawling destination folder: %s", subdir)
                continue
            self.crawl(subdir, dest_path / subdir.name)

    def _process_directory(self, source_path: Path, dest_path: Path, files: list[Path]) -> None:
        records = self._read_records(files)
        if not records:
            return

        name = source_path.name or "root"
        try:
            dest_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Cannot create destination folder %s: %s", dest_path, e)
            self.stats.archives_failed += 1
        else:
            self._write_archive(dest_path / f"{name}.zip", records)
            if self.config.create_text_file:
                self._write_manifest(dest_path / f"{name}.txt", records)

        self._record(records)

    def _read_records(self, files: list[Path]) -> list[FileRecord]:
        records = []
        for path in files:
            try:
                records.append(read_file_record(path))
            except FileNotFoundError:
                logger.warning("File disappeared during crawl: %s", path)
            except OSError as e:
                logger.warning("Cannot read %s: %s", path, e)
        return records

    def _write_archive(self, target: Path, records: list[FileRecord]) -> None:
        try:
            if not claim_target(target, self.config.overwrite):
                self.stats.archives_skipped += 1
                return
            write_archive(target, [r.path for r in records], self.config.compression)
        except ArchiveWriteError as e:
            logger.error("%s", e)
            self.stats.archives_failed += 1
            return
        except OSError as e:
            logger.error("Cannot replace archive %s: %s", target, e)
            self.stats.archives_failed += 1
            return

        self.stats.archives_created += 1

    def _write_manifest(self, target: Path, records: list[FileRecord]) -> None:
        try:
            if not claim_target(target, self.config.overwrite):
                self.stats.manifests_skipped += 1
                return
            write_manifest(target, records, name_field="base")
        except ManifestWriteError as e:
            logger.error("%s", e)
            self.stats.manifests_failed += 1
            return
        except OSError as e:
            logger.error("Cannot replace manifest %s: %s", target, e)
            self.stats.manifests_failed += 1
            return

        self.stats.manifests_written += 1

    def _record(self, records: list[FileRecord]) -> None:
        self.all_files.extend(records)
        self.stats.files_processed += len(records)
        self.stats.total_bytes += sum(r.size for r in records)

        if self.config.show_progress:
            percent = self.progress.advance(len(records))
            self._render(percent)

    def _render(self, percent: int) -> None:
        if self.progress.should_render(percent):
            self.tracker.render(percent)
            self.progress.last_rendered_percent = percent
