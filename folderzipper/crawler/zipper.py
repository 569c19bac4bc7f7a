"""Top-level run: pre-scan, crawl, summary."""

import logging
from pathlib import Path

from folderzipper.config import SUMMARY_FILE_NAME, RunConfiguration
from folderzipper.crawler.crawler import DirectoryCrawler
from folderzipper.crawler.filesystem import claim_target, enumerate_files
from folderzipper.crawler.progress import CrawlStats, ProgressRenderer, ProgressState, ProgressTracker
from folderzipper.models import FileRecord
from folderzipper.writers import ManifestWriteError, write_manifest

logger = logging.getLogger(__name__)


class FolderZipper:
    """Runs one archive pass over a source tree."""

    def __init__(self, config: RunConfiguration, renderer: ProgressRenderer | None = None):
        self.config = config
        self.renderer = renderer

    def run(self) -> CrawlStats:
        """Archive the source tree into the destination tree.

        Raises:
            ConfigurationError: the configuration is invalid.
            AccessError: the source root itself cannot be read.
        """
        self.config.validate()
        source_root = self.config.source_root.resolve()
        destination_root = self.config.destination_root.resolve()

        stats = CrawlStats()
        stats.files_found = self._count_files(source_root, destination_root)
        logger.debug("Pre-scan found %d files under %s", stats.files_found, source_root)

        progress = ProgressState(total_files=stats.files_found)
        tracker = ProgressTracker(self.renderer, blocks=self.config.progress_blocks)
        crawler = DirectoryCrawler(self.config, progress=progress, tracker=tracker, stats=stats)

        if self.config.show_progress:
            tracker.render(progress.percent)
            progress.last_rendered_percent = progress.percent

        crawler.crawl(source_root, destination_root)

        if self.config.show_progress:
            tracker.render(100)

        if self.config.create_summary_text_file:
            self._write_summary(destination_root, crawler.all_files, stats)

        return stats

    def _count_files(self, source_root: Path, destination_root: Path) -> int:
        files = enumerate_files(
            source_root,
            predicate=lambda p: not p.is_relative_to(destination_root),
            skip_unreadable=True,
        )
        return sum(1 for _ in files)

    def _write_summary(self, destination_root: Path, records: list[FileRecord], stats: CrawlStats) -> None:
        if not records:
            logger.info("No files archived, summary not written")
            return

        target = destination_root / SUMMARY_FILE_NAME
        try:
            destination_root.mkdir(parents=True, exist_ok=True)
            if not claim_target(target, self.config.overwrite):
                return
            ordered = sorted(records, key=lambda r: str(r.path))
            write_manifest(target, ordered, name_field="full")
        except ManifestWriteError as e:
            logger.error("%s", e)
            return
        except OSError as e:
            logger.error("Cannot replace summary %s: %s", target, e)
            return

        stats.summary_written = True
