"""Progress accounting and the textual progress bar."""

import time
from dataclasses import dataclass, field
from typing import Protocol

import click

from folderzipper.config import DEFAULT_PROGRESS_BLOCKS


@dataclass
class CrawlStats:
    """Statistics for an ongoing crawl."""

    files_found: int = 0
    files_processed: int = 0
    total_bytes: int = 0
    directories_visited: int = 0
    directories_unreadable: int = 0
    archives_created: int = 0
    archives_skipped: int = 0
    archives_failed: int = 0
    manifests_written: int = 0
    manifests_skipped: int = 0
    manifests_failed: int = 0
    summary_written: bool = False
    start_time: float = field(default_factory=time.time)

    @property
    def elapsed_seconds(self) -> float:
        return time.time() - self.start_time


@dataclass
class ProgressState:
    """Numerator and denominator of the progress bar.

    total_files is fixed by the pre-scan; processed_files only grows as the
    crawl finishes directories.
    """

    total_files: int
    processed_files: int = 0
    last_rendered_percent: int = -1

    def advance(self, count: int) -> int:
        if count < 0:
            raise ValueError(f"Processed file count cannot decrease (got {count})")
        self.processed_files += count
        return self.percent

    @property
    def percent(self) -> int:
        if self.total_files <= 0:
            return 100
        return min(100, self.processed_files * 100 // self.total_files)

    def should_render(self, percent: int) -> bool:
        # even steps only
        return percent % 2 == 0 and percent != self.last_rendered_percent


class ProgressRenderer(Protocol):
    def write(self, text: str) -> None: ...


class ConsoleRenderer:
    """Writes to stdout without a trailing newline."""

    def write(self, text: str) -> None:
        click.echo(text, nl=False)


class NullRenderer:
    def write(self, text: str) -> None:
        pass


class ProgressTracker:
    """Draws a fixed-width progress bar on a single console line.

    Nothing else may write to the same stream between the first render and
    the final one at 100%, which ends the line.
    """

    def __init__(
        self,
        renderer: ProgressRenderer | None = None,
        blocks: int = DEFAULT_PROGRESS_BLOCKS,
        prefix: str = "Progress : ",
    ):
        if blocks <= 0:
            raise ValueError("blocks must be positive")
        self.renderer = renderer or ConsoleRenderer()
        self.blocks = blocks
        self.prefix = prefix
        self._last_position = -1

    def render(self, percent: int) -> bool:
        """Redraw the bar for percent; returns False when nothing changed."""
        if percent < 0:
            raise ValueError(f"percent must not be negative (got {percent})")
        percent = min(percent, 100)

        position = self.blocks * percent // 100
        if position == self._last_position:
            return False

        bar = "-" * position + " " * (self.blocks - position)
        self.renderer.write(f"\r{self.prefix}[{bar}] ")
        if position == self.blocks:
            self.renderer.write("\n")

        self._last_position = position
        return True
