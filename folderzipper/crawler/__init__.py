"""Crawler module for directory traversal and archiving."""

from .crawler import DirectoryCrawler
from .filesystem import AccessError, enumerate_files, list_directory, read_file_record
from .progress import CrawlStats, ProgressState, ProgressTracker
from .zipper import FolderZipper

__all__ = [
    "AccessError",
    "CrawlStats",
    "DirectoryCrawler",
    "FolderZipper",
    "ProgressState",
    "ProgressTracker",
    "enumerate_files",
    "list_directory",
    "read_file_record",
]
