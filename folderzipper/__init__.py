"""Folder Zipper - Archive every folder of a tree into a mirrored tree of zip files."""

__version__ = "0.1.0"

from folderzipper.config import CompressionLevel, RunConfiguration
from folderzipper.crawler import DirectoryCrawler, FolderZipper

__all__ = ["CompressionLevel", "DirectoryCrawler", "FolderZipper", "RunConfiguration"]
