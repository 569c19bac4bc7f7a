"""Configuration module for folderzipper."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

SUMMARY_FILE_NAME = "FolderZipper.Summary.txt"
DEFAULT_PROGRESS_BLOCKS = 50


class ConfigurationError(Exception):
    """Raised when the run configuration is invalid."""


class CompressionLevel(Enum):
    """Compression levels accepted on the command line."""

    LEVEL0 = "Level0"
    NONE = "None"
    BEST_SPEED = "BestSpeed"
    LEVEL1 = "Level1"
    LEVEL2 = "Level2"
    LEVEL3 = "Level3"
    LEVEL4 = "Level4"
    LEVEL5 = "Level5"
    DEFAULT = "Default"
    LEVEL6 = "Level6"
    LEVEL7 = "Level7"
    LEVEL8 = "Level8"
    BEST_COMPRESSION = "BestCompression"
    LEVEL9 = "Level9"

    @property
    def zlib_level(self) -> int:
        return _ZLIB_LEVELS[self]

    @classmethod
    def names(cls) -> list[str]:
        return [level.value for level in cls]

    @classmethod
    def from_name(cls, name: str) -> "CompressionLevel":
        for level in cls:
            if level.value.lower() == name.lower():
                return level
        raise ConfigurationError(
            f"Unknown compression level: {name!r} (expected one of {';'.join(cls.names())})"
        )


_ZLIB_LEVELS = {
    CompressionLevel.LEVEL0: 0,
    CompressionLevel.NONE: 0,
    CompressionLevel.BEST_SPEED: 1,
    CompressionLevel.LEVEL1: 1,
    CompressionLevel.LEVEL2: 2,
    CompressionLevel.LEVEL3: 3,
    CompressionLevel.LEVEL4: 4,
    CompressionLevel.LEVEL5: 5,
    CompressionLevel.DEFAULT: 6,
    CompressionLevel.LEVEL6: 6,
    CompressionLevel.LEVEL7: 7,
    CompressionLevel.LEVEL8: 8,
    CompressionLevel.BEST_COMPRESSION: 9,
    CompressionLevel.LEVEL9: 9,
}


@dataclass(frozen=True)
class RunConfiguration:
    source_root: Path
    destination_root: Path
    create_text_file: bool = True
    create_summary_text_file: bool = True
    show_progress: bool = True
    overwrite: bool = False
    compression: CompressionLevel = CompressionLevel.DEFAULT
    progress_blocks: int = DEFAULT_PROGRESS_BLOCKS

    def validate(self) -> None:
        """Reject configurations that must not start a run."""
        if self.source_root.resolve() == self.destination_root.resolve():
            raise ConfigurationError("Source folder and Destination folder must be different")
        if not self.source_root.is_dir():
            raise ConfigurationError(f"Source folder does not exist: {self.source_root}")
        if self.progress_blocks <= 0:
            raise ConfigurationError("Progress bar needs at least one block")
