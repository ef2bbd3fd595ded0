from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import BinaryIO, Optional


class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


class CaptureKind(str, Enum):
    IMAGE = "image"
    VIDEO = "video"


@dataclass(frozen=True)
class FileEntry:
    """
    A file or directory found during a scan.
    """
    path: Path
    kind: EntryKind = EntryKind.FILE

    @property
    def name(self) -> str:
        return self.path.name

    def open(self) -> BinaryIO:
        return self.path.open("rb")


@dataclass(frozen=True)
class CaptureFields:
    """Values sliced out of a capture filename."""
    year: int
    month: int              # zero-based
    day: int
    hour: int
    minute: int
    second: int
    identifier: str


@dataclass(frozen=True)
class CaptureRecord:
    """
    A classified capture, ready to be copied into its application folder.
    """
    year: int
    month: int              # zero-based (January == 0)
    day: int
    hour: int
    minute: int
    second: int
    identifier: str
    display_name: str
    entry: FileEntry
    kind: CaptureKind = CaptureKind.IMAGE

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def captured_at(self) -> Optional[datetime]:
        """Capture time as a datetime, or None if the filename holds an impossible date."""
        try:
            return datetime(self.year, self.month + 1, self.day,
                            self.hour, self.minute, self.second)
        except ValueError:
            return None


class CopyStatus(str, Enum):
    COPIED = "copied"
    SKIPPED = "skipped"     # destination exists and overwrite is off
    DRY_RUN = "dry_run"
    FAILED = "failed"


@dataclass(frozen=True)
class CopyResult:
    source: Path
    destination: Optional[Path]
    status: CopyStatus
    record: Optional[CaptureRecord] = None
    error: Optional[str] = None
