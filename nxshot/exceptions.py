"""
Custom exception hierarchy for the capture organizer.

Per-file problems (CaptureFormatError, SourceReadError, WriteError) are collected by the
organize loop and reported at the end of a run. OutputRootError is fatal to
the whole job.
"""
from pathlib import Path
from typing import Optional


class NxshotError(Exception):
    """Base exception for all capture organizer errors."""
    pass


class SelectionAborted(NxshotError):
    """Raised by a root selector when the user declines to pick a directory."""
    pass


class ScanAccessError(NxshotError):
    """Raised (or recorded) when a directory cannot be enumerated."""

    def __init__(self, path: Path, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read {path}: {cause}")


class CaptureFormatError(NxshotError):
    """Raised when a capture filename fails fixed-offset parsing."""
    pass


class SourceReadError(NxshotError):
    """Raised when a capture file cannot be opened for reading."""

    def __init__(self, path: Path, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read {path}: {cause}")


class WriteError(NxshotError):
    """Raised when a destination directory or file cannot be written."""

    def __init__(self, path: Path, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write {path}: {cause}")


class OutputRootError(NxshotError):
    """Raised when the output root cannot be created. Fatal for the job."""
    pass


class CatalogError(NxshotError):
    """Raised when the identifier catalog cannot be loaded."""
    pass


class InvalidTransitionError(NxshotError):
    """Raised when an OrganizeJob is asked to move to a state it cannot reach."""
    pass
