import logging
from typing import Iterable, List, Optional, Tuple

from .. import config
from ..models import CaptureKind, FileEntry


def capture_kind(name: str) -> Optional[CaptureKind]:
    """Returns the capture kind for a filename, or None if it is not a capture."""
    if len(name) != config.CAPTURE_NAME_LENGTH:
        return None
    if name.endswith(config.IMAGE_EXT):
        return CaptureKind.IMAGE
    if name.endswith(config.VIDEO_EXT):
        return CaptureKind.VIDEO
    return None


def is_capture_name(name: str) -> bool:
    return capture_kind(name) is not None


def classify(entries: Iterable[FileEntry]) -> Tuple[List[FileEntry], List[FileEntry]]:
    """
    Splits entries into (images, videos), keeping walk order within each group.
    Anything else is dropped.
    """
    images: List[FileEntry] = []
    videos: List[FileEntry] = []
    for entry in entries:
        kind = capture_kind(entry.name)
        if kind is CaptureKind.IMAGE:
            images.append(entry)
        elif kind is CaptureKind.VIDEO:
            videos.append(entry)
        else:
            logging.debug(f"Not a capture file: {entry.path}")
    return images, videos


def order_candidates(entries: Iterable[FileEntry]) -> List[FileEntry]:
    """All images first, then all videos."""
    images, videos = classify(entries)
    return images + videos
