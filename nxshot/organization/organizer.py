import os
import re
import shutil
import logging
import tempfile
from pathlib import Path

from .. import config
from ..exceptions import OutputRootError, SourceReadError, WriteError
from ..models import CaptureRecord, CopyResult, CopyStatus


def folder_name(display_name: str) -> str:
    """
    Folder for an application name. Path separators are replaced so the
    folder always sits one level below the output root; the rest of the name
    is kept as is.
    """
    cleaned = re.sub(r"[\\/\x00]+", "_", display_name)
    if not cleaned.strip() or cleaned in {".", ".."}:
        return config.UNKNOWN_NAME
    return cleaned


class Organizer:
    def __init__(self, output_root: Path, overwrite: bool = True, dry_run: bool = False):
        self.output_root = output_root
        self.overwrite = overwrite
        self.dry_run = dry_run

    def ensure_output_root(self) -> Path:
        """Creates the output root if missing. Failure here stops the whole job."""
        if self.dry_run:
            return self.output_root
        try:
            self.output_root.mkdir(exist_ok=True)
        except OSError as e:
            raise OutputRootError(f"Cannot create output directory {self.output_root}: {e}") from e
        if not self.output_root.is_dir():
            raise OutputRootError(f"Output path {self.output_root} exists but is not a directory")
        return self.output_root

    def destination_for(self, record: CaptureRecord) -> Path:
        return self.output_root / folder_name(record.display_name) / record.name

    def organize(self, record: CaptureRecord) -> CopyResult:
        """
        Copies one capture into <output root>/<application>/<original name>.

        An existing destination file is replaced unless overwrite is off, in
        which case it is left alone and reported as skipped. The copy is
        written to a temporary file first, so the destination is either the
        old file or the complete new one. The source file is never modified.

        Raises:
            SourceReadError: if the capture file cannot be opened.
            WriteError: if the folder or the destination file cannot be written.
        """
        src = record.entry.path
        dest = self.destination_for(record)

        if self.dry_run:
            logging.info(f"[DRY RUN] Copy {src} -> {dest}")
            return CopyResult(source=src, destination=dest, status=CopyStatus.DRY_RUN, record=record)

        if not self.overwrite and dest.exists():
            logging.debug(f"Exists, not overwriting: {dest}")
            return CopyResult(source=src, destination=dest, status=CopyStatus.SKIPPED, record=record)

        try:
            dest.parent.mkdir(exist_ok=True)
        except OSError as e:
            raise WriteError(dest.parent, e) from e

        try:
            fsrc = record.entry.open()
        except OSError as e:
            raise SourceReadError(src, e) from e

        # Destination is either the previous file or the complete copy
        tmp = None
        try:
            with fsrc, tempfile.NamedTemporaryFile(dir=dest.parent, prefix=f".{dest.name}.",
                                                   suffix=".part", delete=False) as fdst:
                tmp = Path(fdst.name)
                shutil.copyfileobj(fsrc, fdst, config.COPY_CHUNK_SIZE)
            shutil.copymode(src, tmp)
            os.replace(tmp, dest)
        except OSError as e:
            if tmp is not None:
                tmp.unlink(missing_ok=True)
            raise WriteError(dest, e) from e

        logging.debug(f"Copied {src} -> {dest}")
        return CopyResult(source=src, destination=dest, status=CopyStatus.COPIED, record=record)
